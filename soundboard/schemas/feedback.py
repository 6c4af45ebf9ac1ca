from pydantic import BaseModel


class FeedbackCreate(BaseModel):
    comment: str
    rating: int


class FeedbackResponse(FeedbackCreate):
    id: int

    class Config:
        from_attributes = True


class FeedbackEnvelope(BaseModel):
    success: bool = True
    data: FeedbackResponse
