from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class ProfileCreate(BaseModel):
    name: str
    email: str


class ProfileResponse(BaseModel):
    id: int
    name: str
    email: str
    profile_picture_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileCreatedEnvelope(BaseModel):
    success: bool = True
    message: str
    data: ProfileCreate


class ProfileEnvelope(BaseModel):
    success: bool = True
    data: ProfileResponse
