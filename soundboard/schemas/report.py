from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional


class ReportCreate(BaseModel):
    comment: str


class ReportResponse(BaseModel):
    id: str
    comment: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class ReportEnvelope(BaseModel):
    success: bool = True
    data: ReportResponse


class ReportPage(BaseModel):
    success: bool = True
    total: int
    current_page: int
    total_pages: int
    data: List[ReportResponse]

    class Config:
        populate_by_name = True
        alias_generator = to_camel
