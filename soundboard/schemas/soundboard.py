from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional


class SoundboardCreate(BaseModel):
    title: str
    text: str
    email: str


class SoundboardResponse(BaseModel):
    id: str
    title: str
    text: str
    audio_url: str
    file_name: str
    created_by_email: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class SoundboardWithStatus(SoundboardResponse):
    file_exists: bool


class SoundboardEnvelope(BaseModel):
    success: bool = True
    message: str
    data: SoundboardResponse


class SoundboardListEnvelope(BaseModel):
    success: bool = True
    message: str
    data: List[SoundboardWithStatus]
