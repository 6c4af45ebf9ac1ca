from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import List


class HistoryCreate(BaseModel):
    id: str
    title: str
    message: str
    is_speech_to_text: bool
    email: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_numeric_id(cls, value):
        # Clients generate ids themselves and some send them as numbers.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class HistoryRecord(HistoryCreate):
    created_at: datetime

    class Config:
        from_attributes = True


class HistoryMessage(BaseModel):
    text: str
    created_at: datetime
    is_speech_to_text: bool


class HistoryEntry(BaseModel):
    """A history row as the client app renders it."""

    id: str
    title: str
    message: List[HistoryMessage]
    detection_type: str


class HistoryCreatedEnvelope(BaseModel):
    status: str = "success create data"
    data: HistoryRecord


class HistoryListEnvelope(BaseModel):
    status: str = "success get data"
    data: List[HistoryEntry]
