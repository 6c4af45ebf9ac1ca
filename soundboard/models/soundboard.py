import uuid

from sqlalchemy import Column, String, Text, DateTime

from soundboard.db.base import Base, utcnow


class Soundboard(Base):
    __tablename__ = "soundboards"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    text = Column(Text, nullable=False)
    audio_url = Column(String(500), nullable=False)
    file_name = Column(String(255), nullable=False)
    created_by_email = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
