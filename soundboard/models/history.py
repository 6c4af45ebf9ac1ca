from sqlalchemy import Column, String, Text, Boolean, DateTime

from soundboard.db.base import Base, utcnow


class History(Base):
    __tablename__ = "history"

    id = Column(String(255), primary_key=True)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    is_speech_to_text = Column(Boolean, nullable=False)
    email = Column(String(255), nullable=False, index=True)
