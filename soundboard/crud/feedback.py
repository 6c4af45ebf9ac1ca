from sqlalchemy.ext.asyncio import AsyncSession

from soundboard.models.feedback import Feedback
from soundboard.schemas.feedback import FeedbackCreate


async def create_feedback(db: AsyncSession, feedback_data: FeedbackCreate) -> Feedback:
    db_feedback = Feedback(**feedback_data.model_dump())
    db.add(db_feedback)
    await db.flush()
    await db.refresh(db_feedback)
    return db_feedback
