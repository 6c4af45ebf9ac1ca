from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from soundboard.core.exceptions import ValidationError
from soundboard.crud import feedback as feedback_crud
from soundboard.db.session import get_db
from soundboard.schemas.feedback import FeedbackCreate, FeedbackEnvelope, FeedbackResponse

router = APIRouter()

MIN_RATING = 1
MAX_RATING = 4


@router.post("", response_model=FeedbackEnvelope, status_code=201)
async def create_feedback(
    payload: FeedbackCreate,
    db: AsyncSession = Depends(get_db),
):
    if not payload.comment or not payload.rating:
        raise ValidationError("Rating harus diisi")
    if not MIN_RATING <= payload.rating <= MAX_RATING:
        raise ValidationError(f"Rating harus antara {MIN_RATING}-{MAX_RATING}")

    feedback = await feedback_crud.create_feedback(db, payload)
    return FeedbackEnvelope(data=FeedbackResponse.model_validate(feedback))
