import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from soundboard.core.exceptions import NotFoundError, ValidationError
from soundboard.crud import history as history_crud
from soundboard.db.session import get_db
from soundboard.models.history import History
from soundboard.schemas.history import (
    HistoryCreate,
    HistoryCreatedEnvelope,
    HistoryEntry,
    HistoryListEnvelope,
    HistoryMessage,
    HistoryRecord,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def to_entry(history: History) -> HistoryEntry:
    return HistoryEntry(
        id=history.id,
        title=history.title,
        message=[
            HistoryMessage(
                text=history.message,
                created_at=history.created_at,
                is_speech_to_text=history.is_speech_to_text,
            )
        ],
        detection_type="Speech to Text" if history.is_speech_to_text else "Gesture Detection",
    )


@router.post("", response_model=HistoryCreatedEnvelope, status_code=201)
async def create_history(
    payload: HistoryCreate,
    db: AsyncSession = Depends(get_db),
):
    if not payload.id or not payload.title or not payload.message or not payload.email:
        raise ValidationError("Id, Judul, Pesan, is_speech_to_text, dan email harus diisi")
    if await history_crud.get_history(db, payload.id) is not None:
        raise ValidationError(f"History dengan ID {payload.id} sudah ada")
    try:
        history = await history_crud.create_history(db, payload)
    except IntegrityError as e:
        raise ValidationError(f"History dengan ID {payload.id} sudah ada") from e
    return HistoryCreatedEnvelope(data=HistoryRecord.model_validate(history))


@router.get("", response_model=HistoryListEnvelope)
async def get_histories(db: AsyncSession = Depends(get_db)):
    histories = await history_crud.get_histories(db)
    if not histories:
        raise NotFoundError("History tidak ditemukan")
    return HistoryListEnvelope(data=[to_entry(history) for history in histories])


@router.get("/{history_id}", response_model=HistoryListEnvelope)
async def get_history(history_id: str, db: AsyncSession = Depends(get_db)):
    logger.debug("Searching for history with ID: %s", history_id)
    history = await history_crud.get_history(db, history_id)
    if history is None:
        raise NotFoundError("History tidak ditemukan")
    return HistoryListEnvelope(data=[to_entry(history)])


@router.delete("/{history_id}")
async def delete_history(history_id: str, db: AsyncSession = Depends(get_db)):
    history = await history_crud.get_history(db, history_id)
    if history is None:
        raise NotFoundError("History tidak ditemukan")
    await history_crud.delete_history(db, history)
    return {"status": "success", "message": f"History dengan ID {history_id} telah dihapus"}
