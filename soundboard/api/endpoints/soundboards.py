from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from soundboard.api.deps import get_soundboard_service
from soundboard.db.session import get_db
from soundboard.schemas.soundboard import (
    SoundboardCreate,
    SoundboardEnvelope,
    SoundboardListEnvelope,
)
from soundboard.services.soundboard_service import SoundboardService

router = APIRouter()


@router.post("", response_model=SoundboardEnvelope, status_code=201)
async def create_soundboard(
    payload: SoundboardCreate,
    db: AsyncSession = Depends(get_db),
    service: SoundboardService = Depends(get_soundboard_service),
):
    """Synthesize ``text`` to MP3, store it and save the soundboard."""
    soundboard = await service.create(db, payload.title, payload.text, payload.email)
    return SoundboardEnvelope(message="Soundboard created successfully", data=soundboard)


@router.get("/{email}", response_model=SoundboardListEnvelope)
async def get_soundboards(
    email: str,
    db: AsyncSession = Depends(get_db),
    service: SoundboardService = Depends(get_soundboard_service),
):
    """Owner's soundboards, newest first, each flagged with whether its audio still exists."""
    soundboards = await service.list_by_owner(db, email)
    return SoundboardListEnvelope(message="Soundboards retrieved successfully", data=soundboards)


@router.delete("/{soundboard_id}")
async def delete_soundboard(
    soundboard_id: str,
    db: AsyncSession = Depends(get_db),
    service: SoundboardService = Depends(get_soundboard_service),
):
    await service.delete(db, soundboard_id)
    return {"success": True, "message": "Soundboard deleted successfully"}
