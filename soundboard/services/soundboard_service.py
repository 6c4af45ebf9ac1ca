import asyncio
import logging
import uuid
from typing import List

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from soundboard.core.exceptions import (
    NotFoundError,
    PersistenceError,
    StorageError,
    SynthesisError,
    ValidationError,
)
from soundboard.core.outcome import Outcome, attempt
from soundboard.crud import soundboard as soundboard_crud
from soundboard.models.soundboard import Soundboard
from soundboard.schemas.soundboard import SoundboardResponse, SoundboardWithStatus
from soundboard.services.storage_service import StorageService
from soundboard.services.tts_service import SpeechSynthesizer

logger = logging.getLogger(__name__)

AUDIO_EXTENSION = ".mp3"
AUDIO_CONTENT_TYPE = "audio/mpeg"

# Client-facing messages; the underlying cause only goes to the log.
CREATE_FAILED = "Failed to create soundboard"
FETCH_FAILED = "Failed to fetch soundboards"
DELETE_FAILED = "Failed to delete soundboard"

# asyncpg signals connect and command timeouts with asyncio.TimeoutError.
DATABASE_ERRORS = (SQLAlchemyError, asyncio.TimeoutError)


def object_key(soundboard: Soundboard) -> str:
    return soundboard.file_name or StorageService.key_from_url(soundboard.audio_url)


class SoundboardService:
    """
    Lifecycle of soundboards across the speech backend, the bucket and the database.

    A row is only inserted once its audio is stored. Deletion removes the
    row even when the object cannot be removed, so a blob may be orphaned
    but a row never loses its audio at creation time.
    """

    def __init__(self, storage: StorageService, synthesizer: SpeechSynthesizer):
        self.storage = storage
        self.synthesizer = synthesizer

    async def create(self, db: AsyncSession, title: str, text: str, email: str) -> SoundboardResponse:
        if not title or not text or not email:
            raise ValidationError("Title, text, and email are required")

        try:
            audio = await run_in_threadpool(self.synthesizer.synthesize, text)
        except SynthesisError as e:
            logger.error("Speech synthesis failed: %s", e.message)
            raise SynthesisError(CREATE_FAILED) from e

        file_name = f"{uuid.uuid4()}{AUDIO_EXTENSION}"
        try:
            audio_url = await run_in_threadpool(
                self.storage.upload_bytes, file_name, audio, AUDIO_CONTENT_TYPE
            )
        except StorageError as e:
            logger.error("Audio upload failed: %s", e.message)
            raise StorageError(CREATE_FAILED) from e

        try:
            soundboard = await soundboard_crud.create_soundboard(
                db,
                title=title,
                text=text,
                audio_url=audio_url,
                file_name=file_name,
                created_by_email=email,
            )
        except DATABASE_ERRORS as e:
            logger.error("Failed to save soundboard: %r", e)
            cleanup = await attempt(self.storage.delete_object, file_name)
            if not cleanup.ok:
                logger.warning("Orphaned %s after failed insert: %s", file_name, cleanup.error)
            raise PersistenceError(CREATE_FAILED) from e

        logger.info("Created soundboard %s for %s", soundboard.id, email)
        return SoundboardResponse.model_validate(soundboard)

    async def list_by_owner(self, db: AsyncSession, email: str) -> List[SoundboardWithStatus]:
        try:
            soundboards = await soundboard_crud.get_soundboards_by_owner(db, email)
        except DATABASE_ERRORS as e:
            logger.error("Failed to fetch soundboards: %r", e)
            raise PersistenceError(FETCH_FAILED) from e
        if not soundboards:
            raise NotFoundError("No soundboards found for this email")

        checks = await asyncio.gather(
            *(attempt(self.storage.object_exists, object_key(sb)) for sb in soundboards)
        )
        return [
            SoundboardWithStatus(
                **SoundboardResponse.model_validate(sb).model_dump(),
                file_exists=self._file_exists(sb, check),
            )
            for sb, check in zip(soundboards, checks)
        ]

    @staticmethod
    def _file_exists(soundboard: Soundboard, check: Outcome[bool]) -> bool:
        if not check.ok:
            logger.warning("Error checking file for soundboard %s: %s", soundboard.id, check.error)
        return bool(check.value_or(False))

    async def delete(self, db: AsyncSession, soundboard_id: str) -> None:
        try:
            soundboard = await soundboard_crud.get_soundboard(db, soundboard_id)
        except DATABASE_ERRORS as e:
            logger.error("Failed to look up soundboard %s: %r", soundboard_id, e)
            raise PersistenceError(DELETE_FAILED) from e
        if soundboard is None:
            raise NotFoundError("Soundboard not found")

        removed = await attempt(self.storage.delete_object, object_key(soundboard))
        if not removed.ok:
            logger.warning("Failed to delete file for soundboard %s: %s", soundboard_id, removed.error)

        try:
            await soundboard_crud.delete_soundboard(db, soundboard)
        except DATABASE_ERRORS as e:
            logger.error("Failed to delete soundboard %s: %r", soundboard_id, e)
            raise PersistenceError(DELETE_FAILED) from e
        logger.info("Deleted soundboard %s", soundboard_id)
