from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional

from soundboard.models.soundboard import Soundboard


async def create_soundboard(
    db: AsyncSession,
    *,
    title: str,
    text: str,
    audio_url: str,
    file_name: str,
    created_by_email: str,
) -> Soundboard:
    """Insert a soundboard row and return it with generated id and timestamps."""
    db_soundboard = Soundboard(
        title=title,
        text=text,
        audio_url=audio_url,
        file_name=file_name,
        created_by_email=created_by_email,
    )
    db.add(db_soundboard)
    await db.flush()
    await db.refresh(db_soundboard)
    return db_soundboard


async def get_soundboard(db: AsyncSession, soundboard_id: str) -> Optional[Soundboard]:
    result = await db.execute(select(Soundboard).where(Soundboard.id == soundboard_id))
    return result.scalar_one_or_none()


async def get_soundboards_by_owner(db: AsyncSession, email: str) -> List[Soundboard]:
    """Owner's soundboards, newest first; id breaks ties so the order is stable."""
    result = await db.execute(
        select(Soundboard)
        .where(Soundboard.created_by_email == email)
        .order_by(Soundboard.created_at.desc(), Soundboard.id)
    )
    return list(result.scalars().all())


async def delete_soundboard(db: AsyncSession, soundboard: Soundboard) -> None:
    await db.delete(soundboard)
    await db.flush()
