from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional

from soundboard.models.history import History
from soundboard.schemas.history import HistoryCreate


async def create_history(db: AsyncSession, history_data: HistoryCreate) -> History:
    db_history = History(**history_data.model_dump())
    db.add(db_history)
    await db.flush()
    await db.refresh(db_history)
    return db_history


async def get_history(db: AsyncSession, history_id: str) -> Optional[History]:
    result = await db.execute(select(History).where(History.id == history_id))
    return result.scalar_one_or_none()


async def get_histories(db: AsyncSession) -> List[History]:
    result = await db.execute(select(History).order_by(History.created_at.desc()))
    return list(result.scalars().all())


async def delete_history(db: AsyncSession, history: History) -> None:
    await db.delete(history)
    await db.flush()
