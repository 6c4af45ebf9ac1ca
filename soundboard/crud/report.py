from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import List, Tuple

from soundboard.models.report import Report
from soundboard.schemas.report import ReportCreate


async def create_report(db: AsyncSession, report_data: ReportCreate) -> Report:
    db_report = Report(**report_data.model_dump())
    db.add(db_report)
    await db.flush()
    await db.refresh(db_report)
    return db_report


async def get_reports_page(db: AsyncSession, skip: int = 0, limit: int = 10) -> Tuple[int, List[Report]]:
    """One page of reports, newest first, together with the overall count."""
    total = (await db.execute(select(func.count()).select_from(Report))).scalar_one()
    result = await db.execute(
        select(Report).order_by(Report.created_at.desc()).offset(skip).limit(limit)
    )
    return total, list(result.scalars().all())
