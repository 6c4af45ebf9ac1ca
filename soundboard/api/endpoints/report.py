import math

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from soundboard.core.exceptions import ValidationError
from soundboard.crud import report as report_crud
from soundboard.db.session import get_db
from soundboard.schemas.report import ReportCreate, ReportEnvelope, ReportPage, ReportResponse

router = APIRouter()


@router.post("", response_model=ReportEnvelope, status_code=201)
async def create_report(
    payload: ReportCreate,
    db: AsyncSession = Depends(get_db),
):
    if not payload.comment:
        raise ValidationError("Comment harus diisi")
    report = await report_crud.create_report(db, payload)
    return ReportEnvelope(data=ReportResponse.model_validate(report))


@router.get("", response_model=ReportPage)
async def get_reports(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Paginated reports, newest first."""
    total, reports = await report_crud.get_reports_page(db, skip=(page - 1) * limit, limit=limit)
    return ReportPage(
        total=total,
        current_page=page,
        total_pages=math.ceil(total / limit),
        data=[ReportResponse.model_validate(report) for report in reports],
    )
