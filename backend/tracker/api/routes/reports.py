from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from tracker.core.database import get_db
from tracker.core.deps import range_window, role_config
from tracker.schemas.report import EmailReportQueued, EmailReportRequest
from tracker.services.ranges import RangeWindow
from tracker.services.reports import records_csv, rollup_pdf
from tracker.services.roles import RoleConfig
from tracker.services.rollup import build_rollup
from tracker.workers.tasks import send_rollup_report

router = APIRouter(prefix="/reports", tags=["reports"])


def _attachment(config: RoleConfig, window: RangeWindow, ext: str) -> dict[str, str]:
    name = f"{config.role.value}-{window.start_date.isoformat()}-{window.end_date.isoformat()}.{ext}"
    return {"Content-Disposition": f"attachment; filename={name}"}


@router.get("/{role}.csv")
def export_records_csv(
    person_id: int | None = Query(default=None, alias="personId"),
    config: RoleConfig = Depends(role_config),
    window: RangeWindow = Depends(range_window),
    db: Session = Depends(get_db),
):
    rollup = build_rollup(db, config, window, person_id)
    return Response(
        content=records_csv(config, rollup),
        media_type="text/csv",
        headers=_attachment(config, window, "csv"),
    )


@router.get("/{role}.pdf")
def export_rollup_pdf(
    person_id: int | None = Query(default=None, alias="personId"),
    config: RoleConfig = Depends(role_config),
    window: RangeWindow = Depends(range_window),
    db: Session = Depends(get_db),
):
    rollup = build_rollup(db, config, window, person_id)
    return Response(
        content=rollup_pdf(config, rollup),
        media_type="application/pdf",
        headers=_attachment(config, window, "pdf"),
    )


@router.post("/{role}/email", response_model=EmailReportQueued, status_code=202)
def email_rollup(
    payload: EmailReportRequest,
    person_id: int | None = Query(default=None, alias="personId"),
    config: RoleConfig = Depends(role_config),
    window: RangeWindow = Depends(range_window),
):
    # The worker re-resolves the window, so only custom ranges need explicit dates.
    custom = window.range_key == "custom"
    send_rollup_report.delay(
        config.role.value,
        payload.recipient_email,
        range_key=window.range_key,
        start_date=window.start_date.isoformat() if custom else None,
        end_date=window.end_date.isoformat() if custom else None,
        tz=window.time_zone,
        person_id=person_id,
    )
    return EmailReportQueued(role=config.role, recipient_email=payload.recipient_email)
