from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from tracker.core.config import get_settings
from tracker.core.database import get_db
from tracker.core.deps import role_config, role_person
from tracker.core.rate_limit import limiter
from tracker.models.person import Person
from tracker.schemas.eod import EodFormResponse, SubmissionConflict, SubmissionRejected, SubmissionSaved
from tracker.services.people import PersonNotFound
from tracker.services.roles import RoleConfig
from tracker.services.validation import parse_day, read_form_values
from tracker.services.writer import SubmissionOutcome, submit_record

settings = get_settings()

router = APIRouter(prefix="/eod", tags=["eod"])

_TRUTHY = {"true", "1", "yes", "on"}


@router.get("/{role}/{person_id}", response_model=EodFormResponse)
def load_form(
    config: RoleConfig = Depends(role_config),
    person: Person = Depends(role_person),
):
    return EodFormResponse.for_role(config, person)


@router.post(
    "/{role}/{person_id}",
    response_model=SubmissionSaved,
    responses={400: {"model": SubmissionRejected}, 409: {"model": SubmissionConflict}},
)
@limiter.limit(settings.SUBMIT_RATE_LIMIT)
async def submit_form(
    request: Request,
    person_id: int,
    db: Session = Depends(get_db),
    config: RoleConfig = Depends(role_config),
):
    form = await request.form()
    day = parse_day(form.get("date"))
    force_overwrite = str(form.get("forceOverwrite", "")).strip().lower() in _TRUTHY
    values = read_form_values(config, form)

    try:
        result = submit_record(db, config, person_id, day, values, force_overwrite=force_overwrite)
    except PersonNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    if result.outcome == SubmissionOutcome.rejected:
        return JSONResponse(status_code=400, content=SubmissionRejected(errors=result.errors).model_dump())
    if result.outcome == SubmissionOutcome.conflict:
        body = SubmissionConflict(existing_date=result.existing_date)
        return JSONResponse(status_code=409, content=body.model_dump(mode="json", by_alias=True))
    return SubmissionSaved()
