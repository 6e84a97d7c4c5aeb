"""EOD record writer: validate, check for an existing (person, date) row, upsert.

A resubmission for a day that already has a record is refused with a
``conflict`` outcome unless the caller sets ``force_overwrite``; the client is
expected to confirm with the user and resubmit. Overwrites replace every metric
field. There is no locking: two forced writes for the same key both succeed and
the last one wins.
"""
import datetime as dt
import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tracker.services.people import get_person
from tracker.services.roles import RoleConfig
from tracker.services.validation import validate_submission

logger = logging.getLogger(__name__)


class SubmissionOutcome(str, enum.Enum):
    saved = "saved"
    rejected = "rejected"
    conflict = "conflict"


@dataclass
class SubmissionResult:
    outcome: SubmissionOutcome
    errors: dict[str, str] = field(default_factory=dict)
    existing_date: dt.date | None = None
    record: object | None = None


def find_record(db: Session, config: RoleConfig, person_id: int, day: dt.date):
    model = config.model
    return db.query(model).filter(model.person_id == person_id, model.date == day).first()


def apply_values(config: RoleConfig, record, values: Mapping[str, float]) -> None:
    for f in config.fields:
        value = values[f.name]
        setattr(record, f.name, round(float(value), 2) if f.is_currency else int(value))


def upsert_record(db: Session, config: RoleConfig, person_id: int, day: dt.date, values: Mapping[str, float]):
    record = find_record(db, config, person_id, day)
    if record is None:
        record = config.model(person_id=person_id, date=day)
        apply_values(config, record, values)
        db.add(record)
        try:
            db.commit()
        except IntegrityError:
            # Lost a create race on the unique key; overwrite the winner.
            db.rollback()
            record = find_record(db, config, person_id, day)
            apply_values(config, record, values)
            record.updated_at = dt.datetime.utcnow()
            db.commit()
    else:
        apply_values(config, record, values)
        record.updated_at = dt.datetime.utcnow()
        db.commit()
    db.refresh(record)
    return record


def submit_record(
    db: Session,
    config: RoleConfig,
    person_id: int,
    day: dt.date | None,
    values: Mapping[str, float],
    force_overwrite: bool = False,
) -> SubmissionResult:
    get_person(db, person_id, config.role)

    errors = validate_submission(config, day, values)
    if errors:
        logger.info("%s EOD rejected person_id=%s date=%s fields=%s", config.role.value, person_id, day, sorted(errors))
        return SubmissionResult(SubmissionOutcome.rejected, errors=errors)

    if not force_overwrite and find_record(db, config, person_id, day) is not None:
        logger.info("%s EOD conflict person_id=%s date=%s", config.role.value, person_id, day)
        return SubmissionResult(SubmissionOutcome.conflict, existing_date=day)

    record = upsert_record(db, config, person_id, day, values)
    logger.info(
        "%s EOD saved person_id=%s date=%s overwrite=%s", config.role.value, person_id, day, force_overwrite
    )
    return SubmissionResult(SubmissionOutcome.saved, record=record)
