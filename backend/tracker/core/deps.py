from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from tracker.core.database import get_db
from tracker.models.person import Person, Role
from tracker.services.people import PersonNotFound, get_person
from tracker.services.ranges import RangeWindow, resolve_range
from tracker.services.roles import RoleConfig, get_role_config


def role_config(role: Role) -> RoleConfig:
    return get_role_config(role)


def role_person(role: Role, person_id: int, db: Session = Depends(get_db)) -> Person:
    try:
        return get_person(db, person_id, role)
    except PersonNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def range_window(
    range_key: str | None = Query(default=None, alias="range"),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    tz: str | None = Query(default=None),
) -> RangeWindow:
    return resolve_range(range_key, start_date, end_date, tz)
