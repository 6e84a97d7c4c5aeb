from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from tracker.core.database import get_db
from tracker.models.person import Role
from tracker.schemas.person import PersonCreate, PersonResponse
from tracker.services.people import PersonNotFound, create_person, get_person, list_people

router = APIRouter(prefix="/people", tags=["people"])


@router.get("", response_model=list[PersonResponse])
def list_all_people(role: Role | None = None, include_inactive: bool = False, db: Session = Depends(get_db)):
    return list_people(db, role=role, include_inactive=include_inactive)


@router.post("", response_model=PersonResponse, status_code=201)
def add_person(payload: PersonCreate, db: Session = Depends(get_db)):
    return create_person(db, payload.first_name, payload.last_name, payload.role)


@router.get("/{person_id}", response_model=PersonResponse)
def read_person(person_id: int, db: Session = Depends(get_db)):
    try:
        return get_person(db, person_id)
    except PersonNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))
