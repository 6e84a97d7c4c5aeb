from sqlalchemy.orm import Session

from tracker.models.person import Person, Role


class PersonNotFound(Exception):
    def __init__(self, person_id: int, role: Role | None = None):
        self.person_id = person_id
        self.role = role
        label = role.value.capitalize() if role else "Person"
        super().__init__(f"{label} not found")


def get_person(db: Session, person_id: int, role: Role | None = None) -> Person:
    query = db.query(Person).filter(Person.id == person_id)
    if role is not None:
        query = query.filter(Person.role == role)
    person = query.first()
    if not person:
        raise PersonNotFound(person_id, role)
    return person


def list_people(db: Session, role: Role | None = None, include_inactive: bool = False) -> list[Person]:
    query = db.query(Person)
    if role is not None:
        query = query.filter(Person.role == role)
    if not include_inactive:
        query = query.filter(Person.is_active.is_(True))
    return query.order_by(Person.first_name, Person.last_name).all()


def create_person(db: Session, first_name: str, last_name: str, role: Role) -> Person:
    person = Person(first_name=first_name.strip(), last_name=last_name.strip(), role=role)
    db.add(person)
    db.commit()
    db.refresh(person)
    return person
