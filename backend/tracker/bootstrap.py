import logging
import os

from tracker.core.config import get_settings
from tracker.core.database import SessionLocal, init_db
from tracker.core.logging_config import configure_logging
from tracker.models.person import Person, Role
from tracker.services.people import create_person

logger = logging.getLogger(__name__)


def seed_person(first_name: str, last_name: str, role: Role) -> Person:
    db = SessionLocal()
    try:
        existing = (
            db.query(Person)
            .filter(Person.first_name == first_name, Person.last_name == last_name, Person.role == role)
            .first()
        )
        if existing:
            logger.info("%s already exists: %s (id=%s)", role.value, existing.full_name, existing.id)
            return existing

        person = create_person(db, first_name, last_name, role)
        logger.info("Created %s: %s (id=%s)", role.value, person.full_name, person.id)
        return person
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging(get_settings().LOG_LEVEL)
    init_db()
    # BOOTSTRAP_PERSON="Jane Doe", BOOTSTRAP_ROLE=dialer|setter|closer
    full_name = os.getenv("BOOTSTRAP_PERSON", "").strip()
    role = os.getenv("BOOTSTRAP_ROLE", "dialer").strip().lower()
    if full_name and role in Role.__members__:
        first, _, last = full_name.partition(" ")
        seed_person(first, last.strip(), Role(role))
    else:
        logger.info("Bootstrap skipped. Set BOOTSTRAP_PERSON and BOOTSTRAP_ROLE to seed a person.")
