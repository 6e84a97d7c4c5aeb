import os
import tempfile

# Settings are read once at import time; point them at a throwaway database first.
_tmp_dir = tempfile.mkdtemp(prefix="eod-tracker-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmp_dir, 'test.db')}"
os.environ["ALLOWED_HOSTS"] = '["*"]'
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SMTP_HOST"] = ""
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from tracker import models  # noqa: E402,F401
from tracker.core.database import Base, SessionLocal, engine  # noqa: E402
from tracker.main import app  # noqa: E402
from tracker.models.person import Role  # noqa: E402
from tracker.services.people import create_person  # noqa: E402


@pytest.fixture(scope="function")
def db():
    """Fresh SQLite schema per test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session):
    return TestClient(app)


@pytest.fixture
def dialer(db: Session):
    return create_person(db, "Ann", "Lee", Role.dialer)


@pytest.fixture
def closer(db: Session):
    return create_person(db, "Carl", "Moss", Role.closer)
