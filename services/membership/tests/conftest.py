"""Shared fixtures for the membership service tests."""

import os

os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi import Depends  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.database import Base  # noqa: E402
from app.dependencies import get_db, get_membership_service  # noqa: E402
from app.main import app  # noqa: E402
from app.repository import (  # noqa: E402
    InMemoryMembershipRepository,
    SqlAlchemyMembershipRepository,
)
from app.services import MembershipService  # noqa: E402

FIXED_NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Callable clock that tests can move forward."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repository():
    return InMemoryMembershipRepository()


@pytest.fixture
def service(repository, clock):
    return MembershipService(repository, clock=clock)


@pytest.fixture
def make_payload():
    def _make(**overrides):
        payload = {
            "name": "Gold",
            "recurringPrice": 50,
            "paymentMethod": "cash",
            "billingInterval": "monthly",
            "billingPeriods": 6,
            "validFrom": "2024-03-01T00:00:00Z",
        }
        payload.update(overrides)
        return {key: value for key, value in payload.items() if value is not None}

    return _make


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory, clock):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    def override_membership_service(db: Session = Depends(get_db)):
        return MembershipService(SqlAlchemyMembershipRepository(db), clock=clock)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_membership_service] = override_membership_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
