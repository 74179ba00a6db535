"""Common dependencies for the membership service."""

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import SessionLocal
from app.repository import SqlAlchemyMembershipRepository
from app.services import MembershipService


def get_db() -> Generator:
    """Provide a transactional scope around a series of operations."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_membership_service(db: Session = Depends(get_db)) -> MembershipService:
    return MembershipService(
        SqlAlchemyMembershipRepository(db),
        assigned_by=settings.DEFAULT_ASSIGNED_BY,
        user_id=settings.DEFAULT_USER_ID,
    )


__all__ = ["get_db", "get_membership_service"]
