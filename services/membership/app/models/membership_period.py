"""SQLAlchemy model for the billing periods of a membership."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.enums import PeriodState
from app.models.types import UTCDateTime, value_enum


class MembershipPeriod(Base):
    """One contiguous slice ``[start, end)`` of a membership's validity window."""

    __tablename__ = "membership_periods"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    # position within the owning membership, starting at 1
    id: Mapped[int] = mapped_column(Integer, nullable=False)
    membership_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("memberships.id"), nullable=False, index=True
    )
    start: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    state: Mapped[PeriodState] = mapped_column(value_enum(PeriodState), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            "MembershipPeriod(membership_id={membership_id}, id={id}, state={state})"
        ).format(membership_id=self.membership_id, id=self.id, state=self.state)
