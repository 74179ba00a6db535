"""SQLAlchemy models for memberships."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.enums import BillingInterval, MembershipState, PaymentMethod
from app.models.types import UTCDateTime, value_enum


class Membership(Base):
    """A subscription with a bounded validity window and a lifecycle state."""

    __tablename__ = "memberships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    uuid: Mapped[str] = mapped_column(String(36), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(300), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    assigned_by: Mapped[str] = mapped_column(String(100), nullable=False)
    payment_method: Mapped[PaymentMethod] = mapped_column(
        value_enum(PaymentMethod), nullable=False
    )
    recurring_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    billing_interval: Mapped[BillingInterval] = mapped_column(
        value_enum(BillingInterval), nullable=False
    )
    billing_periods: Mapped[int] = mapped_column(Integer, nullable=False)
    valid_from: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    valid_until: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    state: Mapped[MembershipState] = mapped_column(
        value_enum(MembershipState), nullable=False
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            "Membership(id={id}, name={name!r}, state={state})"
        ).format(id=self.id, name=self.name, state=self.state)
