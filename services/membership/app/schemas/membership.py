"""Pydantic schemas for membership resources."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import BillingInterval, MembershipState, PaymentMethod, PeriodState


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MembershipCreate(CamelModel):
    """A create request that already passed every validation rule."""

    name: str
    recurring_price: Decimal = Field(..., gt=0)
    payment_method: PaymentMethod
    billing_interval: BillingInterval
    billing_periods: int = Field(..., gt=0)
    valid_from: Optional[datetime] = None


class MembershipResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    uuid: str
    name: str
    user_id: int
    assigned_by: str
    payment_method: PaymentMethod
    recurring_price: Decimal
    billing_interval: BillingInterval
    billing_periods: int
    valid_from: datetime
    valid_until: datetime
    state: MembershipState


class MembershipPeriodResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    uuid: str
    membership_id: int
    start: datetime
    end: datetime
    state: PeriodState


class MembershipWithPeriodsResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    membership: MembershipResponse
    periods: List[MembershipPeriodResponse]


class ErrorResponse(BaseModel):
    detail: str
    kind: Optional[str] = None
