"""Schemas exposed by the membership service."""

from app.schemas.membership import (
    ErrorResponse,
    MembershipCreate,
    MembershipPeriodResponse,
    MembershipResponse,
    MembershipWithPeriodsResponse,
)

__all__ = [
    "ErrorResponse",
    "MembershipCreate",
    "MembershipPeriodResponse",
    "MembershipResponse",
    "MembershipWithPeriodsResponse",
]
