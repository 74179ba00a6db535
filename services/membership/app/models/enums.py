"""Closed value sets shared by models, schemas and services."""

from __future__ import annotations

from enum import Enum


class PaymentMethod(str, Enum):
    CASH = "cash"
    CREDIT_CARD = "credit card"

    @classmethod
    def _missing_(cls, value: object) -> PaymentMethod | None:
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", " ").replace("_", " ")
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class BillingInterval(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class MembershipState(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"

    @property
    def is_terminal(self) -> bool:
        return self in (MembershipState.EXPIRED, MembershipState.TERMINATED)


class PeriodState(str, Enum):
    PLANNED = "planned"
    TERMINATED = "terminated"


__all__ = ["PaymentMethod", "BillingInterval", "MembershipState", "PeriodState"]
