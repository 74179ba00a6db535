"""Typed failures raised by the membership lifecycle."""

from __future__ import annotations

from enum import Enum


class MembershipErrorKind(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_FIELD_VALUE = "InvalidFieldValue"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    CASH_PRICE_EXCEEDS_LIMIT = "CashPriceExceedsLimit"
    BILLING_PERIODS_OUT_OF_RANGE = "BillingPeriodsOutOfRange"
    INVALID_BILLING_INTERVAL = "InvalidBillingInterval"
    MEMBERSHIP_NOT_FOUND = "MembershipNotFound"
    ALREADY_TERMINAL_STATE = "AlreadyTerminalState"
    NO_PENDING_PERIODS = "NoPendingPeriods"


class MembershipError(Exception):
    """Base error carrying a machine readable ``kind`` and a ``reason`` code."""

    def __init__(self, kind: MembershipErrorKind, reason: str, message: str | None = None):
        self.kind = kind
        self.reason = reason
        self.message = message or reason
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, reason={self.reason!r})"


class MembershipValidationError(MembershipError):
    """The create request breaks a structural or business rule."""


class MembershipNotFoundError(MembershipError):
    def __init__(self, membership_id: int):
        super().__init__(
            MembershipErrorKind.MEMBERSHIP_NOT_FOUND,
            "membershipNotFound",
            f"membership with id: {membership_id} could not be found.",
        )
        self.membership_id = membership_id


class MembershipTerminationError(MembershipError):
    """The membership cannot be terminated in its current state."""


__all__ = [
    "MembershipError",
    "MembershipErrorKind",
    "MembershipNotFoundError",
    "MembershipTerminationError",
    "MembershipValidationError",
]
