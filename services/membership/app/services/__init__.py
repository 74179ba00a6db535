from .membership_errors import (
    MembershipError,
    MembershipErrorKind,
    MembershipNotFoundError,
    MembershipTerminationError,
    MembershipValidationError,
)
from .membership_service import MembershipService, MembershipWithPeriods

__all__ = [
    "MembershipError",
    "MembershipErrorKind",
    "MembershipNotFoundError",
    "MembershipService",
    "MembershipTerminationError",
    "MembershipValidationError",
    "MembershipWithPeriods",
]
