from .enums import BillingInterval, MembershipState, PaymentMethod, PeriodState
from .membership import Membership
from .membership_period import MembershipPeriod

__all__ = [
    "BillingInterval",
    "Membership",
    "MembershipPeriod",
    "MembershipState",
    "PaymentMethod",
    "PeriodState",
]
