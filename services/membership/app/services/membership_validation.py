"""Validation pipeline for membership create requests.

Every check returns ``None`` or a :class:`MembershipValidationError`. The
pipeline stops at the first failure, so rules are reported in this order:
structural checks field by field, then the cash price ceiling, then the
billing period bounds of the chosen interval, and last a check that the
whole validity window fits the datetime range.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from app.models.enums import BillingInterval, PaymentMethod
from app.schemas import MembershipCreate
from app.services.billing_calendar import advance, ensure_utc, utc_now
from app.services.membership_errors import MembershipErrorKind, MembershipValidationError

CASH_PRICE_LIMIT = Decimal("100")

# matches the Numeric(12, 2) price column
PRICE_QUANTUM = Decimal("0.01")
MAX_RECURRING_PRICE = Decimal("9999999999.99")

# interval -> (min periods, max periods, unit used in reason codes)
BILLING_PERIOD_BOUNDS = {
    BillingInterval.MONTHLY: (6, 12, "Months"),
    BillingInterval.YEARLY: (3, 10, "Years"),
}

_DATETIME_ADAPTER = TypeAdapter(datetime)

FieldCheck = Callable[[Mapping[str, Any], Dict[str, Any]], Optional[MembershipValidationError]]
BusinessRule = Callable[[MembershipCreate], Optional[MembershipValidationError]]


@dataclass(frozen=True)
class ValidationResult:
    value: Optional[MembershipCreate] = None
    error: Optional[MembershipValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: MembershipCreate) -> "ValidationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: MembershipValidationError) -> "ValidationResult":
        return cls(error=error)


def _error(kind: MembershipErrorKind, reason: str) -> MembershipValidationError:
    return MembershipValidationError(kind, reason)


def _missing(reason: str) -> MembershipValidationError:
    return _error(MembershipErrorKind.MISSING_FIELD, reason)


def _invalid(reason: str) -> MembershipValidationError:
    return _error(MembershipErrorKind.INVALID_FIELD_VALUE, reason)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _check_name(payload: Mapping[str, Any], fields: Dict[str, Any]):
    value = payload.get("name")
    if value is None or (isinstance(value, str) and not value.strip()):
        return _missing("missingMandatoryFields")
    if not isinstance(value, str):
        return _invalid("invalidName")
    fields["name"] = value.strip()
    return None


def _check_recurring_price(payload: Mapping[str, Any], fields: Dict[str, Any]):
    value = payload.get("recurringPrice")
    if value is None:
        return _missing("missingMandatoryFields")
    if not _is_number(value):
        return _invalid("invalidRecurringPrice")
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        return _invalid("invalidRecurringPrice")
    if not price.is_finite():
        return _invalid("invalidRecurringPrice")
    if price <= 0:
        return _invalid("negativeRecurringPrice")
    if price > MAX_RECURRING_PRICE:
        return _invalid("recurringPriceTooLarge")
    # stored with two decimal places, anything finer is rounded to the cent
    price = price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if price <= 0:
        return _invalid("recurringPriceBelowOneCent")
    fields["recurring_price"] = price
    return None


def _check_payment_method(payload: Mapping[str, Any], fields: Dict[str, Any]):
    value = payload.get("paymentMethod")
    if value is None:
        return _missing("missingPaymentMethod")
    try:
        fields["payment_method"] = PaymentMethod(value)
    except (TypeError, ValueError):
        return _error(MembershipErrorKind.INVALID_ENUM_VALUE, "invalidPaymentMethod")
    return None


def _check_billing_interval(payload: Mapping[str, Any], fields: Dict[str, Any]):
    value = payload.get("billingInterval")
    if value is None:
        return _missing("missingBillingInterval")
    try:
        fields["billing_interval"] = BillingInterval(value)
    except (TypeError, ValueError):
        return _error(MembershipErrorKind.INVALID_BILLING_INTERVAL, "invalidBillingInterval")
    return None


def _check_billing_periods(payload: Mapping[str, Any], fields: Dict[str, Any]):
    value = payload.get("billingPeriods")
    if value is None:
        return _missing("missingBillingPeriods")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        return _invalid("invalidBillingPeriods")
    fields["billing_periods"] = value
    return None


def _check_valid_from(payload: Mapping[str, Any], fields: Dict[str, Any]):
    value = payload.get("validFrom")
    if value is None:
        return None
    try:
        fields["valid_from"] = ensure_utc(_DATETIME_ADAPTER.validate_python(value))
    except ValidationError:
        return _invalid("invalidValidFrom")
    except (OverflowError, ValueError):
        # representable in its own offset but not in UTC, e.g. 0001-01-01T00:00+05:00
        return _invalid("validityOutOfRange")
    return None


def _check_cash_price_limit(intent: MembershipCreate):
    if intent.payment_method is PaymentMethod.CASH and intent.recurring_price > CASH_PRICE_LIMIT:
        return _error(MembershipErrorKind.CASH_PRICE_EXCEEDS_LIMIT, "cashPriceBelow100")
    return None


def _check_billing_periods_range(intent: MembershipCreate):
    interval = intent.billing_interval
    if interval is BillingInterval.WEEKLY:
        return None
    if interval not in BILLING_PERIOD_BOUNDS:
        return _error(MembershipErrorKind.INVALID_BILLING_INTERVAL, "invalidBillingInterval")

    lower, upper, unit = BILLING_PERIOD_BOUNDS[interval]
    if intent.billing_periods > upper:
        return _error(
            MembershipErrorKind.BILLING_PERIODS_OUT_OF_RANGE,
            f"billingPeriodsMoreThan{upper}{unit}",
        )
    if intent.billing_periods < lower:
        return _error(
            MembershipErrorKind.BILLING_PERIODS_OUT_OF_RANGE,
            f"billingPeriodsLessThan{lower}{unit}",
        )
    return None


def _check_validity_window(intent: MembershipCreate, now: datetime):
    start = intent.valid_from if intent.valid_from is not None else ensure_utc(now)
    try:
        advance(start, intent.billing_interval, intent.billing_periods)
    except (OverflowError, ValueError):
        return _invalid("validityOutOfRange")
    return None


FIELD_CHECKS: Sequence[FieldCheck] = (
    _check_name,
    _check_recurring_price,
    _check_payment_method,
    _check_billing_interval,
    _check_billing_periods,
    _check_valid_from,
)

BUSINESS_RULES: Sequence[BusinessRule] = (
    _check_cash_price_limit,
    _check_billing_periods_range,
)


def validate_create_membership(payload: Any, *, now: Optional[datetime] = None) -> ValidationResult:
    """Validate a raw create request body without raising.

    ``now`` is the start used for the window range check when the request
    carries no ``validFrom``.
    """
    if not isinstance(payload, Mapping):
        return ValidationResult.failure(_invalid("invalidRequestBody"))

    fields: Dict[str, Any] = {}
    for check in FIELD_CHECKS:
        error = check(payload, fields)
        if error is not None:
            return ValidationResult.failure(error)

    intent = MembershipCreate(**fields)
    for rule in BUSINESS_RULES:
        error = rule(intent)
        if error is not None:
            return ValidationResult.failure(error)

    error = _check_validity_window(intent, now or utc_now())
    if error is not None:
        return ValidationResult.failure(error)

    return ValidationResult.success(intent)


__all__ = [
    "BILLING_PERIOD_BOUNDS",
    "CASH_PRICE_LIMIT",
    "ValidationResult",
    "validate_create_membership",
]
