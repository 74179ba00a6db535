"""Business logic for membership operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, List, Optional
from uuid import uuid4

from app.models import Membership, MembershipPeriod, MembershipState, PeriodState
from app.repository import MembershipRepository
from app.services.billing_calendar import compute_validity, ensure_utc, utc_now
from app.services.membership_errors import (
    MembershipErrorKind,
    MembershipNotFoundError,
    MembershipTerminationError,
)
from app.services.membership_period_service import generate_periods
from app.services.membership_state import current_state, derive_state
from app.services.membership_validation import validate_create_membership

logger = logging.getLogger(__name__)


@dataclass
class MembershipWithPeriods:
    membership: Membership
    periods: List[MembershipPeriod] = field(default_factory=list)


class MembershipService:
    """Service layer encapsulating the membership lifecycle."""

    def __init__(
        self,
        repository: MembershipRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        assigned_by: str = "Admin",
        user_id: int = 2000,
    ):
        self._repository = repository
        self._clock = clock or utc_now
        self._assigned_by = assigned_by
        self._user_id = user_id

    def _now(self) -> datetime:
        return ensure_utc(self._clock())

    def create_membership(self, payload: Any) -> MembershipWithPeriods:
        """Validate ``payload`` and persist the membership with its periods.

        Raises the first :class:`MembershipValidationError` found; nothing is
        stored in that case.
        """
        now = self._now()
        result = validate_create_membership(payload, now=now)
        if not result.ok:
            logger.info("Rejected membership request: %s", result.error.reason)
            raise result.error

        intent = result.value
        valid_from, valid_until = compute_validity(
            intent.valid_from, intent.billing_interval, intent.billing_periods, now=now
        )
        state = derive_state(valid_from, valid_until, now)

        with self._repository.transaction():
            membership = Membership(
                id=self._repository.next_membership_id(),
                uuid=str(uuid4()),
                name=intent.name,
                user_id=self._user_id,
                assigned_by=self._assigned_by,
                payment_method=intent.payment_method,
                recurring_price=intent.recurring_price,
                billing_interval=intent.billing_interval,
                billing_periods=intent.billing_periods,
                valid_from=valid_from,
                valid_until=valid_until,
                state=state,
            )
            periods = generate_periods(
                membership.id, valid_from, intent.billing_interval, intent.billing_periods
            )
            self._repository.append_membership(membership)
            self._repository.append_periods(periods)

        logger.info(
            "Created membership %s (%s) with %d %s periods, state=%s",
            membership.id,
            membership.uuid,
            len(periods),
            intent.billing_interval.value,
            state.value,
        )
        return MembershipWithPeriods(membership=membership, periods=periods)

    def list_memberships_with_periods(self) -> List[MembershipWithPeriods]:
        """Every stored membership in storage order, joined with its periods."""
        now = self._now()
        with self._repository.transaction():
            memberships = self._repository.all_memberships()
            periods = self._repository.all_periods()
            for membership in memberships:
                membership.state = current_state(membership, now)

        return [
            MembershipWithPeriods(
                membership=membership,
                periods=[p for p in periods if p.membership_id == membership.id],
            )
            for membership in memberships
        ]

    def get_membership_with_periods(self, membership_id: int) -> MembershipWithPeriods:
        now = self._now()
        with self._repository.transaction():
            membership = self._repository.get_membership(membership_id)
            if membership is None:
                raise MembershipNotFoundError(membership_id)
            membership.state = current_state(membership, now)
            periods = self._repository.list_periods(membership_id)
        return MembershipWithPeriods(membership=membership, periods=periods)

    def terminate_membership(self, membership_id: int) -> None:
        """End a pending or active membership and cancel its planned periods."""
        now = self._now()
        with self._repository.transaction():
            membership = self._repository.get_membership(membership_id)
            if membership is None:
                raise MembershipNotFoundError(membership_id)

            state = current_state(membership, now)
            if state.is_terminal:
                raise MembershipTerminationError(
                    MembershipErrorKind.ALREADY_TERMINAL_STATE,
                    f"membershipAlready{state.value.capitalize()}",
                )

            planned = [
                period
                for period in self._repository.list_periods(membership_id)
                if period.state == PeriodState.PLANNED
            ]
            if not planned:
                raise MembershipTerminationError(
                    MembershipErrorKind.NO_PENDING_PERIODS, "noPendingPeriods"
                )

            membership.state = MembershipState.TERMINATED
            for period in planned:
                period.state = PeriodState.TERMINATED

        logger.info(
            "Terminated membership %s and %d planned periods", membership_id, len(planned)
        )


__all__ = ["MembershipService", "MembershipWithPeriods"]
