"""Billing period generation for memberships."""

from __future__ import annotations

from datetime import datetime
from typing import List
from uuid import uuid4

from app.models import BillingInterval, MembershipPeriod, PeriodState
from app.services.billing_calendar import advance


def generate_periods(
    membership_id: int,
    valid_from: datetime,
    interval: BillingInterval,
    periods: int,
) -> List[MembershipPeriod]:
    """Materialize ``periods`` contiguous planned periods starting at ``valid_from``.

    The last period ends exactly where ``compute_validity`` puts ``valid_until``.
    """
    boundaries = [advance(valid_from, interval, index) for index in range(periods + 1)]
    return [
        MembershipPeriod(
            id=index + 1,
            uuid=str(uuid4()),
            membership_id=membership_id,
            start=start,
            end=end,
            state=PeriodState.PLANNED,
        )
        for index, (start, end) in enumerate(zip(boundaries, boundaries[1:]))
    ]


__all__ = ["generate_periods"]
