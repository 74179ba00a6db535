"""Tests for validity window arithmetic."""

from datetime import datetime, timedelta, timezone

import pytest

from app.models import BillingInterval
from app.services.billing_calendar import add_months, advance, compute_validity, ensure_utc

UTC = timezone.utc


class TestAddMonths:
    """Month steps clamp to the last day of the target month."""

    @pytest.mark.parametrize(
        ("start", "months", "expected"),
        [
            (datetime(2024, 1, 31, tzinfo=UTC), 1, datetime(2024, 2, 29, tzinfo=UTC)),
            (datetime(2023, 1, 31, tzinfo=UTC), 1, datetime(2023, 2, 28, tzinfo=UTC)),
            (datetime(2024, 1, 31, tzinfo=UTC), 6, datetime(2024, 7, 31, tzinfo=UTC)),
            (datetime(2024, 8, 31, tzinfo=UTC), 6, datetime(2025, 2, 28, tzinfo=UTC)),
            (datetime(2024, 11, 15, tzinfo=UTC), 3, datetime(2025, 2, 15, tzinfo=UTC)),
            (datetime(2024, 2, 29, tzinfo=UTC), 12, datetime(2025, 2, 28, tzinfo=UTC)),
        ],
    )
    def test_day_is_clamped(self, start, months, expected):
        assert add_months(start, months) == expected

    def test_day_never_rolls_into_the_following_month(self):
        end = add_months(datetime(2024, 1, 31, tzinfo=UTC), 1)

        assert end.month == 2
        assert end != datetime(2024, 3, 2, tzinfo=UTC)

    def test_time_of_day_is_kept(self):
        start = datetime(2024, 5, 31, 18, 45, 10, tzinfo=UTC)

        assert add_months(start, 1) == datetime(2024, 6, 30, 18, 45, 10, tzinfo=UTC)


class TestAdvance:
    def test_weekly_adds_seven_days_per_unit(self):
        start = datetime(2024, 12, 28, tzinfo=UTC)

        assert advance(start, BillingInterval.WEEKLY, 2) == start + timedelta(days=14)

    def test_yearly_adds_twelve_months_per_unit(self):
        start = datetime(2024, 3, 10, tzinfo=UTC)

        assert advance(start, BillingInterval.YEARLY, 3) == datetime(2027, 3, 10, tzinfo=UTC)


class TestComputeValidity:
    def test_monthly_from_january_31(self):
        valid_from, valid_until = compute_validity(
            datetime(2024, 1, 31, tzinfo=UTC), BillingInterval.MONTHLY, 6
        )

        assert valid_from == datetime(2024, 1, 31, tzinfo=UTC)
        assert valid_until == datetime(2024, 7, 31, tzinfo=UTC)

    def test_weekly(self):
        valid_from, valid_until = compute_validity(
            datetime(2024, 3, 1, tzinfo=UTC), BillingInterval.WEEKLY, 4
        )

        assert valid_until - valid_from == timedelta(days=28)

    def test_defaults_to_now(self):
        now = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)

        valid_from, valid_until = compute_validity(None, BillingInterval.YEARLY, 3, now=now)

        assert valid_from == now
        assert valid_until == datetime(2027, 3, 15, 12, 0, tzinfo=UTC)

    def test_naive_input_is_treated_as_utc(self):
        valid_from, _ = compute_validity(datetime(2024, 3, 1), BillingInterval.MONTHLY, 6)

        assert valid_from.tzinfo is not None
        assert valid_from == datetime(2024, 3, 1, tzinfo=UTC)

    def test_default_start_is_current_time(self):
        before = datetime.now(UTC)
        valid_from, valid_until = compute_validity(None, BillingInterval.WEEKLY, 1)
        after = datetime.now(UTC)

        assert before <= valid_from <= after
        assert valid_until == valid_from + timedelta(days=7)


def test_ensure_utc_converts_other_zones():
    value = datetime(2024, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))

    assert ensure_utc(value) == datetime(2024, 1, 1, 0, 0, tzinfo=UTC)
    assert ensure_utc(value).utcoffset() == timedelta(0)
