"""Process-local membership storage, used by tests and local tooling."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, List, Sequence

from app.models import Membership, MembershipPeriod
from app.repository.membership_repository import MembershipRepository


class InMemoryMembershipRepository(MembershipRepository):
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._memberships: List[Membership] = []
        self._periods: List[MembershipPeriod] = []
        self._last_id = 0

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            snapshot = (list(self._memberships), list(self._periods), self._last_id)
            try:
                yield
            except Exception:
                self._memberships, self._periods, self._last_id = snapshot
                raise

    def next_membership_id(self) -> int:
        with self._lock:
            return self._last_id + 1

    def append_membership(self, membership: Membership) -> None:
        with self._lock:
            self._memberships.append(membership)
            self._last_id = max(self._last_id, membership.id)

    def append_periods(self, periods: Sequence[MembershipPeriod]) -> None:
        with self._lock:
            self._periods.extend(periods)

    def all_memberships(self) -> List[Membership]:
        with self._lock:
            return list(self._memberships)

    def all_periods(self) -> List[MembershipPeriod]:
        with self._lock:
            return list(self._periods)


__all__ = ["InMemoryMembershipRepository"]
