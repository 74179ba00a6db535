"""Data access for memberships and their billing periods."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import ContextManager, Iterator, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models import Membership, MembershipPeriod


class MembershipRepository(ABC):
    """Storage contract the membership service depends on.

    Writes, and reads that feed a write, happen inside :meth:`transaction`,
    which is the single mutual exclusion scope of the repository. Changes made
    to records returned by the repository inside that scope are persisted when
    it exits without error.
    """

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        ...

    @abstractmethod
    def next_membership_id(self) -> int:
        ...

    @abstractmethod
    def append_membership(self, membership: Membership) -> None:
        ...

    @abstractmethod
    def append_periods(self, periods: Sequence[MembershipPeriod]) -> None:
        ...

    @abstractmethod
    def all_memberships(self) -> List[Membership]:
        ...

    @abstractmethod
    def all_periods(self) -> List[MembershipPeriod]:
        ...

    def get_membership(self, membership_id: int) -> Optional[Membership]:
        return next((m for m in self.all_memberships() if m.id == membership_id), None)

    def list_periods(self, membership_id: int) -> List[MembershipPeriod]:
        return [p for p in self.all_periods() if p.membership_id == membership_id]


class SqlAlchemyMembershipRepository(MembershipRepository):
    # Sessions are request scoped, so the lock is shared by every instance in the process.
    _write_lock = threading.Lock()

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._write_lock:
            try:
                yield
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

    def next_membership_id(self) -> int:
        current = self.db.execute(select(func.max(Membership.id))).scalar()
        return (current or 0) + 1

    def append_membership(self, membership: Membership) -> None:
        self.db.add(membership)
        self.db.flush()

    def append_periods(self, periods: Sequence[MembershipPeriod]) -> None:
        self.db.add_all(list(periods))
        self.db.flush()

    def all_memberships(self) -> List[Membership]:
        return list(self.db.scalars(select(Membership).order_by(Membership.id)))

    def all_periods(self) -> List[MembershipPeriod]:
        statement = select(MembershipPeriod).order_by(
            MembershipPeriod.membership_id, MembershipPeriod.id
        )
        return list(self.db.scalars(statement))

    def get_membership(self, membership_id: int) -> Optional[Membership]:
        return self.db.get(Membership, membership_id)

    def list_periods(self, membership_id: int) -> List[MembershipPeriod]:
        statement = (
            select(MembershipPeriod)
            .where(MembershipPeriod.membership_id == membership_id)
            .order_by(MembershipPeriod.id)
        )
        return list(self.db.scalars(statement))


__all__ = ["MembershipRepository", "SqlAlchemyMembershipRepository"]
