"""Lifecycle state derivation for memberships."""

from __future__ import annotations

from datetime import datetime

from app.models import Membership, MembershipState


def derive_state(valid_from: datetime, valid_until: datetime, now: datetime) -> MembershipState:
    state = MembershipState.ACTIVE
    if now < valid_from:
        state = MembershipState.PENDING
    # expired wins over pending when the window is degenerate
    if now >= valid_until:
        state = MembershipState.EXPIRED
    return state


def current_state(membership: Membership, now: datetime) -> MembershipState:
    """State of ``membership`` at ``now``; a termination is never re-derived."""
    if membership.state == MembershipState.TERMINATED:
        return MembershipState.TERMINATED
    return derive_state(membership.valid_from, membership.valid_until, now)


__all__ = ["current_state", "derive_state"]
