"""Repository helpers for the membership service."""

from .membership_repository import MembershipRepository, SqlAlchemyMembershipRepository
from .memory_repository import InMemoryMembershipRepository

__all__ = [
    "InMemoryMembershipRepository",
    "MembershipRepository",
    "SqlAlchemyMembershipRepository",
]
