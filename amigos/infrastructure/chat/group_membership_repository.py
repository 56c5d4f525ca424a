"""
Adapter: Group membership repository.

Implements GroupMembershipRepository port over the
``group_memberships`` join table.
"""

import logging

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from amigos.domain.chat.entities import GroupMembership
from amigos.domain.chat.errors import UniqueConstraintViolationError
from amigos.domain.chat.ports import GroupMembershipRepository
from amigos.infrastructure.persistence.errors import is_unique_violation
from amigos.infrastructure.persistence.tables import group_memberships

logger = logging.getLogger(__name__)

MEMBERSHIP_CONSTRAINT = "uq_group_memberships_group_member"


class GroupMembershipRepositoryAdapter(GroupMembershipRepository):
    """SQLAlchemy implementation of the membership repository.

    The unique (group_id, user_wallet_address) constraint is the only
    serialization point between concurrent joins of the same pair.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, membership: GroupMembership) -> GroupMembership:
        """Insert a membership row.

        Args:
            membership: Unsaved membership entity.

        Returns:
            The membership with its surrogate id.

        Raises:
            UniqueConstraintViolationError: If the pair was inserted first
                by a concurrent join.
        """
        stmt = insert(group_memberships).values(
            group_id=membership.group_id,
            user_wallet_address=membership.user_wallet_address,
            joined_at=membership.joined_at,
        )
        try:
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                logger.warning(
                    "Concurrent join lost: group_id=%d wallet=%s",
                    membership.group_id,
                    membership.user_wallet_address,
                )
                raise UniqueConstraintViolationError(
                    MEMBERSHIP_CONSTRAINT,
                    f"user {membership.user_wallet_address} is already a member "
                    f"of group {membership.group_id}",
                ) from exc
            raise

        return GroupMembership(
            id=result.inserted_primary_key[0],
            group_id=membership.group_id,
            user_wallet_address=membership.user_wallet_address,
            joined_at=membership.joined_at,
        )

    def exists(self, group_id: int, wallet_address: str) -> bool:
        stmt = select(group_memberships.c.id).where(
            group_memberships.c.group_id == group_id,
            group_memberships.c.user_wallet_address == wallet_address,
        )
        with self._engine.connect() as conn:
            return conn.execute(stmt).first() is not None
