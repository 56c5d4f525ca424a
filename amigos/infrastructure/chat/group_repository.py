"""
Adapter: Group repository.

Implements GroupRepository port.
Persists groups and resolves memberships to groups via an inner join
of ``group_memberships`` onto ``groups``.
"""

import logging
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from amigos.domain.chat.entities import Group
from amigos.domain.chat.errors import GroupAlreadyExistsError
from amigos.domain.chat.ports import GroupRepository
from amigos.infrastructure.persistence.errors import is_unique_violation
from amigos.infrastructure.persistence.tables import group_memberships, groups

logger = logging.getLogger(__name__)


def _to_group(row: RowMapping) -> Group:
    return Group(
        id=row["id"],
        group_id=row["group_id"],
        name=row["name"],
        creator=row["creator"],
        created_at=row["created_at"],
    )


class GroupRepositoryAdapter(GroupRepository):
    """SQLAlchemy implementation of the group repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, group: Group) -> Group:
        """Insert a group row.

        Raises:
            GroupAlreadyExistsError: If uq_groups_group_id rejects the row.
        """
        stmt = insert(groups).values(
            group_id=group.group_id,
            name=group.name,
            creator=group.creator,
            created_at=group.created_at,
        )
        try:
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise GroupAlreadyExistsError(group.group_id) from exc
            raise

        row_id = result.inserted_primary_key[0]
        logger.debug("Inserted group id=%d group_id=%d", row_id, group.group_id)
        return Group(
            id=row_id,
            group_id=group.group_id,
            name=group.name,
            creator=group.creator,
            created_at=group.created_at,
        )

    def get_by_group_id(self, group_id: int) -> Optional[Group]:
        stmt = select(groups).where(groups.c.group_id == group_id)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _to_group(row) if row is not None else None

    def list_all(self) -> list[Group]:
        # Ordered by surrogate id so the default order is insertion order.
        stmt = select(groups).order_by(groups.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_to_group(row) for row in rows]

    def list_for_member(self, wallet_address: str) -> list[Group]:
        """Return the groups joined by a wallet address.

        Membership pairs are unique, so the join yields each group once.

        Args:
            wallet_address: Member address, matched exactly.

        Returns:
            Groups ordered by surrogate id.
        """
        stmt = (
            select(groups)
            .join(group_memberships, groups.c.group_id == group_memberships.c.group_id)
            .where(group_memberships.c.user_wallet_address == wallet_address)
            .order_by(groups.c.id)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_to_group(row) for row in rows]
