"""
Adapter: Message repository.

Implements MessageRepository port.
Persists messages and serves the two conversation queries:
a group's history and the symmetric history between two addresses.
"""

import logging

from sqlalchemy import and_, insert, or_, select
from sqlalchemy.engine import Engine, RowMapping

from amigos.domain.chat.entities import Message, MessageType
from amigos.domain.chat.ports import MessageRepository
from amigos.infrastructure.persistence.tables import messages

logger = logging.getLogger(__name__)


def _to_message(row: RowMapping) -> Message:
    return Message(
        id=row["id"],
        from_address=row["from_address"],
        to_address=row["to_address"],
        group_id=row["group_id"],
        content=row["content"],
        message_type=MessageType(row["message_type"]),
        timestamp=row["timestamp"],
        created_at=row["created_at"],
    )


class MessageRepositoryAdapter(MessageRepository):
    """SQLAlchemy implementation of the message repository.

    Both conversation queries order by timestamp descending and break
    ties by surrogate id so the newest insert comes first.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, message: Message) -> Message:
        """Insert a message row and return it with its surrogate id."""
        stmt = insert(messages).values(
            from_address=message.from_address,
            to_address=message.to_address,
            group_id=message.group_id,
            content=message.content,
            message_type=message.message_type.value,
            timestamp=message.timestamp,
            created_at=message.created_at,
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt)

        message_id = result.inserted_primary_key[0]
        logger.debug(
            "Inserted %s message id=%d", message.message_type.value, message_id
        )
        return Message(
            id=message_id,
            from_address=message.from_address,
            to_address=message.to_address,
            group_id=message.group_id,
            content=message.content,
            message_type=message.message_type,
            timestamp=message.timestamp,
            created_at=message.created_at,
        )

    def list_group_conversation(self, group_id: int, limit: int) -> list[Message]:
        """Return the newest group-typed messages of a group.

        Args:
            group_id: External group identifier.
            limit: Maximum number of rows.

        Returns:
            Messages ordered by timestamp descending.
        """
        stmt = (
            select(messages)
            .where(
                messages.c.group_id == group_id,
                messages.c.message_type == MessageType.GROUP.value,
            )
            .order_by(messages.c.timestamp.desc(), messages.c.id.desc())
            .limit(limit)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_to_message(row) for row in rows]

    def list_private_conversation(
        self, address: str, peer_address: str, limit: int
    ) -> list[Message]:
        """Return the newest private messages between two addresses.

        Args:
            address: The requesting user's address.
            peer_address: The other party.
            limit: Maximum number of rows.

        Returns:
            Messages sent in either direction, ordered by timestamp descending.
        """
        stmt = (
            select(messages)
            .where(
                messages.c.message_type == MessageType.PRIVATE.value,
                or_(
                    and_(
                        messages.c.from_address == address,
                        messages.c.to_address == peer_address,
                    ),
                    and_(
                        messages.c.from_address == peer_address,
                        messages.c.to_address == address,
                    ),
                ),
            )
            .order_by(messages.c.timestamp.desc(), messages.c.id.desc())
            .limit(limit)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_to_message(row) for row in rows]
