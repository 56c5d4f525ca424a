"""
Domain entities for the chat bounded context.

Entities mirror the rows of the off-chain store. Relationships are
expressed by value (wallet address, group identifier), never by
object reference. Entities not yet persisted carry ``id=None``.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from amigos.domain.chat.errors import InvalidMessageError


class MessageType(Enum):
    """Discriminant of the Message variant."""

    PRIVATE = "private"
    GROUP = "group"


@dataclass(frozen=True)
class User:
    """A registered chat user, identified by wallet address."""

    wallet_address: str
    username: str
    ipfs_profile_pic_hash: Optional[str]
    registration_timestamp: datetime
    created_at: datetime
    is_registered: bool = True
    id: Optional[int] = None


@dataclass(frozen=True)
class Group:
    """A chat group mirrored from an on-chain group identifier."""

    group_id: int
    name: str
    creator: str
    created_at: datetime
    id: Optional[int] = None


@dataclass(frozen=True)
class GroupMembership:
    """Membership of one wallet address in one group."""

    group_id: int
    user_wallet_address: str
    joined_at: datetime
    id: Optional[int] = None


@dataclass(frozen=True)
class Message:
    """A persisted chat message, either private or group.

    Private messages carry ``to_address`` and no ``group_id``; group
    messages carry ``group_id`` and no ``to_address``. The invariant is
    checked on construction so no handler has to re-check it.
    Prefer the ``private`` and ``group`` constructors.
    """

    from_address: str
    content: str
    message_type: MessageType
    timestamp: datetime
    created_at: datetime
    to_address: Optional[str] = None
    group_id: Optional[int] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.message_type is MessageType.PRIVATE:
            if self.to_address is None:
                raise InvalidMessageError("private message requires a recipient")
            if self.group_id is not None:
                raise InvalidMessageError("private message cannot target a group")
        elif self.message_type is MessageType.GROUP:
            if self.group_id is None:
                raise InvalidMessageError("group message requires a group id")
            if self.to_address is not None:
                raise InvalidMessageError("group message cannot have a recipient")
        else:
            raise InvalidMessageError(f"unknown message type: {self.message_type!r}")

    @classmethod
    def private(
        cls,
        from_address: str,
        to_address: str,
        content: str,
        timestamp: datetime,
    ) -> "Message":
        """Build an unsaved private message stamped at ``timestamp``."""
        return cls(
            from_address=from_address,
            to_address=to_address,
            content=content,
            message_type=MessageType.PRIVATE,
            timestamp=timestamp,
            created_at=timestamp,
        )

    @classmethod
    def group(
        cls,
        from_address: str,
        group_id: int,
        content: str,
        timestamp: datetime,
    ) -> "Message":
        """Build an unsaved group message stamped at ``timestamp``."""
        return cls(
            from_address=from_address,
            group_id=group_id,
            content=content,
            message_type=MessageType.GROUP,
            timestamp=timestamp,
            created_at=timestamp,
        )

    @property
    def is_private(self) -> bool:
        return self.message_type is MessageType.PRIVATE
