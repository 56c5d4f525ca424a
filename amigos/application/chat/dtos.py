"""
Data Transfer Objects for the chat application layer.

DTOs carry request data from the interface layer into use cases.
They are plain dataclasses with no behavior beyond basic bounds.
Use cases return domain entities directly.
"""

from dataclasses import dataclass
from typing import Optional

from amigos.domain.chat.entities import MessageType

DEFAULT_MESSAGE_LIMIT = 50
MAX_MESSAGE_LIMIT = 100


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering a wallet address.

    Attributes:
        wallet_address: 42-character Ethereum-style address.
        username: Display name (3-50 chars).
        ipfs_profile_pic_hash: Optional content hash of the profile picture.
    """

    wallet_address: str
    username: str
    ipfs_profile_pic_hash: Optional[str] = None


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for looking up one user by exact wallet address."""

    wallet_address: str


@dataclass(frozen=True)
class CreateGroupCommand:
    """Input DTO for mirroring an on-chain group.

    Attributes:
        group_id: Group identifier assigned on-chain.
        name: Group name (1-100 chars).
        creator: Wallet address of the creator. Not required to be registered.
    """

    group_id: int
    name: str
    creator: str


@dataclass(frozen=True)
class JoinGroupCommand:
    """Input DTO for adding a member to a group."""

    group_id: int
    user_wallet_address: str


@dataclass(frozen=True)
class GetUserGroupsQuery:
    """Input DTO for listing the groups of one member."""

    user_wallet_address: str


@dataclass(frozen=True)
class SendMessageCommand:
    """Input DTO for persisting a chat message.

    Attributes:
        from_address: Sender wallet address.
        content: Message text (1-1000 chars).
        message_type: PRIVATE or GROUP.
        to_address: Recipient address, set for private messages only.
        group_id: Target group, set for group messages only.
    """

    from_address: str
    content: str
    message_type: MessageType
    to_address: Optional[str] = None
    group_id: Optional[int] = None


@dataclass(frozen=True)
class GetMessagesQuery:
    """Input DTO for conversation retrieval.

    Attributes:
        user_address: Address of the requesting user.
        group_id: Conversation group. Takes priority over to_address.
        to_address: Peer address of a private conversation.
        limit: Maximum number of messages (1-100).
    """

    user_address: str
    group_id: Optional[int] = None
    to_address: Optional[str] = None
    limit: int = DEFAULT_MESSAGE_LIMIT

    def __post_init__(self) -> None:
        if not 1 <= self.limit <= MAX_MESSAGE_LIMIT:
            raise ValueError(
                f"limit must be between 1 and {MAX_MESSAGE_LIMIT}, got {self.limit}"
            )
