"""
Pydantic schemas for chat procedure request/response validation.

These schemas enforce input validation and define the API contract.
All fields use strict typing with constraints.
No business logic belongs here.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field, model_validator

WALLET_ADDRESS_LENGTH = 42
WALLET_ADDRESS_DESCRIPTION = "Wallet address, matched exactly (case-sensitive)"
GROUP_ID_DESCRIPTION = "Group identifier assigned on-chain"

# Group ids are stored in a 32-bit integer column.
GROUP_ID_MIN = -(2**31)
GROUP_ID_MAX = 2**31 - 1


def _as_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; mark them as UTC on the wire."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class MessageTypeSchema(str, Enum):
    """Message discriminant accepted on the wire."""

    PRIVATE = "private"
    GROUP = "group"


# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------


class RegisterUserRequest(BaseModel):
    """Request schema for registerUser.

    Attributes:
        wallet_address: Ethereum-style address (exactly 42 chars).
        username: Display name (3-50 chars).
        ipfs_profile_pic_hash: Optional IPFS hash of the profile picture.
    """

    wallet_address: str = Field(
        ...,
        min_length=WALLET_ADDRESS_LENGTH,
        max_length=WALLET_ADDRESS_LENGTH,
        description=WALLET_ADDRESS_DESCRIPTION,
    )
    username: str = Field(..., min_length=3, max_length=50)
    ipfs_profile_pic_hash: Optional[str] = Field(
        default=None, description="IPFS content hash of the profile picture"
    )


class GetUserRequest(BaseModel):
    """Request schema for getUser."""

    wallet_address: str = Field(..., description=WALLET_ADDRESS_DESCRIPTION)


class UserResponse(BaseModel):
    """A registered user."""

    id: int
    wallet_address: str
    username: str
    ipfs_profile_pic_hash: Optional[str]
    registration_timestamp: UtcDatetime
    is_registered: bool
    created_at: UtcDatetime


# ------------------------------------------------------------------
# Groups
# ------------------------------------------------------------------


class CreateGroupRequest(BaseModel):
    """Request schema for createGroup.

    Attributes:
        group_id: On-chain group identifier.
        name: Group name (1-100 chars).
        creator: Creator wallet address. Need not be registered yet.
    """

    group_id: int = Field(
        ...,
        strict=True,
        ge=GROUP_ID_MIN,
        le=GROUP_ID_MAX,
        description=GROUP_ID_DESCRIPTION,
    )
    name: str = Field(..., min_length=1, max_length=100)
    creator: str = Field(..., description="Wallet address of the group creator")


class JoinGroupRequest(BaseModel):
    """Request schema for joinGroup."""

    group_id: int = Field(
        ...,
        strict=True,
        ge=GROUP_ID_MIN,
        le=GROUP_ID_MAX,
        description=GROUP_ID_DESCRIPTION,
    )
    user_wallet_address: str = Field(..., description=WALLET_ADDRESS_DESCRIPTION)


class GetUserGroupsRequest(BaseModel):
    """Request schema for getUserGroups."""

    user_wallet_address: str = Field(..., description=WALLET_ADDRESS_DESCRIPTION)


class GroupResponse(BaseModel):
    """A chat group."""

    id: int
    group_id: int
    name: str
    creator: str
    created_at: UtcDatetime


class GroupMembershipResponse(BaseModel):
    """A membership of one user in one group."""

    id: int
    group_id: int
    user_wallet_address: str
    joined_at: UtcDatetime


# ------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------


class SendMessageRequest(BaseModel):
    """Request schema for sendMessage.

    Private messages must set ``to_address`` and leave ``group_id``
    null; group messages the reverse. Any timestamp sent by the caller
    is ignored: the service stamps messages itself.
    """

    from_address: str = Field(..., description="Sender wallet address")
    to_address: Optional[str] = Field(
        default=None, description="Recipient address (private messages only)"
    )
    group_id: Optional[int] = Field(
        default=None,
        strict=True,
        ge=GROUP_ID_MIN,
        le=GROUP_ID_MAX,
        description="Target group (group messages only)",
    )
    content: str = Field(..., min_length=1, max_length=1000)
    message_type: MessageTypeSchema

    @model_validator(mode="after")
    def check_target_matches_type(self) -> "SendMessageRequest":
        if self.message_type is MessageTypeSchema.PRIVATE:
            if self.to_address is None:
                raise ValueError("private messages require to_address")
            if self.group_id is not None:
                raise ValueError("private messages must not set group_id")
        else:
            if self.group_id is None:
                raise ValueError("group messages require group_id")
            if self.to_address is not None:
                raise ValueError("group messages must not set to_address")
        return self


class GetMessagesRequest(BaseModel):
    """Request schema for getMessages.

    Attributes:
        user_address: Requesting user's address.
        group_id: Group conversation to fetch. Takes priority over to_address.
        to_address: Peer of a private conversation.
        limit: Maximum number of messages (1-100, default 50).
    """

    user_address: str = Field(..., description=WALLET_ADDRESS_DESCRIPTION)
    group_id: Optional[int] = Field(
        default=None,
        strict=True,
        ge=GROUP_ID_MIN,
        le=GROUP_ID_MAX,
        description=GROUP_ID_DESCRIPTION,
    )
    to_address: Optional[str] = Field(
        default=None, description="Peer address of a private conversation"
    )
    limit: int = Field(
        default=50,
        strict=True,
        ge=1,
        le=100,
        description="Maximum number of messages to return",
    )


class MessageResponse(BaseModel):
    """A persisted chat message."""

    id: int
    from_address: str
    to_address: Optional[str]
    group_id: Optional[int]
    content: str
    message_type: MessageTypeSchema
    timestamp: UtcDatetime
    created_at: UtcDatetime


# ------------------------------------------------------------------
# Health / errors
# ------------------------------------------------------------------


class HealthcheckResponse(BaseModel):
    """Response schema for the healthcheck procedure."""

    status: str
    timestamp: UtcDatetime
    version: str


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
