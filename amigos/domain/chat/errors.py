"""
Domain-specific errors for the chat bounded context.

All errors raised from the domain and application layers are defined
here. They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class ChatDomainError(Exception):
    """Base error for all chat domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EntityNotFoundError(ChatDomainError):
    """Raised when a referenced entity must exist but does not."""

    entity = "Entity"

    def __init__(self, key: object) -> None:
        super().__init__(f"{self.entity} not found: {key}")
        self.key = key


class UserNotFoundError(EntityNotFoundError):
    """Raised when no user is registered under a wallet address."""

    entity = "User"

    def __init__(self, wallet_address: str) -> None:
        super().__init__(wallet_address)
        self.wallet_address = wallet_address


class SenderNotFoundError(UserNotFoundError):
    """Raised when the sender of a message is not a registered user."""

    entity = "Sender"


class RecipientNotFoundError(UserNotFoundError):
    """Raised when the recipient of a private message is not registered."""

    entity = "Recipient"


class GroupNotFoundError(EntityNotFoundError):
    """Raised when no group exists with the given group identifier."""

    entity = "Group"

    def __init__(self, group_id: int) -> None:
        super().__init__(group_id)
        self.group_id = group_id


class AlreadyExistsError(ChatDomainError):
    """Base error for writes that would duplicate a unique entity."""


class AlreadyGroupMemberError(AlreadyExistsError):
    """Raised when a user tries to join a group they already belong to."""

    def __init__(self, group_id: int, wallet_address: str) -> None:
        super().__init__(
            f"User {wallet_address} is already a member of group {group_id}"
        )
        self.group_id = group_id
        self.wallet_address = wallet_address


class UniqueConstraintViolationError(AlreadyExistsError):
    """Raised when the store rejects a row for a uniqueness constraint.

    This is the authoritative duplicate signal: pre-checks may pass
    under concurrency while the insert still fails here.
    """

    def __init__(self, constraint: str, detail: str) -> None:
        super().__init__(f"Unique constraint violated ({constraint}): {detail}")
        self.constraint = constraint
        self.detail = detail


class UserAlreadyExistsError(UniqueConstraintViolationError):
    """Raised when a wallet address is registered twice."""

    def __init__(self, wallet_address: str) -> None:
        super().__init__(
            "uq_users_wallet_address",
            f"wallet address {wallet_address} is already registered",
        )
        self.wallet_address = wallet_address


class GroupAlreadyExistsError(UniqueConstraintViolationError):
    """Raised when a group identifier is created twice."""

    def __init__(self, group_id: int) -> None:
        super().__init__("uq_groups_group_id", f"group {group_id} already exists")
        self.group_id = group_id


class InvalidMessageError(ChatDomainError):
    """Raised when a message breaks the private/group variant rules."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid message: {reason}")
        self.reason = reason
