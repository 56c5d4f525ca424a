"""
Port interfaces (ABCs) for the chat bounded context.

Ports define the contracts that the use cases require from storage.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from amigos.domain.chat.entities import Group, GroupMembership, Message, User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def add(self, user: User) -> User:
        """Persist a new user and return it with its surrogate id.

        Raises:
            UserAlreadyExistsError: If the wallet address is taken.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_wallet_address(self, wallet_address: str) -> Optional[User]:
        """Return the user with exactly this wallet address, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_newest_first(self) -> list[User]:
        """Return every user ordered by created_at descending."""
        raise NotImplementedError


class GroupRepository(ABC):
    """Port for persisting and retrieving groups."""

    @abstractmethod
    def add(self, group: Group) -> Group:
        """Persist a new group and return it with its surrogate id.

        Raises:
            GroupAlreadyExistsError: If the group identifier is taken.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_group_id(self, group_id: int) -> Optional[Group]:
        """Return the group with this external identifier, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Group]:
        """Return every group in storage order."""
        raise NotImplementedError

    @abstractmethod
    def list_for_member(self, wallet_address: str) -> list[Group]:
        """Return the groups a wallet address is a member of."""
        raise NotImplementedError


class GroupMembershipRepository(ABC):
    """Port for the group membership join table."""

    @abstractmethod
    def add(self, membership: GroupMembership) -> GroupMembership:
        """Persist a new membership and return it with its surrogate id.

        Raises:
            UniqueConstraintViolationError: If the (group, member) pair exists.
        """
        raise NotImplementedError

    @abstractmethod
    def exists(self, group_id: int, wallet_address: str) -> bool:
        """Return True if the (group, member) pair is already stored."""
        raise NotImplementedError


class MessageRepository(ABC):
    """Port for persisting and querying message history."""

    @abstractmethod
    def add(self, message: Message) -> Message:
        """Persist a new message and return it with its surrogate id."""
        raise NotImplementedError

    @abstractmethod
    def list_group_conversation(self, group_id: int, limit: int) -> list[Message]:
        """Return the newest group messages of one group.

        Args:
            group_id: External group identifier.
            limit: Maximum number of messages to return.

        Returns:
            Group-typed messages ordered by timestamp descending.
        """
        raise NotImplementedError

    @abstractmethod
    def list_private_conversation(
        self, address: str, peer_address: str, limit: int
    ) -> list[Message]:
        """Return the newest private messages exchanged by two addresses.

        Direction does not matter: messages from either party to the
        other are included.

        Returns:
            Private-typed messages ordered by timestamp descending.
        """
        raise NotImplementedError
