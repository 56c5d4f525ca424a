"""
Use case: Persist a chat message.

Input: SendMessageCommand (from_address, content, message_type, to_address, group_id)
Output: Message
Side effects: Inserts one message row.
Failure cases: InvalidMessageError, SenderNotFoundError, RecipientNotFoundError,
    GroupNotFoundError.
"""

import logging

from amigos.application.chat.dtos import SendMessageCommand
from amigos.domain.chat.clock import Clock, utcnow
from amigos.domain.chat.entities import Message, MessageType
from amigos.domain.chat.errors import (
    GroupNotFoundError,
    RecipientNotFoundError,
    SenderNotFoundError,
)
from amigos.domain.chat.ports import GroupRepository, MessageRepository, UserRepository

logger = logging.getLogger(__name__)


class SendMessageUseCase:
    """Orchestrates sending a message.

    The message entity is built first, so a private message without a
    recipient (or a group message without a group) is rejected before
    any lookup. The sender must be registered; the target is checked
    according to the message type. The message timestamp is always the
    service time at persistence.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        group_repo: GroupRepository,
        message_repo: MessageRepository,
        clock: Clock = utcnow,
    ) -> None:
        self._user_repo = user_repo
        self._group_repo = group_repo
        self._message_repo = message_repo
        self._clock = clock

    def execute(self, command: SendMessageCommand) -> Message:
        """Run the send message use case.

        Args:
            command: Validated message input.

        Returns:
            The stored message.

        Raises:
            InvalidMessageError: If the target fields do not match the type.
            SenderNotFoundError: If the sender is not registered.
            RecipientNotFoundError: If a private recipient is not registered.
            GroupNotFoundError: If a group message targets an unknown group.
        """
        logger.info(
            "Sending %s message from=%s",
            command.message_type.value,
            command.from_address,
        )

        now = self._clock()
        message = Message(
            from_address=command.from_address,
            to_address=command.to_address,
            group_id=command.group_id,
            content=command.content,
            message_type=command.message_type,
            timestamp=now,
            created_at=now,
        )

        if self._user_repo.get_by_wallet_address(message.from_address) is None:
            raise SenderNotFoundError(message.from_address)

        if message.message_type is MessageType.PRIVATE:
            if self._user_repo.get_by_wallet_address(message.to_address) is None:
                raise RecipientNotFoundError(message.to_address)
        elif self._group_repo.get_by_group_id(message.group_id) is None:
            raise GroupNotFoundError(message.group_id)

        return self._message_repo.add(message)
