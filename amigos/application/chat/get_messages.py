"""
Use case: Retrieve one conversation.

Input: GetMessagesQuery (user_address, group_id, to_address, limit)
Output: list[Message], newest first.
Side effects: None (read-only query).
Failure cases: None. Unknown groups or peers yield an empty list.
"""

import logging

from amigos.application.chat.dtos import GetMessagesQuery
from amigos.domain.chat.entities import Message
from amigos.domain.chat.ports import MessageRepository

logger = logging.getLogger(__name__)


class GetMessagesUseCase:
    """Selects the conversation mode from the query and fetches it.

    A group id selects the group conversation and takes priority over
    a peer address, which selects the private conversation between the
    requester and the peer. With neither, the result is empty.
    """

    def __init__(self, message_repo: MessageRepository) -> None:
        self._message_repo = message_repo

    def execute(self, query: GetMessagesQuery) -> list[Message]:
        """Run the conversation retrieval use case.

        Args:
            query: Requester, conversation selector and limit.

        Returns:
            Up to ``query.limit`` messages ordered by timestamp descending.
        """
        if query.group_id is not None:
            logger.info(
                "Fetching group conversation group_id=%d limit=%d",
                query.group_id,
                query.limit,
            )
            return self._message_repo.list_group_conversation(
                query.group_id, query.limit
            )

        if query.to_address is not None:
            logger.info(
                "Fetching private conversation user=%s peer=%s limit=%d",
                query.user_address,
                query.to_address,
                query.limit,
            )
            return self._message_repo.list_private_conversation(
                query.user_address, query.to_address, query.limit
            )

        logger.info("No conversation selected for user=%s", query.user_address)
        return []
