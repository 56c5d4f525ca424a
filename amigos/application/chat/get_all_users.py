"""
Use case: List every registered user, newest first.

Output: list[User]
Side effects: None (read-only query).
"""

import logging

from amigos.domain.chat.entities import User
from amigos.domain.chat.ports import UserRepository

logger = logging.getLogger(__name__)


class GetAllUsersUseCase:
    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[User]:
        users = self._user_repo.list_newest_first()
        logger.info("Listed %d users", len(users))
        return users
