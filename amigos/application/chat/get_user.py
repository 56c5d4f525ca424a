"""
Use case: Look up a single user by wallet address.

Input: GetUserQuery (wallet_address)
Output: User | None
Side effects: None (read-only query).
Failure cases: None. Absence is returned as None.
"""

import logging
from typing import Optional

from amigos.application.chat.dtos import GetUserQuery
from amigos.domain.chat.entities import User
from amigos.domain.chat.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Exact, case-sensitive lookup of one user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: GetUserQuery) -> Optional[User]:
        """Return the user registered under the address, or None."""
        logger.info("Looking up user wallet=%s", query.wallet_address)
        user = self._user_repo.get_by_wallet_address(query.wallet_address)
        if user is None:
            logger.debug("No user registered for wallet=%s", query.wallet_address)
        return user
