"""
Use case: Register a wallet address as a chat user.

Input: RegisterUserCommand (wallet_address, username, ipfs_profile_pic_hash)
Output: User
Side effects: Inserts one user row.
Failure cases: UserAlreadyExistsError (raised by the store, not pre-checked).
"""

import logging

from amigos.application.chat.dtos import RegisterUserCommand
from amigos.domain.chat.clock import Clock, utcnow
from amigos.domain.chat.entities import User
from amigos.domain.chat.ports import UserRepository

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Orchestrates user registration.

    The wallet address uniqueness is enforced by the store. No lookup
    is made before the insert, so concurrent registrations of the same
    address resolve to exactly one row and one UserAlreadyExistsError
    per loser.
    """

    def __init__(self, user_repo: UserRepository, clock: Clock = utcnow) -> None:
        self._user_repo = user_repo
        self._clock = clock

    def execute(self, command: RegisterUserCommand) -> User:
        """Run the registration use case.

        Args:
            command: Validated registration input.

        Returns:
            The stored user, registered at the current service time.

        Raises:
            UserAlreadyExistsError: If the wallet address is already registered.
        """
        logger.info("Registering user wallet=%s", command.wallet_address)

        now = self._clock()
        user = User(
            wallet_address=command.wallet_address,
            username=command.username,
            ipfs_profile_pic_hash=command.ipfs_profile_pic_hash,
            registration_timestamp=now,
            created_at=now,
            is_registered=True,
        )
        return self._user_repo.add(user)
