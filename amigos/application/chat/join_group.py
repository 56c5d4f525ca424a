"""
Use case: Add a user to a group.

Input: JoinGroupCommand (group_id, user_wallet_address)
Output: GroupMembership
Side effects: Inserts one membership row.
Failure cases: GroupNotFoundError, UserNotFoundError, AlreadyGroupMemberError,
    UniqueConstraintViolationError (concurrent join of the same pair).
"""

import logging

from amigos.application.chat.dtos import JoinGroupCommand
from amigos.domain.chat.clock import Clock, utcnow
from amigos.domain.chat.entities import GroupMembership
from amigos.domain.chat.errors import (
    AlreadyGroupMemberError,
    GroupNotFoundError,
    UserNotFoundError,
)
from amigos.domain.chat.ports import (
    GroupMembershipRepository,
    GroupRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class JoinGroupUseCase:
    """Orchestrates joining a group.

    Checks, in order, that the group exists, that the user exists and
    that the pair is not already stored, then inserts. The checks only
    produce precise errors; they are not atomic with the insert. The
    unique (group_id, user_wallet_address) constraint decides races, in
    which case the loser sees UniqueConstraintViolationError instead of
    AlreadyGroupMemberError. Both are AlreadyExistsError.
    """

    def __init__(
        self,
        group_repo: GroupRepository,
        user_repo: UserRepository,
        membership_repo: GroupMembershipRepository,
        clock: Clock = utcnow,
    ) -> None:
        self._group_repo = group_repo
        self._user_repo = user_repo
        self._membership_repo = membership_repo
        self._clock = clock

    def execute(self, command: JoinGroupCommand) -> GroupMembership:
        """Run the join group use case.

        Args:
            command: The group identifier and the joining wallet address.

        Returns:
            The stored membership.

        Raises:
            GroupNotFoundError: If the group does not exist.
            UserNotFoundError: If the wallet address is not registered.
            AlreadyExistsError: If the user is already a member.
        """
        logger.info(
            "Joining group group_id=%d wallet=%s",
            command.group_id,
            command.user_wallet_address,
        )

        if self._group_repo.get_by_group_id(command.group_id) is None:
            raise GroupNotFoundError(command.group_id)

        if self._user_repo.get_by_wallet_address(command.user_wallet_address) is None:
            raise UserNotFoundError(command.user_wallet_address)

        if self._membership_repo.exists(command.group_id, command.user_wallet_address):
            raise AlreadyGroupMemberError(command.group_id, command.user_wallet_address)

        membership = GroupMembership(
            group_id=command.group_id,
            user_wallet_address=command.user_wallet_address,
            joined_at=self._clock(),
        )
        return self._membership_repo.add(membership)
