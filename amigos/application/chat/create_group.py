"""
Use case: Mirror an on-chain group into the store.

Input: CreateGroupCommand (group_id, name, creator)
Output: Group
Side effects: Inserts one group row.
Failure cases: GroupAlreadyExistsError (raised by the store).
"""

import logging

from amigos.application.chat.dtos import CreateGroupCommand
from amigos.domain.chat.clock import Clock, utcnow
from amigos.domain.chat.entities import Group
from amigos.domain.chat.ports import GroupRepository

logger = logging.getLogger(__name__)


class CreateGroupUseCase:
    """Orchestrates group creation.

    The creator is not looked up in the user table: group creation is
    synced from chain events and may arrive before the creator's
    registration does.
    """

    def __init__(self, group_repo: GroupRepository, clock: Clock = utcnow) -> None:
        self._group_repo = group_repo
        self._clock = clock

    def execute(self, command: CreateGroupCommand) -> Group:
        """Run the group creation use case.

        Args:
            command: Validated group creation input.

        Returns:
            The stored group.

        Raises:
            GroupAlreadyExistsError: If the group identifier already exists.
        """
        logger.info(
            "Creating group group_id=%d creator=%s", command.group_id, command.creator
        )
        group = Group(
            group_id=command.group_id,
            name=command.name,
            creator=command.creator,
            created_at=self._clock(),
        )
        return self._group_repo.add(group)
