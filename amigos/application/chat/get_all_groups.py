"""
Use case: List every group.

Output: list[Group] in storage order.
Side effects: None (read-only query).
"""

import logging

from amigos.domain.chat.entities import Group
from amigos.domain.chat.ports import GroupRepository

logger = logging.getLogger(__name__)


class GetAllGroupsUseCase:
    def __init__(self, group_repo: GroupRepository) -> None:
        self._group_repo = group_repo

    def execute(self) -> list[Group]:
        groups = self._group_repo.list_all()
        logger.info("Listed %d groups", len(groups))
        return groups
