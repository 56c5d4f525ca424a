"""
Use case: List the groups a wallet address belongs to.

Input: GetUserGroupsQuery (user_wallet_address)
Output: list[Group]
Side effects: None (read-only query).
Failure cases: None. Unknown users simply have no groups.
"""

import logging

from amigos.application.chat.dtos import GetUserGroupsQuery
from amigos.domain.chat.entities import Group
from amigos.domain.chat.ports import GroupRepository

logger = logging.getLogger(__name__)


class GetUserGroupsUseCase:
    """Resolves memberships of one address to their groups."""

    def __init__(self, group_repo: GroupRepository) -> None:
        self._group_repo = group_repo

    def execute(self, query: GetUserGroupsQuery) -> list[Group]:
        """Return the member's groups; empty when there are none."""
        groups = self._group_repo.list_for_member(query.user_wallet_address)
        logger.info(
            "Found %d groups for wallet=%s", len(groups), query.user_wallet_address
        )
        return groups
