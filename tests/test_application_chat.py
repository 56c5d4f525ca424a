"""
Tests for the chat application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
Each test verifies orchestration: which checks run, in which order,
and what reaches the repositories.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from amigos.application.chat.create_group import CreateGroupUseCase
from amigos.application.chat.dtos import (
    CreateGroupCommand,
    GetMessagesQuery,
    GetUserQuery,
    JoinGroupCommand,
    RegisterUserCommand,
    SendMessageCommand,
)
from amigos.application.chat.get_messages import GetMessagesUseCase
from amigos.application.chat.get_user import GetUserUseCase
from amigos.application.chat.join_group import JoinGroupUseCase
from amigos.application.chat.register_user import RegisterUserUseCase
from amigos.application.chat.send_message import SendMessageUseCase
from amigos.domain.chat.entities import Group, MessageType, User
from amigos.domain.chat.errors import (
    AlreadyGroupMemberError,
    GroupNotFoundError,
    InvalidMessageError,
    RecipientNotFoundError,
    SenderNotFoundError,
    UserNotFoundError,
)
from amigos.domain.chat.ports import (
    GroupMembershipRepository,
    GroupRepository,
    MessageRepository,
    UserRepository,
)

ALICE = "0x" + "a" * 40
BOB = "0x" + "b" * 40
NOW = datetime(2025, 3, 1, 9, 30, 0)


def _fixed_clock() -> datetime:
    return NOW


def _user(address: str) -> User:
    return User(
        id=1,
        wallet_address=address,
        username="someone",
        ipfs_profile_pic_hash=None,
        registration_timestamp=NOW,
        created_at=NOW,
    )


def _group(group_id: int) -> Group:
    return Group(id=1, group_id=group_id, name="g", creator=ALICE, created_at=NOW)


def _echo(entity):
    return entity


class TestRegisterUserUseCase:
    def test_user_stamped_with_service_time(self) -> None:
        user_repo = MagicMock(spec=UserRepository)
        user_repo.add.side_effect = _echo
        use_case = RegisterUserUseCase(user_repo, clock=_fixed_clock)

        user = use_case.execute(
            RegisterUserCommand(wallet_address=ALICE, username="alice")
        )

        assert user.registration_timestamp == NOW
        assert user.created_at == NOW
        assert user.is_registered is True
        assert user.ipfs_profile_pic_hash is None

    def test_no_existence_precheck(self) -> None:
        """Uniqueness is left to the store: no lookup before insert."""
        user_repo = MagicMock(spec=UserRepository)
        user_repo.add.side_effect = _echo
        RegisterUserUseCase(user_repo).execute(
            RegisterUserCommand(wallet_address=ALICE, username="alice")
        )
        user_repo.get_by_wallet_address.assert_not_called()


class TestGetUserUseCase:
    def test_absent_user_returns_none(self) -> None:
        user_repo = MagicMock(spec=UserRepository)
        user_repo.get_by_wallet_address.return_value = None
        assert GetUserUseCase(user_repo).execute(GetUserQuery(ALICE)) is None


class TestCreateGroupUseCase:
    def test_creator_is_not_validated(self) -> None:
        group_repo = MagicMock(spec=GroupRepository)
        group_repo.add.side_effect = _echo
        group = CreateGroupUseCase(group_repo, clock=_fixed_clock).execute(
            CreateGroupCommand(group_id=5, name="friends", creator=BOB)
        )
        assert group.creator == BOB
        assert group.created_at == NOW


class TestJoinGroupUseCase:
    """Tests for the three-stage join check."""

    def _use_case(self, group=None, user=None, exists=False):
        group_repo = MagicMock(spec=GroupRepository)
        group_repo.get_by_group_id.return_value = group
        user_repo = MagicMock(spec=UserRepository)
        user_repo.get_by_wallet_address.return_value = user
        membership_repo = MagicMock(spec=GroupMembershipRepository)
        membership_repo.exists.return_value = exists
        membership_repo.add.side_effect = _echo
        use_case = JoinGroupUseCase(
            group_repo, user_repo, membership_repo, clock=_fixed_clock
        )
        return use_case, group_repo, user_repo, membership_repo

    def test_missing_group_checked_first(self) -> None:
        use_case, _, user_repo, membership_repo = self._use_case(group=None)
        with pytest.raises(GroupNotFoundError):
            use_case.execute(JoinGroupCommand(group_id=9, user_wallet_address=ALICE))
        user_repo.get_by_wallet_address.assert_not_called()
        membership_repo.add.assert_not_called()

    def test_missing_user(self) -> None:
        use_case, _, _, membership_repo = self._use_case(group=_group(9), user=None)
        with pytest.raises(UserNotFoundError):
            use_case.execute(JoinGroupCommand(group_id=9, user_wallet_address=ALICE))
        membership_repo.exists.assert_not_called()
        membership_repo.add.assert_not_called()

    def test_existing_membership(self) -> None:
        use_case, _, _, membership_repo = self._use_case(
            group=_group(9), user=_user(ALICE), exists=True
        )
        with pytest.raises(AlreadyGroupMemberError):
            use_case.execute(JoinGroupCommand(group_id=9, user_wallet_address=ALICE))
        membership_repo.add.assert_not_called()

    def test_successful_join(self) -> None:
        use_case, _, _, membership_repo = self._use_case(
            group=_group(9), user=_user(ALICE)
        )
        membership = use_case.execute(
            JoinGroupCommand(group_id=9, user_wallet_address=ALICE)
        )
        assert membership.group_id == 9
        assert membership.user_wallet_address == ALICE
        assert membership.joined_at == NOW
        membership_repo.add.assert_called_once()


class TestSendMessageUseCase:
    """Tests for type-directed message validation."""

    def _use_case(self, users=(), groups=()):
        user_repo = MagicMock(spec=UserRepository)
        user_repo.get_by_wallet_address.side_effect = (
            lambda address: _user(address) if address in users else None
        )
        group_repo = MagicMock(spec=GroupRepository)
        group_repo.get_by_group_id.side_effect = (
            lambda group_id: _group(group_id) if group_id in groups else None
        )
        message_repo = MagicMock(spec=MessageRepository)
        message_repo.add.side_effect = _echo
        use_case = SendMessageUseCase(
            user_repo, group_repo, message_repo, clock=_fixed_clock
        )
        return use_case, user_repo, message_repo

    def test_unknown_sender(self) -> None:
        use_case, _, message_repo = self._use_case(users={BOB})
        with pytest.raises(SenderNotFoundError):
            use_case.execute(
                SendMessageCommand(
                    from_address=ALICE,
                    to_address=BOB,
                    content="hi",
                    message_type=MessageType.PRIVATE,
                )
            )
        message_repo.add.assert_not_called()

    def test_unknown_recipient(self) -> None:
        use_case, _, message_repo = self._use_case(users={ALICE})
        with pytest.raises(RecipientNotFoundError):
            use_case.execute(
                SendMessageCommand(
                    from_address=ALICE,
                    to_address=BOB,
                    content="hi",
                    message_type=MessageType.PRIVATE,
                )
            )
        message_repo.add.assert_not_called()

    def test_unknown_group(self) -> None:
        use_case, _, message_repo = self._use_case(users={ALICE})
        with pytest.raises(GroupNotFoundError):
            use_case.execute(
                SendMessageCommand(
                    from_address=ALICE,
                    group_id=4,
                    content="hi",
                    message_type=MessageType.GROUP,
                )
            )
        message_repo.add.assert_not_called()

    def test_private_without_recipient_rejected_before_lookup(self) -> None:
        use_case, user_repo, message_repo = self._use_case(users={ALICE})
        with pytest.raises(InvalidMessageError):
            use_case.execute(
                SendMessageCommand(
                    from_address=ALICE,
                    content="hi",
                    message_type=MessageType.PRIVATE,
                )
            )
        user_repo.get_by_wallet_address.assert_not_called()
        message_repo.add.assert_not_called()

    def test_message_stamped_with_service_time(self) -> None:
        use_case, _, _ = self._use_case(users={ALICE}, groups={4})
        message = use_case.execute(
            SendMessageCommand(
                from_address=ALICE,
                group_id=4,
                content="hi",
                message_type=MessageType.GROUP,
            )
        )
        assert message.timestamp == NOW
        assert message.created_at == NOW


class TestGetMessagesUseCase:
    """Tests for conversation mode selection."""

    def test_group_takes_priority_over_peer(self) -> None:
        message_repo = MagicMock(spec=MessageRepository)
        message_repo.list_group_conversation.return_value = []
        GetMessagesUseCase(message_repo).execute(
            GetMessagesQuery(user_address=ALICE, group_id=2, to_address=BOB, limit=10)
        )
        message_repo.list_group_conversation.assert_called_once_with(2, 10)
        message_repo.list_private_conversation.assert_not_called()

    def test_peer_selects_private_conversation(self) -> None:
        message_repo = MagicMock(spec=MessageRepository)
        message_repo.list_private_conversation.return_value = []
        GetMessagesUseCase(message_repo).execute(
            GetMessagesQuery(user_address=ALICE, to_address=BOB)
        )
        message_repo.list_private_conversation.assert_called_once_with(ALICE, BOB, 50)
        message_repo.list_group_conversation.assert_not_called()

    def test_no_selector_returns_empty_without_query(self) -> None:
        message_repo = MagicMock(spec=MessageRepository)
        result = GetMessagesUseCase(message_repo).execute(
            GetMessagesQuery(user_address=ALICE)
        )
        assert result == []
        message_repo.list_group_conversation.assert_not_called()
        message_repo.list_private_conversation.assert_not_called()
