"""
Tests for the chat domain layer.

Tests domain entities, error classes and the clock in isolation.
No external dependencies or IO required.
"""

from datetime import datetime

import pytest

from amigos.application.chat.dtos import GetMessagesQuery
from amigos.domain.chat.clock import utcnow
from amigos.domain.chat.entities import Message, MessageType
from amigos.domain.chat.errors import (
    AlreadyExistsError,
    AlreadyGroupMemberError,
    EntityNotFoundError,
    GroupAlreadyExistsError,
    GroupNotFoundError,
    InvalidMessageError,
    RecipientNotFoundError,
    SenderNotFoundError,
    UniqueConstraintViolationError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

ALICE = "0x" + "a" * 40
BOB = "0x" + "b" * 40
NOW = datetime(2025, 1, 1, 12, 0, 0)


class TestMessageEntity:
    """Tests for the private/group Message variant."""

    def test_private_constructor(self) -> None:
        message = Message.private(ALICE, BOB, "hi", NOW)
        assert message.message_type is MessageType.PRIVATE
        assert message.to_address == BOB
        assert message.group_id is None
        assert message.timestamp == message.created_at == NOW
        assert message.id is None
        assert message.is_private

    def test_group_constructor(self) -> None:
        message = Message.group(ALICE, 7, "hello all", NOW)
        assert message.message_type is MessageType.GROUP
        assert message.group_id == 7
        assert message.to_address is None
        assert not message.is_private

    def test_private_without_recipient_rejected(self) -> None:
        with pytest.raises(InvalidMessageError, match="requires a recipient"):
            Message(
                from_address=ALICE,
                content="hi",
                message_type=MessageType.PRIVATE,
                timestamp=NOW,
                created_at=NOW,
            )

    def test_private_with_group_rejected(self) -> None:
        with pytest.raises(InvalidMessageError):
            Message(
                from_address=ALICE,
                to_address=BOB,
                group_id=1,
                content="hi",
                message_type=MessageType.PRIVATE,
                timestamp=NOW,
                created_at=NOW,
            )

    def test_group_without_group_id_rejected(self) -> None:
        with pytest.raises(InvalidMessageError, match="requires a group id"):
            Message(
                from_address=ALICE,
                content="hi",
                message_type=MessageType.GROUP,
                timestamp=NOW,
                created_at=NOW,
            )

    def test_group_with_recipient_rejected(self) -> None:
        with pytest.raises(InvalidMessageError):
            Message(
                from_address=ALICE,
                to_address=BOB,
                group_id=1,
                content="hi",
                message_type=MessageType.GROUP,
                timestamp=NOW,
                created_at=NOW,
            )

    def test_group_id_zero_is_a_valid_target(self) -> None:
        message = Message.group(ALICE, 0, "hi", NOW)
        assert message.group_id == 0


class TestDomainErrors:
    """Tests for the error taxonomy."""

    def test_not_found_messages(self) -> None:
        assert SenderNotFoundError(ALICE).message == f"Sender not found: {ALICE}"
        assert RecipientNotFoundError(BOB).message == f"Recipient not found: {BOB}"
        assert GroupNotFoundError(3).message == "Group not found: 3"
        assert UserNotFoundError(ALICE).message == f"User not found: {ALICE}"

    def test_not_found_family(self) -> None:
        for error in (
            SenderNotFoundError(ALICE),
            RecipientNotFoundError(BOB),
            GroupNotFoundError(1),
        ):
            assert isinstance(error, EntityNotFoundError)

    def test_already_exists_family(self) -> None:
        assert isinstance(AlreadyGroupMemberError(1, ALICE), AlreadyExistsError)
        assert isinstance(UserAlreadyExistsError(ALICE), UniqueConstraintViolationError)
        assert isinstance(GroupAlreadyExistsError(1), UniqueConstraintViolationError)
        assert isinstance(
            UniqueConstraintViolationError("uq", "dup"), AlreadyExistsError
        )

    def test_unique_violation_names_constraint(self) -> None:
        error = UserAlreadyExistsError(ALICE)
        assert error.constraint == "uq_users_wallet_address"
        assert ALICE in error.message


class TestGetMessagesQuery:
    def test_default_limit(self) -> None:
        assert GetMessagesQuery(user_address=ALICE).limit == 50

    @pytest.mark.parametrize("limit", [0, -1, 101])
    def test_limit_out_of_range(self, limit: int) -> None:
        with pytest.raises(ValueError):
            GetMessagesQuery(user_address=ALICE, limit=limit)


def test_utcnow_is_naive() -> None:
    assert utcnow().tzinfo is None
