"""
Shared fixtures for the Amigos test suite.

Integration fixtures run the real SQLAlchemy adapters against a
throw-away SQLite database file, so no PostgreSQL is needed.
"""

from datetime import datetime, timedelta

import pytest

from amigos.infrastructure.chat.group_membership_repository import (
    GroupMembershipRepositoryAdapter,
)
from amigos.infrastructure.chat.group_repository import GroupRepositoryAdapter
from amigos.infrastructure.chat.message_repository import MessageRepositoryAdapter
from amigos.infrastructure.chat.user_repository import UserRepositoryAdapter
from amigos.infrastructure.persistence.database import Database


class TickingClock:
    """Deterministic clock: every call returns a time one step later."""

    def __init__(
        self,
        start: datetime = datetime(2025, 1, 1, 12, 0, 0),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def database(tmp_path):
    """A connected Database with the schema created."""
    db = Database(database_url=f"sqlite:///{tmp_path / 'amigos.db'}")
    db.connect()
    db.create_schema()
    yield db
    db.disconnect()


@pytest.fixture
def user_repo(database: Database) -> UserRepositoryAdapter:
    return UserRepositoryAdapter(database.engine)


@pytest.fixture
def group_repo(database: Database) -> GroupRepositoryAdapter:
    return GroupRepositoryAdapter(database.engine)


@pytest.fixture
def membership_repo(database: Database) -> GroupMembershipRepositoryAdapter:
    return GroupMembershipRepositoryAdapter(database.engine)


@pytest.fixture
def message_repo(database: Database) -> MessageRepositoryAdapter:
    return MessageRepositoryAdapter(database.engine)
