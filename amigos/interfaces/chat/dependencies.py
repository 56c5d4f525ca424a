"""
Dependency injection for the chat bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
All adapters share the process-wide engine held by the Database
instance on ``app.state``; nothing here opens a new engine.
"""

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from amigos.application.chat.create_group import CreateGroupUseCase
from amigos.application.chat.get_all_groups import GetAllGroupsUseCase
from amigos.application.chat.get_all_users import GetAllUsersUseCase
from amigos.application.chat.get_messages import GetMessagesUseCase
from amigos.application.chat.get_user import GetUserUseCase
from amigos.application.chat.get_user_groups import GetUserGroupsUseCase
from amigos.application.chat.join_group import JoinGroupUseCase
from amigos.application.chat.register_user import RegisterUserUseCase
from amigos.application.chat.send_message import SendMessageUseCase
from amigos.core.config import Settings
from amigos.infrastructure.chat.group_membership_repository import (
    GroupMembershipRepositoryAdapter,
)
from amigos.infrastructure.chat.group_repository import GroupRepositoryAdapter
from amigos.infrastructure.chat.message_repository import MessageRepositoryAdapter
from amigos.infrastructure.chat.user_repository import UserRepositoryAdapter
from amigos.infrastructure.persistence.database import Database


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """Return the Database created at application startup."""
    return request.app.state.database


def get_engine(database: Database = Depends(get_database)) -> Engine:
    """Return the shared SQLAlchemy engine."""
    return database.engine


def get_register_user_use_case(
    engine: Engine = Depends(get_engine),
) -> RegisterUserUseCase:
    """Build RegisterUserUseCase with its infrastructure dependencies."""
    return RegisterUserUseCase(user_repo=UserRepositoryAdapter(engine))


def get_user_use_case(engine: Engine = Depends(get_engine)) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=UserRepositoryAdapter(engine))


def get_all_users_use_case(
    engine: Engine = Depends(get_engine),
) -> GetAllUsersUseCase:
    """Build GetAllUsersUseCase with its infrastructure dependencies."""
    return GetAllUsersUseCase(user_repo=UserRepositoryAdapter(engine))


def get_create_group_use_case(
    engine: Engine = Depends(get_engine),
) -> CreateGroupUseCase:
    """Build CreateGroupUseCase with its infrastructure dependencies."""
    return CreateGroupUseCase(group_repo=GroupRepositoryAdapter(engine))


def get_all_groups_use_case(
    engine: Engine = Depends(get_engine),
) -> GetAllGroupsUseCase:
    """Build GetAllGroupsUseCase with its infrastructure dependencies."""
    return GetAllGroupsUseCase(group_repo=GroupRepositoryAdapter(engine))


def get_join_group_use_case(engine: Engine = Depends(get_engine)) -> JoinGroupUseCase:
    """Build JoinGroupUseCase with its infrastructure dependencies."""
    return JoinGroupUseCase(
        group_repo=GroupRepositoryAdapter(engine),
        user_repo=UserRepositoryAdapter(engine),
        membership_repo=GroupMembershipRepositoryAdapter(engine),
    )


def get_user_groups_use_case(
    engine: Engine = Depends(get_engine),
) -> GetUserGroupsUseCase:
    """Build GetUserGroupsUseCase with its infrastructure dependencies."""
    return GetUserGroupsUseCase(group_repo=GroupRepositoryAdapter(engine))


def get_send_message_use_case(
    engine: Engine = Depends(get_engine),
) -> SendMessageUseCase:
    """Build SendMessageUseCase with its infrastructure dependencies."""
    return SendMessageUseCase(
        user_repo=UserRepositoryAdapter(engine),
        group_repo=GroupRepositoryAdapter(engine),
        message_repo=MessageRepositoryAdapter(engine),
    )


def get_messages_use_case(engine: Engine = Depends(get_engine)) -> GetMessagesUseCase:
    """Build GetMessagesUseCase with its infrastructure dependencies."""
    return GetMessagesUseCase(message_repo=MessageRepositoryAdapter(engine))
