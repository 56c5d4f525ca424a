"""
FastAPI router for the chat remote procedures.

Each procedure is ``POST /rpc/<procedureName>`` with a JSON body.
All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from amigos.application.chat.create_group import CreateGroupUseCase
from amigos.application.chat.dtos import (
    CreateGroupCommand,
    GetMessagesQuery,
    GetUserGroupsQuery,
    GetUserQuery,
    JoinGroupCommand,
    RegisterUserCommand,
    SendMessageCommand,
)
from amigos.application.chat.get_all_groups import GetAllGroupsUseCase
from amigos.application.chat.get_all_users import GetAllUsersUseCase
from amigos.application.chat.get_messages import GetMessagesUseCase
from amigos.application.chat.get_user import GetUserUseCase
from amigos.application.chat.get_user_groups import GetUserGroupsUseCase
from amigos.application.chat.join_group import JoinGroupUseCase
from amigos.application.chat.register_user import RegisterUserUseCase
from amigos.application.chat.send_message import SendMessageUseCase
from amigos.domain.chat.entities import Group, GroupMembership, Message, MessageType, User
from amigos.interfaces.chat.dependencies import (
    get_all_groups_use_case,
    get_all_users_use_case,
    get_create_group_use_case,
    get_join_group_use_case,
    get_messages_use_case,
    get_register_user_use_case,
    get_send_message_use_case,
    get_user_groups_use_case,
    get_user_use_case,
)
from amigos.interfaces.chat.schemas import (
    CreateGroupRequest,
    ErrorResponse,
    GetMessagesRequest,
    GetUserGroupsRequest,
    GetUserRequest,
    GroupMembershipResponse,
    GroupResponse,
    JoinGroupRequest,
    MessageResponse,
    MessageTypeSchema,
    RegisterUserRequest,
    SendMessageRequest,
    UserResponse,
)

router = APIRouter(prefix="/rpc", tags=["chat"])


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        wallet_address=user.wallet_address,
        username=user.username,
        ipfs_profile_pic_hash=user.ipfs_profile_pic_hash,
        registration_timestamp=user.registration_timestamp,
        is_registered=user.is_registered,
        created_at=user.created_at,
    )


def _group_response(group: Group) -> GroupResponse:
    return GroupResponse(
        id=group.id,
        group_id=group.group_id,
        name=group.name,
        creator=group.creator,
        created_at=group.created_at,
    )


def _membership_response(membership: GroupMembership) -> GroupMembershipResponse:
    return GroupMembershipResponse(
        id=membership.id,
        group_id=membership.group_id,
        user_wallet_address=membership.user_wallet_address,
        joined_at=membership.joined_at,
    )


def _message_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        from_address=message.from_address,
        to_address=message.to_address,
        group_id=message.group_id,
        content=message.content,
        message_type=MessageTypeSchema(message.message_type.value),
        timestamp=message.timestamp,
        created_at=message.created_at,
    )


# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------


@router.post(
    "/registerUser",
    response_model=UserResponse,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Register a user",
    description="Register a wallet address with a username and optional profile picture.",
)
def register_user(
    request: RegisterUserRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> UserResponse:
    """Register a new user."""
    command = RegisterUserCommand(
        wallet_address=request.wallet_address,
        username=request.username,
        ipfs_profile_pic_hash=request.ipfs_profile_pic_hash,
    )
    return _user_response(use_case.execute(command))


@router.post(
    "/getUser",
    response_model=Optional[UserResponse],
    responses={422: {"model": ErrorResponse}},
    summary="Get a user",
    description="Look up a user by exact wallet address. Returns null when absent.",
)
def get_user(
    request: GetUserRequest,
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> Optional[UserResponse]:
    """Return the user for a wallet address, or null."""
    user = use_case.execute(GetUserQuery(wallet_address=request.wallet_address))
    return _user_response(user) if user is not None else None


@router.post(
    "/getAllUsers",
    response_model=list[UserResponse],
    summary="List users",
    description="List every registered user, newest first.",
)
def get_all_users(
    use_case: GetAllUsersUseCase = Depends(get_all_users_use_case),
) -> list[UserResponse]:
    """List all users."""
    return [_user_response(user) for user in use_case.execute()]


# ------------------------------------------------------------------
# Groups
# ------------------------------------------------------------------


@router.post(
    "/createGroup",
    response_model=GroupResponse,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Create a group",
    description="Mirror an on-chain group. The creator need not be registered.",
)
def create_group(
    request: CreateGroupRequest,
    use_case: CreateGroupUseCase = Depends(get_create_group_use_case),
) -> GroupResponse:
    """Create a group."""
    command = CreateGroupCommand(
        group_id=request.group_id,
        name=request.name,
        creator=request.creator,
    )
    return _group_response(use_case.execute(command))


@router.post(
    "/joinGroup",
    response_model=GroupMembershipResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Join a group",
    description="Add a registered user to an existing group.",
)
def join_group(
    request: JoinGroupRequest,
    use_case: JoinGroupUseCase = Depends(get_join_group_use_case),
) -> GroupMembershipResponse:
    """Join a group."""
    command = JoinGroupCommand(
        group_id=request.group_id,
        user_wallet_address=request.user_wallet_address,
    )
    return _membership_response(use_case.execute(command))


@router.post(
    "/getUserGroups",
    response_model=list[GroupResponse],
    responses={422: {"model": ErrorResponse}},
    summary="List a user's groups",
    description="List the groups a wallet address has joined.",
)
def get_user_groups(
    request: GetUserGroupsRequest,
    use_case: GetUserGroupsUseCase = Depends(get_user_groups_use_case),
) -> list[GroupResponse]:
    """List the groups of one member."""
    query = GetUserGroupsQuery(user_wallet_address=request.user_wallet_address)
    return [_group_response(group) for group in use_case.execute(query)]


@router.post(
    "/getAllGroups",
    response_model=list[GroupResponse],
    summary="List groups",
    description="List every group.",
)
def get_all_groups(
    use_case: GetAllGroupsUseCase = Depends(get_all_groups_use_case),
) -> list[GroupResponse]:
    """List all groups."""
    return [_group_response(group) for group in use_case.execute()]


# ------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------


@router.post(
    "/sendMessage",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Send a message",
    description="Persist a private or group message stamped with the service time.",
)
def send_message(
    request: SendMessageRequest,
    use_case: SendMessageUseCase = Depends(get_send_message_use_case),
) -> MessageResponse:
    """Persist a message."""
    command = SendMessageCommand(
        from_address=request.from_address,
        to_address=request.to_address,
        group_id=request.group_id,
        content=request.content,
        message_type=MessageType(request.message_type.value),
    )
    return _message_response(use_case.execute(command))


@router.post(
    "/getMessages",
    response_model=list[MessageResponse],
    responses={422: {"model": ErrorResponse}},
    summary="Get a conversation",
    description=(
        "Fetch a group conversation (group_id) or the private conversation "
        "with to_address, newest first."
    ),
)
def get_messages(
    request: GetMessagesRequest,
    use_case: GetMessagesUseCase = Depends(get_messages_use_case),
) -> list[MessageResponse]:
    """Fetch one conversation."""
    query = GetMessagesQuery(
        user_address=request.user_address,
        group_id=request.group_id,
        to_address=request.to_address,
        limit=request.limit,
    )
    return [_message_response(message) for message in use_case.execute(query)]
