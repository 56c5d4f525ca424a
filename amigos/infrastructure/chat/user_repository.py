"""
Adapter: User repository.

Implements UserRepository port.
Persists and retrieves users from the ``users`` table.
"""

import logging
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from amigos.domain.chat.entities import User
from amigos.domain.chat.errors import UserAlreadyExistsError
from amigos.domain.chat.ports import UserRepository
from amigos.infrastructure.persistence.errors import is_unique_violation
from amigos.infrastructure.persistence.tables import users

logger = logging.getLogger(__name__)


def _to_user(row: RowMapping) -> User:
    return User(
        id=row["id"],
        wallet_address=row["wallet_address"],
        username=row["username"],
        ipfs_profile_pic_hash=row["ipfs_profile_pic_hash"],
        registration_timestamp=row["registration_timestamp"],
        is_registered=bool(row["is_registered"]),
        created_at=row["created_at"],
    )


class UserRepositoryAdapter(UserRepository):
    """SQLAlchemy implementation of the user repository.

    Wallet addresses are compared as stored: no case folding.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, user: User) -> User:
        """Insert a user row.

        Args:
            user: Unsaved user entity.

        Returns:
            The user with its surrogate id.

        Raises:
            UserAlreadyExistsError: If uq_users_wallet_address rejects the row.
        """
        stmt = insert(users).values(
            wallet_address=user.wallet_address,
            username=user.username,
            ipfs_profile_pic_hash=user.ipfs_profile_pic_hash,
            registration_timestamp=user.registration_timestamp,
            is_registered=user.is_registered,
            created_at=user.created_at,
        )
        try:
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise UserAlreadyExistsError(user.wallet_address) from exc
            raise

        user_id = result.inserted_primary_key[0]
        logger.debug("Inserted user id=%d wallet=%s", user_id, user.wallet_address)
        return User(
            id=user_id,
            wallet_address=user.wallet_address,
            username=user.username,
            ipfs_profile_pic_hash=user.ipfs_profile_pic_hash,
            registration_timestamp=user.registration_timestamp,
            is_registered=user.is_registered,
            created_at=user.created_at,
        )

    def get_by_wallet_address(self, wallet_address: str) -> Optional[User]:
        stmt = select(users).where(users.c.wallet_address == wallet_address)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _to_user(row) if row is not None else None

    def list_newest_first(self) -> list[User]:
        stmt = select(users).order_by(users.c.created_at.desc(), users.c.id.desc())
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_to_user(row) for row in rows]
