"""
Relational schema of the off-chain store.

Defined with SQLAlchemy Core so the same metadata creates the schema
on PostgreSQL in production and on SQLite in tests. Uniqueness
constraints are named: adapters translate violations of these names
into domain errors.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("wallet_address", Text, nullable=False),
    Column("username", String(50), nullable=False),
    Column("ipfs_profile_pic_hash", Text, nullable=True),
    Column("registration_timestamp", DateTime, nullable=False),
    Column("is_registered", Boolean, nullable=False, default=True),
    Column("created_at", DateTime, nullable=False),
    UniqueConstraint("wallet_address", name="uq_users_wallet_address"),
)

groups = Table(
    "groups",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("group_id", Integer, nullable=False),
    Column("name", String(100), nullable=False),
    Column("creator", Text, nullable=False),
    Column("created_at", DateTime, nullable=False),
    UniqueConstraint("group_id", name="uq_groups_group_id"),
)

group_memberships = Table(
    "group_memberships",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("group_id", Integer, nullable=False),
    Column("user_wallet_address", Text, nullable=False),
    Column("joined_at", DateTime, nullable=False),
    UniqueConstraint(
        "group_id", "user_wallet_address", name="uq_group_memberships_group_member"
    ),
    Index("ix_group_memberships_member", "user_wallet_address"),
)

messages = Table(
    "messages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("from_address", Text, nullable=False),
    Column("to_address", Text, nullable=True),
    Column("group_id", Integer, nullable=True),
    Column("content", String(1000), nullable=False),
    Column("message_type", String(16), nullable=False),
    Column("timestamp", DateTime, nullable=False),
    Column("created_at", DateTime, nullable=False),
    CheckConstraint(
        "(message_type = 'private' AND to_address IS NOT NULL AND group_id IS NULL)"
        " OR (message_type = 'group' AND group_id IS NOT NULL AND to_address IS NULL)",
        name="ck_messages_target",
    ),
    Index("ix_messages_group_timestamp", "group_id", "timestamp"),
    Index("ix_messages_participants", "from_address", "to_address"),
)
