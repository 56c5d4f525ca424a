"""
Database connection management.

The engine is process-wide: it is created once at startup, shared by
every repository adapter and disposed at shutdown.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from amigos.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)

SQLITE_BUSY_TIMEOUT_SECONDS = 30


class Database:
    """SQLAlchemy engine owner.

    Provides the shared Engine, schema management and a health probe.
    No global state: the application keeps one instance on ``app.state``.
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
    ) -> None:
        """
        Initialize database settings. No connection is opened here.

        Args:
            database_url: SQLAlchemy connection URL.
            pool_size: Number of connections to keep in the pool.
            max_overflow: Connections allowed beyond pool_size.
            pool_timeout: Seconds to wait for a pooled connection.
            pool_recycle: Recycle connections after N seconds.
        """
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self._engine: Engine | None = None

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.database_url).get_backend_name() == "sqlite"

    @property
    def engine(self) -> Engine:
        """Return the connected engine.

        Raises:
            RuntimeError: If connect() has not been called.
        """
        if self._engine is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._engine

    def connect(self) -> None:
        """Create the engine. Calling it twice is a no-op."""
        if self._engine is not None:
            return

        if self.is_sqlite:
            # SQLite pools are not sized; concurrent writers wait on the lock.
            self._engine = create_engine(
                self.database_url,
                connect_args={
                    "timeout": SQLITE_BUSY_TIMEOUT_SECONDS,
                    "check_same_thread": False,
                },
            )
        else:
            self._engine = create_engine(
                self.database_url,
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_timeout=self.pool_timeout,
                pool_recycle=self.pool_recycle,
                pool_pre_ping=True,
            )
        logger.info("Database engine created (backend=%s)", self._engine.dialect.name)

    def disconnect(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is None:
            return

        self._engine.dispose()
        self._engine = None
        logger.info("Database engine disposed")

    def create_schema(self) -> None:
        """Create all tables, constraints and indexes that do not exist yet."""
        metadata.create_all(self.engine)
        logger.info("Database schema ensured")

    def health_check(self) -> bool:
        """
        Check database connectivity.

        Returns:
            True if a trivial query succeeds, False otherwise.
        """
        if self._engine is None:
            return False

        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.warning("Database health check failed", exc_info=True)
            return False
