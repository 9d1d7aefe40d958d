"""Shared database connection handle."""

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, connections
from django.db.backends.base.base import BaseDatabaseWrapper
from django.db.utils import OperationalError

import structlog

from core.config import build_database_uri, mask_database_uri

logger = structlog.get_logger(__name__)


class DatabaseConnectionManager:
    """Establishes or reuses the process-wide database connection.

    Pooling is left to the database driver; this class only decides whether
    an existing handle can be reused.
    """

    def __init__(self, alias: str = DEFAULT_DB_ALIAS) -> None:
        """Initialize the connection manager.

        Args:
            alias: Django database alias to connect through
        """
        self.alias = alias
        self.connection: BaseDatabaseWrapper | None = None

    @property
    def uri(self) -> str:
        """Connection URI built from the configured fields."""
        return build_database_uri(settings.DATABASE_CONFIG)

    def connect(
        self, cached_connection: BaseDatabaseWrapper | None = None
    ) -> BaseDatabaseWrapper:
        """Return a usable connection handle.

        A cached handle is reused when it is still connected; otherwise the
        configured alias is connected. No retry is attempted.

        Args:
            cached_connection: Handle from a previous invocation, if any

        Returns:
            Connected database wrapper

        Raises:
            OperationalError: If the database is unreachable or rejects the
                credentials.
        """
        if cached_connection is not None and _is_connected(cached_connection):
            logger.debug("database_connection_reused", alias=cached_connection.alias)
            self.connection = cached_connection
            self.alias = cached_connection.alias
            return cached_connection

        if cached_connection is not None:
            # The alias wrapper is shared per thread; a dead raw connection
            # must be dropped or ensure_connection() keeps it.
            logger.warning("database_connection_stale", alias=cached_connection.alias)
            cached_connection.close()

        wrapper = connections[self.alias]
        try:
            wrapper.ensure_connection()
        except OperationalError as e:
            logger.error(
                "database_connection_failed",
                alias=self.alias,
                uri=mask_database_uri(self.uri),
                error=str(e),
            )
            raise

        logger.info(
            "database_connection_established",
            alias=self.alias,
            uri=mask_database_uri(self.uri),
        )
        self.connection = wrapper
        return wrapper


def _is_connected(wrapper: BaseDatabaseWrapper) -> bool:
    return wrapper.connection is not None and wrapper.is_usable()
