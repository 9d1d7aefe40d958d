"""Database connection configuration.

Connection settings arrive as discrete fields (usually environment variables)
and are assembled here into a connection URI and a Django ``DATABASES`` entry.
"""

import os
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, Field

from core.exceptions import ConfigurationError

DEFAULT_INSTANT_UNREAD_LOOKBACK_INTERVAL = 30

# Maps URI protocols onto Django database backends
DATABASE_ENGINES = {
    "postgresql": "django.db.backends.postgresql",
    "postgres": "django.db.backends.postgresql",
    "sqlite": "django.db.backends.sqlite3",
}

# libpq option that refuses read-only (replica) sessions
REPLICA_SAFE_WRITE_OPTIONS = {"target_session_attrs": "read-write"}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class DatabaseConfig(BaseModel):
    """Discrete database connection fields.

    Attributes:
        protocol: URI scheme, which also selects the database backend.
        host: Database host name.
        port: Optional port; omitted from the URI when not set.
        username: Optional user; only used together with a password.
        password: Optional password; only used together with a username.
        database: Database name.
        retry_writes: Require a writable (primary) session.
        instant_unread_lookback_interval: Minutes an unread item must age
            before an instant email is considered.
    """

    protocol: str = Field("postgresql", min_length=1)
    host: str = Field("localhost", min_length=1)
    port: int | None = Field(None, gt=0, lt=65536)
    username: str | None = None
    password: str | None = None
    database: str = ""
    retry_writes: bool = False
    instant_unread_lookback_interval: int = Field(
        DEFAULT_INSTANT_UNREAD_LOOKBACK_INTERVAL, ge=0
    )

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Build the configuration from ``DB_*`` environment variables."""
        port = os.getenv("DB_PORT")
        return cls(
            protocol=os.getenv("DB_PROTOCOL", "postgresql"),
            host=os.getenv("DB_HOST", "localhost"),
            port=int(port) if port else None,
            username=os.getenv("DB_USERNAME") or None,
            password=os.getenv("DB_PASSWORD") or None,
            database=os.getenv("DB_NAME", "social_help"),
            retry_writes=_env_bool("DB_RETRY_WRITES"),
            instant_unread_lookback_interval=int(
                os.getenv(
                    "INSTANT_UNREAD_LOOKBACK_INTERVAL",
                    str(DEFAULT_INSTANT_UNREAD_LOOKBACK_INTERVAL),
                )
            ),
        )

    @property
    def has_credentials(self) -> bool:
        """Whether both a username and a password are configured."""
        return bool(self.username and self.password)


def build_database_uri(config: DatabaseConfig) -> str:
    """Assemble a connection URI from discrete config fields.

    Credentials are included only when both username and password are set,
    the port only when present, and the replica-safe write option only when
    ``retry_writes`` is enabled.

    Args:
        config: Database configuration

    Returns:
        Connection URI such as
        ``postgresql://user:secret@db:5432/social_help?target_session_attrs=read-write``

    Example:
        >>> build_database_uri(DatabaseConfig(host="db", database="app"))
        'postgresql://db/app'
    """
    credentials = (
        f"{quote(config.username, safe='')}:{quote(config.password, safe='')}@"
        if config.has_credentials
        else ""
    )
    port = f":{config.port}" if config.port else ""
    database = f"/{config.database}" if config.database else ""
    options = (
        "?" + "&".join(f"{k}={v}" for k, v in REPLICA_SAFE_WRITE_OPTIONS.items())
        if config.retry_writes
        else ""
    )
    return f"{config.protocol}://{credentials}{config.host}{port}{database}{options}"


def mask_database_uri(uri: str) -> str:
    """Hide the password portion of a connection URI for logging."""
    scheme, sep, rest = uri.partition("://")
    if not sep or "@" not in rest:
        return uri
    credentials, _, location = rest.rpartition("@")
    username = credentials.split(":", 1)[0]
    return f"{scheme}://{username}:***@{location}"


def database_settings(config: DatabaseConfig) -> dict[str, Any]:
    """Map the connection fields onto a Django ``DATABASES`` entry.

    Args:
        config: Database configuration

    Returns:
        Dictionary suitable for ``DATABASES["default"]``

    Raises:
        ConfigurationError: If the protocol has no matching database backend.
    """
    engine = DATABASE_ENGINES.get(config.protocol.lower())
    if engine is None:
        msg = (
            f"Unsupported database protocol {config.protocol!r}; "
            f"expected one of: {', '.join(DATABASE_ENGINES)}"
        )
        raise ConfigurationError(msg, setting="DB_PROTOCOL")

    if engine == DATABASE_ENGINES["sqlite"]:
        return {"ENGINE": engine, "NAME": config.database or ":memory:"}

    settings_dict: dict[str, Any] = {
        "ENGINE": engine,
        "NAME": config.database,
        "HOST": config.host,
        "PORT": str(config.port) if config.port else "",
        "USER": config.username or "",
        "PASSWORD": config.password or "",
        "OPTIONS": {},
    }
    if config.retry_writes:
        settings_dict["OPTIONS"].update(REPLICA_SAFE_WRITE_OPTIONS)
    return settings_dict
