"""Configuration helpers for the digest service."""

from core.config.database import (
    DatabaseConfig,
    build_database_uri,
    database_settings,
    mask_database_uri,
)

__all__ = [
    "DatabaseConfig",
    "build_database_uri",
    "database_settings",
    "mask_database_uri",
]
