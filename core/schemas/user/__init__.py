"""User-related schemas."""

from core.schemas.user.receiver import Receiver

__all__ = ["Receiver"]
