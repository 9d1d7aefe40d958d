"""Middleware components for the digest service."""

from core.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
