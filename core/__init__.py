"""Core app: unread message and notification lookups for email delivery."""
