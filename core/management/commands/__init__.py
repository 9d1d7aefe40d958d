"""Management commands for the digest service."""
