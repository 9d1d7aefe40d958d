"""Background jobs for the digest service."""
