"""Management command package for the core app."""
