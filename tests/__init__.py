"""Test suite for the digest service."""
