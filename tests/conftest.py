"""Pytest configuration and shared fixtures."""

import os

import django

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "digest_service.settings_test")
django.setup()


@pytest.fixture
def api_client():
    """Provide DRF test client."""
    from rest_framework.test import APIClient  # noqa: PLC0415

    return APIClient()
