"""Shared pytest fixtures and configuration."""

import os
import pytest
from unittest.mock import MagicMock
from freezegun import freeze_time

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client whose table() returns a chainable query."""
    client = MagicMock()
    query = MagicMock()
    for method in ("select", "insert", "update", "delete", "eq", "single"):
        getattr(query, method).return_value = query
    client.table.return_value = query
    return client


@pytest.fixture
def rls_error():
    """PostgREST error for a row-level security violation."""
    return {
        "message": "new row violates row-level security policy for table briefs",
        "code": "42501",
        "details": None,
        "hint": None,
    }


@pytest.fixture
def foreign_key_error():
    """PostgREST error for a foreign key violation."""
    return {
        "message": 'insert or update on table "assets" violates foreign key constraint "assets_media_id_fkey"',
        "code": "23503",
        "details": 'Key (media_id)=(999) is not present in table "media".',
        "hint": None,
    }


@pytest.fixture
def unique_error():
    """PostgREST error for a unique constraint violation."""
    return {
        "message": 'duplicate key value violates unique constraint "tags_name_key"',
        "code": "23505",
        "details": "Key (name)=(summer-campaign) already exists.",
        "hint": None,
    }


@pytest.fixture
def freeze_time_fixture():
    """Fixture for freezing time in tests."""
    with freeze_time("2024-12-09 12:00:00") as frozen_time:
        yield frozen_time


@pytest.fixture
def reset_supabase_singleton():
    """Clear the cached Supabase client before and after a test."""
    import src.services.supabase_client as supabase_client

    supabase_client._client = None
    yield
    supabase_client._client = None
