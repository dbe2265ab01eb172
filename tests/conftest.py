"""
Pytest configuration for the parts catalog tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from typing import Any
from unittest.mock import MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")


class MockSupabaseResponse:
    """Mock Supabase API response object."""
    def __init__(self, data: Any = None, count: Any = None):
        self.data = data
        self.count = count


QUERY_METHODS = (
    "select", "insert", "update", "delete", "upsert",
    "eq", "neq", "gt", "lt", "or_", "ilike",
    "order", "range", "limit", "single",
)


@pytest.fixture
def make_query():
    """
    Factory for a fluent query mock.

    Every builder method returns the same mock, so any chain like
    table().select().eq().order().execute() works. execute() returns the
    given data lists in order, one per call.
    """
    def _make(*results: Any) -> MagicMock:
        query = MagicMock()
        for method in QUERY_METHODS:
            getattr(query, method).return_value = query
        query.execute.side_effect = [MockSupabaseResponse(data=data) for data in results]
        return query
    return _make


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client for testing services.
    Returns a MagicMock that simulates Supabase client behavior.
    """
    mock_client = MagicMock()
    return mock_client
