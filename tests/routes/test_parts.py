"""
Tests for catalog part endpoints.

Tests cover:
- Listing with filters and pagination
- Category listing
- Single part retrieval
- Database and configuration errors
"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, patch
from postgrest.exceptions import APIError

from catalog.config import MissingSupabaseConfigError
from catalog.main import app

client = TestClient(app)


@pytest.fixture
def mock_part():
    """Mock part data."""
    return {
        "id": "part-123",
        "part_number": "BP-100",
        "name_en": "Brake pad",
        "name_ru": "Тормозная колодка",
        "category": "Brakes",
        "price": 25.5,
        "qty": 4,
        "image_url": "https://example.com/bp-100.jpg",
        "created_at": "2025-11-07T10:00:00Z",
        "updated_at": "2025-11-07T10:00:00Z"
    }


@pytest.fixture
def mock_get_supabase_client():
    """Mock get_supabase_client to return a fake client."""
    with patch("catalog.routes.parts.get_supabase_client") as mock:
        mock.return_value = MagicMock()
        yield mock


class TestListParts:
    """Tests for GET /parts"""

    @patch("catalog.routes.parts.get_parts")
    def test_list_parts_success(self, mock_get_parts, mock_get_supabase_client, mock_part):
        mock_get_parts.return_value = [mock_part]

        response = client.get("/parts")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["limit"] == 50
        assert data["offset"] == 0
        assert data["parts"][0]["part_number"] == "BP-100"
        assert data["parts"][0]["name_ru"] == "Тормозная колодка"
        assert Decimal(str(data["parts"][0]["price"])) == Decimal("25.5")

    @patch("catalog.routes.parts.get_parts")
    def test_list_parts_passes_filters(self, mock_get_parts, mock_get_supabase_client):
        mock_get_parts.return_value = []

        response = client.get("/parts?category=Brakes&search=pad&limit=10&offset=20")

        assert response.status_code == 200
        kwargs = mock_get_parts.call_args.kwargs
        assert kwargs["category"] == "Brakes"
        assert kwargs["search"] == "pad"
        assert kwargs["limit"] == 10
        assert kwargs["offset"] == 20

    def test_list_parts_invalid_limit(self, mock_get_supabase_client):
        response = client.get("/parts?limit=0")

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"

    @patch("catalog.routes.parts.get_parts")
    def test_list_parts_database_error(self, mock_get_parts, mock_get_supabase_client):
        mock_get_parts.side_effect = APIError(
            {"message": "connection reset", "code": "08006", "hint": None, "details": None}
        )

        response = client.get("/parts")

        assert response.status_code == 500
        assert response.json()["detail"]["error"] == "fetch_error"


class TestPartCategories:
    """Tests for GET /parts/categories"""

    @patch("catalog.routes.parts.get_part_categories")
    def test_categories(self, mock_categories, mock_get_supabase_client):
        mock_categories.return_value = ["Brakes", "Engine"]

        response = client.get("/parts/categories")

        assert response.status_code == 200
        assert response.json() == {"categories": ["Brakes", "Engine"]}


class TestGetPart:
    """Tests for GET /parts/{part_id}"""

    @patch("catalog.routes.parts.get_part_by_id")
    def test_get_part_success(self, mock_get_part, mock_get_supabase_client, mock_part):
        mock_get_part.return_value = mock_part

        response = client.get("/parts/part-123")

        assert response.status_code == 200
        assert response.json()["id"] == "part-123"
        mock_get_part.assert_called_once_with(mock_get_supabase_client.return_value, "part-123")

    @patch("catalog.routes.parts.get_part_by_id")
    def test_get_part_not_found(self, mock_get_part, mock_get_supabase_client):
        mock_get_part.return_value = None

        response = client.get("/parts/missing")

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "not_found"


def test_missing_configuration_returns_503():
    """Without Supabase configuration the API answers 503 instead of crashing."""
    with patch("catalog.routes.parts.get_supabase_client") as mock:
        mock.side_effect = MissingSupabaseConfigError()

        response = client.get("/parts")

    assert response.status_code == 503
    data = response.json()
    assert data["error"] == "service_unavailable"
    assert "Missing Supabase environment variables" in data["details"]


def test_health_does_not_need_supabase():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
