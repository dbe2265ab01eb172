"""
Tests for cart endpoints.

Tests cover:
- Reading a cart with embedded parts
- Adding parts (new row and increment)
- Quantity updates and validation
- Removing a row and clearing the cart
- Constraint errors from the database
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, patch
from postgrest.exceptions import APIError

from catalog.main import app

client = TestClient(app)

USER_ID = "user-123"


@pytest.fixture
def mock_part():
    return {
        "id": "part-123",
        "part_number": "BP-100",
        "name_en": "Brake pad",
        "name_ru": "Тормозная колодка",
        "category": "Brakes",
        "price": 25.5,
        "qty": 4,
        "image_url": None,
    }


@pytest.fixture
def mock_cart_item(mock_part):
    return {
        "id": "item-1",
        "user_id": USER_ID,
        "part_id": "part-123",
        "quantity": 2,
        "created_at": "2025-11-07T10:00:00Z",
        "part": mock_part,
    }


@pytest.fixture
def mock_get_supabase_client():
    """Mock get_supabase_client to return a fake client."""
    with patch("catalog.routes.cart.get_supabase_client") as mock:
        mock.return_value = MagicMock()
        yield mock


class TestGetCart:
    """Tests for GET /users/{user_id}/cart"""

    @patch("catalog.routes.cart.get_cart_items")
    def test_get_cart(self, mock_get_items, mock_get_supabase_client, mock_cart_item):
        second = {**mock_cart_item, "id": "item-2", "part_id": "part-456", "quantity": 3, "part": None}
        mock_get_items.return_value = [mock_cart_item, second]

        response = client.get(f"/users/{USER_ID}/cart")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert data["total_quantity"] == 5
        assert data["items"][0]["part"]["part_number"] == "BP-100"
        assert data["items"][1]["part"] is None
        mock_get_items.assert_called_once_with(mock_get_supabase_client.return_value, USER_ID)

    @patch("catalog.routes.cart.get_cart_items")
    def test_get_empty_cart(self, mock_get_items, mock_get_supabase_client):
        mock_get_items.return_value = []

        response = client.get(f"/users/{USER_ID}/cart")

        assert response.status_code == 200
        assert response.json() == {"items": [], "count": 0, "total_quantity": 0}


class TestAddToCart:
    """Tests for POST /users/{user_id}/cart"""

    @patch("catalog.routes.cart.add_to_cart")
    def test_add_success(self, mock_add, mock_get_supabase_client, mock_cart_item):
        mock_add.return_value = {k: v for k, v in mock_cart_item.items() if k != "part"}

        response = client.post(
            f"/users/{USER_ID}/cart",
            json={"part_id": "part-123", "quantity": 2}
        )

        assert response.status_code == 201
        assert response.json()["quantity"] == 2
        kwargs = mock_add.call_args.kwargs
        assert kwargs["user_id"] == USER_ID
        assert kwargs["part_id"] == "part-123"
        assert kwargs["quantity"] == 2

    @patch("catalog.routes.cart.add_to_cart")
    def test_add_defaults_to_one(self, mock_add, mock_get_supabase_client, mock_cart_item):
        mock_add.return_value = {**mock_cart_item, "quantity": 1, "part": None}

        response = client.post(f"/users/{USER_ID}/cart", json={"part_id": "part-123"})

        assert response.status_code == 201
        assert mock_add.call_args.kwargs["quantity"] == 1

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_add_non_positive_quantity(self, mock_get_supabase_client, quantity):
        response = client.post(
            f"/users/{USER_ID}/cart",
            json={"part_id": "part-123", "quantity": quantity}
        )

        assert response.status_code == 422

    @patch("catalog.routes.cart.add_to_cart")
    def test_add_unknown_part(self, mock_add, mock_get_supabase_client):
        mock_add.side_effect = APIError({
            "message": 'insert or update on table "cart" violates foreign key constraint',
            "code": "23503",
            "hint": None,
            "details": None,
        })

        response = client.post(f"/users/{USER_ID}/cart", json={"part_id": "missing"})

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "not_found"

    @patch("catalog.routes.cart.add_to_cart")
    def test_add_duplicate_race(self, mock_add, mock_get_supabase_client):
        mock_add.side_effect = APIError({
            "message": "duplicate key value violates unique constraint",
            "code": "23505",
            "hint": None,
            "details": None,
        })

        response = client.post(f"/users/{USER_ID}/cart", json={"part_id": "part-123"})

        assert response.status_code == 409
        assert response.json()["detail"]["error"] == "conflict"


class TestUpdateCartItem:
    """Tests for PATCH /users/{user_id}/cart/{item_id}"""

    @patch("catalog.routes.cart.update_cart_item_quantity")
    def test_update_success(self, mock_update, mock_get_supabase_client, mock_cart_item):
        mock_update.return_value = {**mock_cart_item, "quantity": 7, "part": None}

        response = client.patch(f"/users/{USER_ID}/cart/item-1", json={"quantity": 7})

        assert response.status_code == 200
        assert response.json()["quantity"] == 7

    @patch("catalog.routes.cart.update_cart_item_quantity")
    def test_update_not_found(self, mock_update, mock_get_supabase_client):
        mock_update.return_value = None

        response = client.patch(f"/users/{USER_ID}/cart/missing", json={"quantity": 1})

        assert response.status_code == 404

    def test_update_zero_quantity(self, mock_get_supabase_client):
        response = client.patch(f"/users/{USER_ID}/cart/item-1", json={"quantity": 0})

        assert response.status_code == 422

    @patch("catalog.routes.cart.update_cart_item_quantity")
    def test_update_check_violation(self, mock_update, mock_get_supabase_client):
        mock_update.side_effect = APIError({
            "message": 'new row for relation "cart" violates check constraint "cart_quantity_check"',
            "code": "23514",
            "hint": None,
            "details": None,
        })

        response = client.patch(f"/users/{USER_ID}/cart/item-1", json={"quantity": 1})

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "invalid_request"


class TestRemoveFromCart:
    """Tests for DELETE /users/{user_id}/cart[/{item_id}]"""

    @patch("catalog.routes.cart.remove_cart_item")
    def test_remove_item(self, mock_remove, mock_get_supabase_client):
        mock_remove.return_value = True

        response = client.delete(f"/users/{USER_ID}/cart/item-1")

        assert response.status_code == 204
        mock_remove.assert_called_once_with(
            mock_get_supabase_client.return_value, USER_ID, "item-1"
        )

    @patch("catalog.routes.cart.remove_cart_item")
    def test_remove_missing_item(self, mock_remove, mock_get_supabase_client):
        mock_remove.return_value = False

        response = client.delete(f"/users/{USER_ID}/cart/missing")

        assert response.status_code == 404

    @patch("catalog.routes.cart.clear_cart")
    def test_clear_cart(self, mock_clear, mock_get_supabase_client):
        mock_clear.return_value = 3

        response = client.delete(f"/users/{USER_ID}/cart")

        assert response.status_code == 200
        assert response.json() == {"status": "CLEARED", "removed": 3}
