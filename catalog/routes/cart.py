"""
Cart API endpoints.

Carts are addressed by user id. There is no session on the Supabase client,
so these endpoints trust the user id in the path; every query is still
scoped to that user by the cart service.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, HTTPException, status
from postgrest.exceptions import APIError

from catalog.db.client import get_supabase_client
from catalog.routes.parts import part_to_response
from catalog.services import (
    add_to_cart,
    clear_cart,
    get_cart_items,
    remove_cart_item,
    update_cart_item_quantity,
)
from catalog.schemas.cart import (
    CartClearResponse,
    CartItemCreateRequest,
    CartItemResponse,
    CartItemUpdateRequest,
    CartResponse,
)
from catalog.utils.errors import http_error_from_api_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/{user_id}/cart", tags=["cart"])


def cart_item_to_response(item: Dict[str, Any]) -> CartItemResponse:
    part = item.get("part")
    return CartItemResponse(
        id=str(item["id"]),
        user_id=str(item["user_id"]),
        part_id=str(item["part_id"]),
        quantity=item["quantity"],
        created_at=item.get("created_at"),
        part=part_to_response(part) if part else None,
    )


@router.get(
    "",
    response_model=CartResponse,
    status_code=status.HTTP_200_OK,
    summary="Get a user's cart"
)
async def get_cart(user_id: str) -> CartResponse:
    """Return every cart row for the user with the part embedded."""
    supabase_client = get_supabase_client()

    try:
        items = await get_cart_items(supabase_client, user_id)
    except APIError as e:
        raise http_error_from_api_error(e, "fetch_error", "Failed to retrieve cart")

    responses = [cart_item_to_response(item) for item in items]

    return CartResponse(
        items=responses,
        count=len(responses),
        total_quantity=sum(item.quantity for item in responses),
    )


@router.post(
    "",
    response_model=CartItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a part to the cart",
    description="""
    Add a part to the user's cart.

    If the part is already in the cart its quantity is increased; the
    (user, part) pair is unique so no second row is created.
    """
)
async def add_cart_item(user_id: str, request: CartItemCreateRequest) -> CartItemResponse:
    supabase_client = get_supabase_client()

    try:
        item = await add_to_cart(
            supabase_client=supabase_client,
            user_id=user_id,
            part_id=request.part_id,
            quantity=request.quantity,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "details": str(e)}
        )
    except APIError as e:
        raise http_error_from_api_error(
            e,
            "create_error",
            "Failed to add part to cart",
            conflict_details="Part is already in the cart",
        )

    return cart_item_to_response(item)


@router.patch(
    "/{item_id}",
    response_model=CartItemResponse,
    status_code=status.HTTP_200_OK,
    summary="Change the quantity of a cart item"
)
async def update_cart_item(
    user_id: str,
    item_id: str,
    request: CartItemUpdateRequest
) -> CartItemResponse:
    supabase_client = get_supabase_client()

    try:
        item = await update_cart_item_quantity(
            supabase_client=supabase_client,
            user_id=user_id,
            item_id=item_id,
            quantity=request.quantity,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "details": str(e)}
        )
    except APIError as e:
        raise http_error_from_api_error(e, "update_error", "Failed to update cart item")

    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": f"Cart item {item_id} not found"}
        )

    return cart_item_to_response(item)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a cart item"
)
async def delete_cart_item(user_id: str, item_id: str) -> None:
    supabase_client = get_supabase_client()

    try:
        removed = await remove_cart_item(supabase_client, user_id, item_id)
    except APIError as e:
        raise http_error_from_api_error(e, "delete_error", "Failed to remove cart item")

    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": f"Cart item {item_id} not found"}
        )


@router.delete(
    "",
    response_model=CartClearResponse,
    status_code=status.HTTP_200_OK,
    summary="Clear the cart"
)
async def delete_cart(user_id: str) -> CartClearResponse:
    supabase_client = get_supabase_client()

    try:
        removed = await clear_cart(supabase_client, user_id)
    except APIError as e:
        raise http_error_from_api_error(e, "delete_error", "Failed to clear cart")

    logger.info(f"Cart cleared for user {user_id} ({removed} items)")

    return CartClearResponse(status="CLEARED", removed=removed)
