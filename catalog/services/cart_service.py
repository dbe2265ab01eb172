"""
Cart service.

Each user has at most one cart row per part (UNIQUE(user_id, part_id)).
Adding a part that is already in the cart increases its quantity instead of
inserting a second row.

Every query is filtered by user_id here. The cart RLS policy is permissive,
so this filter is the only thing keeping users out of each other's carts.
"""

import logging
from typing import Any, Dict, List, Optional, cast

from supabase import Client

from catalog.utils.constants import CART_TABLE, PARTS_TABLE

logger = logging.getLogger(__name__)

# Cart rows with the referenced part embedded as "part"
CART_SELECT = f"id, user_id, part_id, quantity, created_at, part:{PARTS_TABLE}(*)"


def _require_positive_quantity(quantity: int) -> None:
    if quantity <= 0:
        raise ValueError("Cart quantity must be greater than zero")


async def get_cart_items(
    supabase_client: Client,
    user_id: str
) -> List[Dict[str, Any]]:
    """
    Fetch all cart rows for a user, each with its part embedded.

    Args:
        supabase_client: Supabase client
        user_id: Owner of the cart

    Returns:
        List of cart item dicts, oldest first
    """
    logger.debug(f"Fetching cart for user {user_id}")

    result = (
        supabase_client.table(CART_TABLE)
        .select(CART_SELECT)
        .eq("user_id", user_id)
        .order("created_at")
        .execute()
    )

    items: List[Dict[str, Any]] = cast(List[Dict[str, Any]], result.data or [])
    logger.info(f"Found {len(items)} cart items for user {user_id}")

    return items


async def add_to_cart(
    supabase_client: Client,
    user_id: str,
    part_id: str,
    quantity: int = 1
) -> Dict[str, Any]:
    """
    Add a part to the user's cart.

    If the part is already in the cart, its quantity is incremented by
    `quantity`; otherwise a new row is inserted.

    Args:
        supabase_client: Supabase client
        user_id: Owner of the cart
        part_id: Part to add
        quantity: Number of units to add (must be > 0)

    Returns:
        The inserted or updated cart row

    Raises:
        ValueError: If quantity is not positive
        postgrest.exceptions.APIError: On foreign key or constraint violations
    """
    _require_positive_quantity(quantity)

    existing = (
        supabase_client.table(CART_TABLE)
        .select("id, quantity")
        .eq("user_id", user_id)
        .eq("part_id", part_id)
        .execute()
    )

    if existing.data:
        row = cast(Dict[str, Any], existing.data[0])
        new_quantity = int(row["quantity"]) + quantity

        logger.info(
            f"Part {part_id} already in cart for user {user_id}, "
            f"quantity {row['quantity']} -> {new_quantity}"
        )

        result = (
            supabase_client.table(CART_TABLE)
            .update({"quantity": new_quantity})
            .eq("id", row["id"])
            .eq("user_id", user_id)
            .execute()
        )
    else:
        logger.info(f"Adding part {part_id} to cart for user {user_id} (quantity={quantity})")

        result = (
            supabase_client.table(CART_TABLE)
            .insert({"user_id": user_id, "part_id": part_id, "quantity": quantity})
            .execute()
        )

    if not result.data:
        raise Exception("Failed to add part to cart: no data returned")

    return cast(Dict[str, Any], result.data[0])


async def update_cart_item_quantity(
    supabase_client: Client,
    user_id: str,
    item_id: str,
    quantity: int
) -> Optional[Dict[str, Any]]:
    """
    Set the quantity of a cart row.

    Returns:
        The updated row, or None if the row does not exist in this user's cart

    Raises:
        ValueError: If quantity is not positive (use remove_cart_item instead)
    """
    _require_positive_quantity(quantity)

    logger.info(f"Setting cart item {item_id} quantity to {quantity} for user {user_id}")

    result = (
        supabase_client.table(CART_TABLE)
        .update({"quantity": quantity})
        .eq("id", item_id)
        .eq("user_id", user_id)
        .execute()
    )

    if not result.data:
        logger.warning(f"Cart item {item_id} not found for user {user_id}")
        return None

    return cast(Dict[str, Any], result.data[0])


async def remove_cart_item(
    supabase_client: Client,
    user_id: str,
    item_id: str
) -> bool:
    """Remove a single row from the user's cart. Returns False if it was not there."""
    logger.info(f"Removing cart item {item_id} for user {user_id}")

    result = (
        supabase_client.table(CART_TABLE)
        .delete()
        .eq("id", item_id)
        .eq("user_id", user_id)
        .execute()
    )

    return bool(result.data)


async def clear_cart(
    supabase_client: Client,
    user_id: str
) -> int:
    """Remove every row from the user's cart and return how many were removed."""
    logger.info(f"Clearing cart for user {user_id}")

    result = (
        supabase_client.table(CART_TABLE)
        .delete()
        .eq("user_id", user_id)
        .execute()
    )

    removed = len(result.data or [])
    logger.info(f"Removed {removed} cart items for user {user_id}")

    return removed
