"""
Service layer for the parts catalog backend.

Thin data-access functions over the Supabase client. Services:
- Build queries against catalog_users, catalog_parts, cart and verification_codes
- Validate inputs the database would otherwise reject with a less useful error
- Let postgrest APIError propagate unchanged; routes decide the HTTP status

Services act as the glue between routes (HTTP layer) and the database.
"""

from .cart_service import (
    add_to_cart,
    clear_cart,
    get_cart_items,
    remove_cart_item,
    update_cart_item_quantity,
)
from .part_service import (
    create_part,
    delete_part,
    get_part_by_id,
    get_part_categories,
    get_parts,
    update_part,
)
from .user_service import (
    authenticate_user,
    get_user_by_email,
    get_user_by_id,
    list_users,
    public_user,
    register_user,
    update_user_status,
)
from .verification_service import create_verification_code, verify_code

__all__ = [
    "get_cart_items",
    "add_to_cart",
    "update_cart_item_quantity",
    "remove_cart_item",
    "clear_cart",
    "get_parts",
    "get_part_by_id",
    "get_part_categories",
    "create_part",
    "update_part",
    "delete_part",
    "register_user",
    "get_user_by_id",
    "get_user_by_email",
    "authenticate_user",
    "update_user_status",
    "list_users",
    "public_user",
    "create_verification_code",
    "verify_code",
]
