"""
Parts catalog service.

Handles reading and maintaining catalog_parts rows. Parts carry bilingual
names (English/Russian), a category, a price and the quantity in stock.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union, cast

from supabase import Client

from catalog.utils.constants import PARTS_TABLE

logger = logging.getLogger(__name__)


def _ilike_pattern(term: str) -> str:
    """
    Build a quoted PostgREST ilike value matching term as a literal substring.

    LIKE wildcards typed by the user are escaped first, then the value is
    double-quoted so commas and parentheses do not break the or=(...) filter.
    """
    for char in ("\\", "%", "_"):
        term = term.replace(char, "\\" + char)
    term = term.replace("\\", "\\\\").replace('"', '\\"')
    return f'"%{term}%"'


async def get_parts(
    supabase_client: Client,
    category: Optional[str] = None,
    search: Optional[str] = None,
    limit: int = 50,
    offset: int = 0
) -> List[Dict[str, Any]]:
    """
    Fetch catalog parts with optional filtering and pagination.

    Args:
        supabase_client: Supabase client
        category: Only return parts in this category
        search: Case-insensitive match against part_number, name_en or name_ru
        limit: Maximum number of parts to return (default 50)
        offset: Number of parts to skip for pagination (default 0)

    Returns:
        List of part dicts ordered by part_number
    """
    logger.debug(
        f"Fetching parts (category={category}, search={search}, "
        f"limit={limit}, offset={offset})"
    )

    query = supabase_client.table(PARTS_TABLE).select("*")

    if category:
        query = query.eq("category", category)

    if search:
        pattern = _ilike_pattern(search.strip())
        query = query.or_(
            f"part_number.ilike.{pattern},"
            f"name_en.ilike.{pattern},"
            f"name_ru.ilike.{pattern}"
        )

    result = (
        query
        .order("part_number")
        .range(offset, offset + limit - 1)
        .execute()
    )

    parts: List[Dict[str, Any]] = cast(List[Dict[str, Any]], result.data or [])
    logger.info(f"Found {len(parts)} parts")

    return parts


async def get_part_by_id(
    supabase_client: Client,
    part_id: str
) -> Optional[Dict[str, Any]]:
    """
    Fetch a single part by ID.

    Returns:
        Part dict, or None if not found
    """
    result = (
        supabase_client.table(PARTS_TABLE)
        .select("*")
        .eq("id", part_id)
        .execute()
    )

    if not result.data:
        logger.warning(f"Part {part_id} not found")
        return None

    return cast(Dict[str, Any], result.data[0])


async def get_part_categories(supabase_client: Client) -> List[str]:
    """Return the distinct part categories, sorted alphabetically."""
    result = supabase_client.table(PARTS_TABLE).select("category").execute()

    rows = cast(List[Dict[str, Any]], result.data or [])
    categories = sorted({row["category"] for row in rows if row.get("category")})

    logger.info(f"Found {len(categories)} part categories")

    return categories


async def create_part(
    supabase_client: Client,
    part_number: str,
    name_en: str,
    name_ru: str,
    category: str,
    price: Union[Decimal, float, str],
    qty: int = 0,
    image_url: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a new catalog part.

    Args:
        supabase_client: Supabase client
        part_number: Manufacturer part number
        name_en: English display name
        name_ru: Russian display name
        category: Catalog category
        price: Unit price (sent as a string to keep NUMERIC precision)
        qty: Quantity in stock (default 0)
        image_url: Optional image reference

    Returns:
        The created part record

    Raises:
        ValueError: If qty is negative
    """
    if qty < 0:
        raise ValueError("Part quantity cannot be negative")

    part_data: Dict[str, Any] = {
        "part_number": part_number,
        "name_en": name_en,
        "name_ru": name_ru,
        "category": category,
        "price": str(price),
        "qty": qty,
    }

    if image_url:
        part_data["image_url"] = image_url

    logger.info(f"Creating part {part_number} in category {category}")

    result = supabase_client.table(PARTS_TABLE).insert(part_data).execute()

    if not result.data:
        raise Exception("Failed to create part: no data returned")

    return cast(Dict[str, Any], result.data[0])


async def update_part(
    supabase_client: Client,
    part_id: str,
    **updates: Any
) -> Optional[Dict[str, Any]]:
    """
    Update catalog part fields.

    Returns:
        The updated part record, or None if the part does not exist

    Raises:
        ValueError: If qty is set to a negative value
    """
    if "qty" in updates and updates["qty"] is not None and updates["qty"] < 0:
        raise ValueError("Part quantity cannot be negative")

    if "price" in updates and updates["price"] is not None:
        updates["price"] = str(updates["price"])

    updates["updated_at"] = datetime.now(timezone.utc).isoformat()

    logger.info(f"Updating part {part_id}: {list(updates.keys())}")

    result = (
        supabase_client.table(PARTS_TABLE)
        .update(updates)
        .eq("id", part_id)
        .execute()
    )

    if not result.data:
        logger.warning(f"Part {part_id} not found for update")
        return None

    return cast(Dict[str, Any], result.data[0])


async def delete_part(
    supabase_client: Client,
    part_id: str
) -> bool:
    """
    Delete a catalog part.

    Cart rows referencing the part are removed by the ON DELETE CASCADE
    foreign key.

    Returns:
        True if a part was deleted, False if it did not exist
    """
    logger.info(f"Deleting part {part_id}")

    result = (
        supabase_client.table(PARTS_TABLE)
        .delete()
        .eq("id", part_id)
        .execute()
    )

    deleted = bool(result.data)
    if not deleted:
        logger.warning(f"Part {part_id} not found for deletion")

    return deleted
