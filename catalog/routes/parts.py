"""
Catalog part API endpoints.

Read-only access to catalog_parts: listing with category/search filters,
the category list, and single-part lookup.
"""

import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, HTTPException, Query, status
from postgrest.exceptions import APIError

from catalog.db.client import get_supabase_client
from catalog.services import get_part_by_id, get_part_categories, get_parts
from catalog.schemas.parts import PartCategoriesResponse, PartListResponse, PartResponse
from catalog.utils.errors import http_error_from_api_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parts", tags=["parts"])


def part_to_response(part: Dict[str, Any]) -> PartResponse:
    return PartResponse(
        id=str(part["id"]),
        part_number=part["part_number"],
        name_en=part["name_en"],
        name_ru=part["name_ru"],
        category=part["category"],
        price=part["price"],
        qty=part.get("qty") or 0,
        image_url=part.get("image_url"),
        created_at=part.get("created_at"),
        updated_at=part.get("updated_at"),
    )


@router.get(
    "",
    response_model=PartListResponse,
    status_code=status.HTTP_200_OK,
    summary="List catalog parts",
    description="""
    List catalog parts ordered by part number.

    Filters:
    - category: exact category match
    - search: case-insensitive match on part number, English or Russian name
    """
)
async def list_parts(
    category: Optional[str] = Query(None, description="Filter by category"),
    search: Optional[str] = Query(None, min_length=1, max_length=100, description="Search text"),
    limit: int = Query(50, ge=1, le=200, description="Page size"),
    offset: int = Query(0, ge=0, description="Number of parts to skip")
) -> PartListResponse:
    """List parts with optional filtering."""
    supabase_client = get_supabase_client()

    try:
        parts = await get_parts(
            supabase_client=supabase_client,
            category=category,
            search=search,
            limit=limit,
            offset=offset,
        )
    except APIError as e:
        raise http_error_from_api_error(e, "fetch_error", "Failed to retrieve parts")

    return PartListResponse(
        parts=[part_to_response(part) for part in parts],
        count=len(parts),
        limit=limit,
        offset=offset,
    )


@router.get(
    "/categories",
    response_model=PartCategoriesResponse,
    status_code=status.HTTP_200_OK,
    summary="List part categories"
)
async def list_part_categories() -> PartCategoriesResponse:
    supabase_client = get_supabase_client()

    try:
        categories = await get_part_categories(supabase_client)
    except APIError as e:
        raise http_error_from_api_error(e, "fetch_error", "Failed to retrieve categories")

    return PartCategoriesResponse(categories=categories)


@router.get(
    "/{part_id}",
    response_model=PartResponse,
    status_code=status.HTTP_200_OK,
    summary="Get a catalog part"
)
async def get_part(part_id: str) -> PartResponse:
    """Get a single part, 404 if it does not exist."""
    supabase_client = get_supabase_client()

    try:
        part = await get_part_by_id(supabase_client, part_id)
    except APIError as e:
        raise http_error_from_api_error(e, "fetch_error", "Failed to retrieve part")

    if not part:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": f"Part {part_id} not found"}
        )

    return part_to_response(part)
