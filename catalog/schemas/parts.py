"""
Pydantic schemas for catalog part endpoints.

Parts are read-only over HTTP; catalog maintenance goes through the service
layer (see scripts/ and catalog.services.part_service).
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class PartResponse(BaseModel):
    """A single catalog part."""
    id: str = Field(..., description="Part UUID")
    part_number: str = Field(..., description="Manufacturer part number")
    name_en: str = Field(..., description="English name")
    name_ru: str = Field(..., description="Russian name")
    category: str = Field(..., description="Catalog category")
    price: Decimal = Field(..., description="Unit price")
    qty: int = Field(0, description="Quantity in stock")
    image_url: Optional[str] = Field(None, description="Image reference")
    created_at: Optional[str] = Field(None, description="ISO-8601 creation timestamp")
    updated_at: Optional[str] = Field(None, description="ISO-8601 timestamp of last update")


class PartListResponse(BaseModel):
    """Response for GET /parts."""
    parts: List[PartResponse] = Field(..., description="Parts on this page")
    count: int = Field(..., description="Number of parts returned")
    limit: int = Field(..., description="Page size used for the query")
    offset: int = Field(..., description="Offset used for the query")


class PartCategoriesResponse(BaseModel):
    """Response for GET /parts/categories."""
    categories: List[str] = Field(
        ...,
        description="Distinct part categories, sorted",
        examples=[["Brakes", "Engine", "Suspension"]]
    )
