"""
Pydantic schemas for cart endpoints.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from catalog.schemas.parts import PartResponse


class CartItemResponse(BaseModel):
    """A cart row, with the referenced part when it was embedded."""
    id: str = Field(..., description="Cart item UUID")
    user_id: str = Field(..., description="Owner UUID")
    part_id: str = Field(..., description="Part UUID")
    quantity: int = Field(..., description="Number of units", gt=0)
    created_at: Optional[str] = Field(None, description="ISO-8601 timestamp when the part was added")
    part: Optional[PartResponse] = Field(None, description="Embedded part details")


class CartResponse(BaseModel):
    """Response for GET /users/{user_id}/cart."""
    items: List[CartItemResponse] = Field(..., description="Cart rows, oldest first")
    count: int = Field(..., description="Number of distinct parts in the cart")
    total_quantity: int = Field(..., description="Sum of quantities over all rows")


class CartItemCreateRequest(BaseModel):
    """Request to add a part to the cart."""
    part_id: str = Field(..., min_length=1, description="Part UUID")
    quantity: int = Field(1, gt=0, description="Units to add (added to any existing quantity)")


class CartItemUpdateRequest(BaseModel):
    """Request to set the quantity of a cart row."""
    quantity: int = Field(..., gt=0, description="New quantity")


class CartClearResponse(BaseModel):
    """Response after clearing a cart."""
    status: str = Field("CLEARED", description="Indicates the cart was cleared")
    removed: int = Field(..., description="Number of rows removed")
