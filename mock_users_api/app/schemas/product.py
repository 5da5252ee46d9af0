"""
Pydantic model for the static product listing.
"""

from pydantic import BaseModel, Field


class Product(BaseModel):
    id: int = Field(..., example=123)
    name: str = Field(..., example="Chicken Breast")
    price: float = Field(..., example=12.99)
