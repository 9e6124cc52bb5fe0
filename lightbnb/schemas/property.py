"""
Pydantic schemas for property listings and property search.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from decimal import Decimal


class PropertyBase(BaseModel):
    """Base property schema with common fields."""

    owner_id: int = Field(..., gt=0, description="ID of the owning user")
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = Field(None, max_length=255)
    cover_photo_url: Optional[str] = Field(None, max_length=255)

    cost_per_night: int = Field(
        ...,
        ge=0,
        description="Nightly cost in cents",
        examples=[93061]
    )

    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    country: str = Field(..., min_length=1, max_length=255)
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    province: str = Field(..., min_length=1, max_length=255)
    post_code: str = Field(..., min_length=1, max_length=255)


class PropertyCreate(PropertyBase):
    """Schema for creating a property; the id comes from the database."""

    active: bool = True


class PropertyRead(PropertyBase):
    """Property as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    active: bool


class PropertyWithRating(PropertyRead):
    """Property search row augmented with the average review rating."""

    average_rating: Optional[float] = Field(
        None,
        description="Average of all review ratings for the property"
    )


class PropertySearchFilters(BaseModel):
    """
    Optional search criteria for property listings.

    Prices are in major currency units (dollars) and are converted to
    cents when the query is built. Values arrive as strings from query
    strings, so numeric fields accept them and coerce.
    """

    city: Optional[str] = Field(None, description="Substring of the city name, case-sensitive")
    user_id: Optional[int] = Field(None, description="Only properties owned by this user")
    minimum_price_per_night: Optional[Decimal] = Field(None, ge=0)
    maximum_price_per_night: Optional[Decimal] = Field(None, ge=0)
    minimum_rating: Optional[Decimal] = Field(None, ge=0, le=5)

    @field_validator(
        "city",
        "user_id",
        "minimum_price_per_night",
        "maximum_price_per_night",
        "minimum_rating",
        mode="before",
    )
    @classmethod
    def empty_string_as_none(cls, v):
        """Treat blank form fields as absent."""
        if isinstance(v, str) and v == "":
            return None
        return v
