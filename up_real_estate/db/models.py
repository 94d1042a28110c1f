"""
Property listing models.

Serialized in camelCase to match the frontend's field names.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads snake_case or camelCase and writes camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Property(CamelModel):
    """A single real-estate listing."""

    model_config = ConfigDict(frozen=True)

    id: str
    address: str
    city: str
    state: str
    price: int = Field(gt=0)
    bedrooms: int
    bathrooms: float
    sqft: int
    image_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    estimated_rent: Optional[float] = Field(default=None, gt=0)


class PropertyFilters(CamelModel):
    """Search criteria; unset fields do not filter."""

    city: Optional[str] = None
    state: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    bedrooms: Optional[float] = None
    bathrooms: Optional[float] = None
