"""
Property listing API endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from up_real_estate.api.responses import ErrorResponse
from up_real_estate.db.catalog import PropertyCatalog, get_catalog
from up_real_estate.db.models import CamelModel, Property, PropertyFilters
from up_real_estate.services import properties as property_service

router = APIRouter()


class PropertyListResponse(CamelModel):
    """Response for listing properties."""

    success: bool = True
    data: List[Property]
    total: int


class PropertyResponse(CamelModel):
    """Response for a single property."""

    success: bool = True
    data: Property


@router.get("/", response_model=PropertyListResponse, response_model_exclude_none=True)
async def list_properties(
    city: Optional[str] = None,
    state: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    bedrooms: Optional[int] = Query(None, ge=0),
    bathrooms: Optional[int] = Query(None, ge=0),
    catalog: PropertyCatalog = Depends(get_catalog),
):
    """List properties, optionally filtered by location, price and size."""
    filters = PropertyFilters(
        city=city,
        state=state,
        min_price=min_price,
        max_price=max_price,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
    )
    properties = property_service.search_properties(catalog, filters)

    return PropertyListResponse(data=properties, total=len(properties))


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
async def get_property(
    property_id: str,
    catalog: PropertyCatalog = Depends(get_catalog),
):
    """Get a property by ID."""
    prop = property_service.get_property(catalog, property_id)
    return PropertyResponse(data=prop)
