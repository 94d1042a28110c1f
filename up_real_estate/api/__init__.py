"""
API routes for the investment calculator.
"""

from fastapi import APIRouter

from up_real_estate.api import calculations, properties

router = APIRouter()

# Include sub-routers
router.include_router(properties.router, prefix="/properties", tags=["properties"])
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
