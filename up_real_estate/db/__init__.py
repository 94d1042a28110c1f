"""
Property catalog and models.
"""

from up_real_estate.db.catalog import PropertyCatalog, build_demo_catalog, get_catalog
from up_real_estate.db.models import Property, PropertyFilters

__all__ = [
    "PropertyCatalog",
    "build_demo_catalog",
    "get_catalog",
    "Property",
    "PropertyFilters",
]
