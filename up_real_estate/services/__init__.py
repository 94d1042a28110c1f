"""
Application services module.
"""

from up_real_estate.services.properties import (
    get_property,
    list_all_properties,
    search_properties,
)

__all__ = ["get_property", "list_all_properties", "search_properties"]
