"""
Property lookup service.

Thin layer over the catalog that logs lookups and failures before
handing errors back to the caller.
"""

import logging
from typing import List, Optional

from up_real_estate.db.catalog import PropertyCatalog
from up_real_estate.db.models import Property, PropertyFilters
from up_real_estate.exceptions import PropertyNotFoundError

logger = logging.getLogger(__name__)


def search_properties(
    catalog: PropertyCatalog, filters: Optional[PropertyFilters] = None
) -> List[Property]:
    """Return listings matching ``filters`` (all listings when None)."""
    filters = filters or PropertyFilters()
    properties = catalog.filter(filters)
    logger.debug(
        f"Property search {filters.model_dump(exclude_none=True)} "
        f"matched {len(properties)} of {len(catalog)}"
    )
    return properties


def get_property(catalog: PropertyCatalog, property_id) -> Property:
    """
    Fetch a single listing.

    Raises:
        PropertyNotFoundError: If the id is unknown
    """
    try:
        return catalog.get(property_id)
    except PropertyNotFoundError:
        logger.warning(
            f"Property not found for ID: {property_id} "
            f"(available IDs: {', '.join(catalog.ids)})"
        )
        raise


def list_all_properties(catalog: PropertyCatalog) -> List[Property]:
    """Return every listing in the catalog."""
    return catalog.all()
