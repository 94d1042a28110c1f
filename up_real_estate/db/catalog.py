"""
In-memory property catalog.

Stands in for a real data store: a list of Property records with
predicate-based filtering. The catalog is built explicitly and handed to
request handlers through the get_catalog dependency, so tests can swap it.
"""

from functools import lru_cache
from typing import Iterable, List

from up_real_estate.db.models import Property, PropertyFilters
from up_real_estate.exceptions import PropertyNotFoundError


class PropertyCatalog:
    """Read-only collection of listings keyed by string id."""

    def __init__(self, properties: Iterable[Property] = ()):
        self._properties: List[Property] = list(properties)

    def __len__(self) -> int:
        return len(self._properties)

    @property
    def ids(self) -> List[str]:
        return [p.id for p in self._properties]

    def all(self) -> List[Property]:
        """Return every listing (a new list each call)."""
        return list(self._properties)

    def get(self, property_id) -> Property:
        """
        Look up a listing by id.

        Ids are compared as strings, so 1 and "1" find the same record.

        Raises:
            PropertyNotFoundError: If no listing has this id
        """
        wanted = str(property_id)
        for prop in self._properties:
            if str(prop.id) == wanted:
                return prop
        raise PropertyNotFoundError(property_id)

    def search_by_city(self, city: str) -> List[Property]:
        """Listings whose city contains ``city`` (case-insensitive)."""
        needle = city.lower()
        return [p for p in self._properties if needle in p.city.lower()]

    def filter(self, filters: PropertyFilters) -> List[Property]:
        """
        Apply every set criterion in ``filters``.

        Empty or zero criteria are ignored. Bedrooms and bathrooms are
        minimums; prices are an inclusive range.
        """
        properties = list(self._properties)

        if filters.city:
            city = filters.city.lower()
            properties = [p for p in properties if city in p.city.lower()]

        if filters.state:
            state = filters.state.lower()
            properties = [p for p in properties if p.state.lower() == state]

        if filters.min_price:
            properties = [p for p in properties if p.price >= filters.min_price]

        if filters.max_price:
            properties = [p for p in properties if p.price <= filters.max_price]

        if filters.bedrooms:
            properties = [p for p in properties if p.bedrooms >= filters.bedrooms]

        if filters.bathrooms:
            properties = [p for p in properties if p.bathrooms >= filters.bathrooms]

        return properties


DEMO_PROPERTIES = (
    {
        "id": "1",
        "address": "123 Main St, Austin, TX 78701",
        "city": "Austin",
        "state": "TX",
        "price": 450000,
        "bedrooms": 3,
        "bathrooms": 2,
        "sqft": 1800,
        "image_url": "https://images.unsplash.com/photo-1568605114967-8130f3a36994?w=800",
        "latitude": 30.2672,
        "longitude": -97.7431,
    },
    {
        "id": "2",
        "address": "456 Oak Ave, Denver, CO 80202",
        "city": "Denver",
        "state": "CO",
        "price": 380000,
        "bedrooms": 2,
        "bathrooms": 2,
        "sqft": 1400,
        "image_url": "https://images.unsplash.com/photo-1570129477492-45c003edd2be?w=800",
        "latitude": 39.7392,
        "longitude": -104.9903,
    },
    {
        "id": "3",
        "address": "789 Sunset Blvd, Miami, FL 33139",
        "city": "Miami",
        "state": "FL",
        "price": 520000,
        "bedrooms": 4,
        "bathrooms": 3,
        "sqft": 2200,
        "image_url": "https://images.unsplash.com/photo-1600596542815-ffad4c1539a9?w=800",
        "latitude": 25.7907,
        "longitude": -80.1300,
    },
    {
        "id": "4",
        "address": "321 Desert Rd, Phoenix, AZ 85001",
        "city": "Phoenix",
        "state": "AZ",
        "price": 310000,
        "bedrooms": 3,
        "bathrooms": 2,
        "sqft": 1600,
        "image_url": "https://images.unsplash.com/photo-1600585154340-be6161a56a0c?w=800",
        "latitude": 33.4484,
        "longitude": -112.0740,
    },
    {
        "id": "5",
        "address": "555 Music Row, Nashville, TN 37203",
        "city": "Nashville",
        "state": "TN",
        "price": 425000,
        "bedrooms": 3,
        "bathrooms": 2.5,
        "sqft": 1900,
        "image_url": "https://images.unsplash.com/photo-1600607687939-ce8a6c25118c?w=800",
        "latitude": 36.1627,
        "longitude": -86.7816,
    },
    {
        "id": "6",
        "address": "888 Mountain View Dr, Denver, CO 80203",
        "city": "Denver",
        "state": "CO",
        "price": 550000,
        "bedrooms": 4,
        "bathrooms": 3,
        "sqft": 2400,
        "image_url": "https://images.unsplash.com/photo-1600607687644-c7171b42498b?w=800",
        "latitude": 39.7500,
        "longitude": -104.9900,
    },
)


def build_demo_catalog() -> PropertyCatalog:
    """Create a fresh catalog holding the six demo listings."""
    return PropertyCatalog(Property(**data) for data in DEMO_PROPERTIES)


@lru_cache()
def get_catalog() -> PropertyCatalog:
    """Dependency for getting the application's catalog."""
    return build_demo_catalog()
