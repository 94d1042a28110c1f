"""
Domain exceptions.

Raised by the calculator and the property catalog, translated into
JSON error envelopes by the handlers in up_real_estate.main.
"""

from typing import Iterable


class UpRealEstateError(Exception):
    """Base exception for all application errors."""

    status_code = 500


class InvalidStrategyError(UpRealEstateError, ValueError):
    """Requested strategy is not one of the supported strategies."""

    status_code = 400

    def __init__(self, strategy: str, supported: Iterable[str] = ()):
        self.strategy = strategy
        self.supported = tuple(supported)
        msg = f"Invalid strategy: '{strategy}'"
        if self.supported:
            msg += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(msg)


class PropertyNotFoundError(UpRealEstateError, LookupError):
    """No property in the catalog has the requested id."""

    status_code = 404

    def __init__(self, property_id):
        self.property_id = str(property_id)
        super().__init__(f"Property not found: '{self.property_id}'")
