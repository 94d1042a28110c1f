"""
Investment Calculation Engine

Closed-form return projections for the three supported investment
strategies: short-term rental (airbnb), long-term lease, and fix-and-flip.
"""

from up_real_estate.calculations import amortization, assumptions, strategies

__all__ = ["amortization", "assumptions", "strategies"]
