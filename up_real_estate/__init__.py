"""
UP Real Estate investment API.
"""

__version__ = "0.1.0"
