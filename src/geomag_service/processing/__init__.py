"""
Data processing module for the geomag web service.

Provides unit conversion of wave server samples.
"""

from .converter import UnitConverter

__all__ = [
    "UnitConverter",
]
