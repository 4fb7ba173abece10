"""
Data models for the geomag web service.

Contains DTOs for queries, channel addresses, assembled series and observatories.
"""

from .query import GeomagQuery
from .channel import ChannelAddress
from .series import SeriesResult, AssembledData
from .observatory import Observatory

__all__ = [
    "GeomagQuery",
    "ChannelAddress",
    "SeriesResult",
    "AssembledData",
    "Observatory",
]
