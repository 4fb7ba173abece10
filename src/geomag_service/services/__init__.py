"""
Business logic services for the geomag web service.

Services assemble channel data and provide observatory metadata.
"""

from .assembler import DataAssembler, ChannelPlan
from .metadata import load_observatories

__all__ = [
    "DataAssembler",
    "ChannelPlan",
    "load_observatories",
]
