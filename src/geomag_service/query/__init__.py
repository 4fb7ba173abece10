"""
Query parsing for the geomag web service.

Provides parameter validation, query building and element to channel mapping.
"""

from .validators import (
    Validation,
    validate_enumerated,
    validate_pattern,
    validate_time,
    is_edge_channel,
    is_location_code,
)
from .channels import map_element_to_channel, location_for_type
from .builder import QueryBuilder, parse_query

__all__ = [
    "Validation",
    "validate_enumerated",
    "validate_pattern",
    "validate_time",
    "is_edge_channel",
    "is_location_code",
    "map_element_to_channel",
    "location_for_type",
    "QueryBuilder",
    "parse_query",
]
