"""
Element to wave server channel mapping.

Translates user-facing element codes into SNCL addresses.
"""

from typing import Optional

from .validators import Validation, is_edge_channel
from ..core import constants
from ..models import ChannelAddress


def _channel_for_element(prefix: str, element: str) -> Optional[str]:
    """Get the channel code for a known element, or None when unknown."""
    if element in ("D", "E", "H", "X", "Y", "Z"):
        return prefix + "V" + element
    if element in ("F", "G"):
        return prefix + "S" + element
    if element in ("SQ", "SV"):
        return prefix + element
    if element == "DIST":
        return prefix + "DT"
    if element == "DST":
        return prefix + "GD"
    return None


def location_for_type(data_type: str) -> str:
    """
    Get the location code for a data type.

    Known data types map to their processing level code; anything else is
    taken as a location code already.
    """
    return constants.DATA_TYPE_LOCATIONS.get(data_type, data_type)


def map_element_to_channel(
    station: str,
    element: str,
    sampling_period: int,
    data_type: str
) -> Validation:
    """
    Translate a requested element into a wave server address.

    Args:
        station: Observatory id
        element: Requested element, e.g. 'H', 'F', 'DIST' or a raw channel 'MVH'
        sampling_period: Seconds per sample (1 or 60)
        data_type: 'variation', 'adjusted', 'quasi-definitive', 'definitive'
                   or a 2-character location code

    Returns:
        Validation holding a ChannelAddress, or the reason the element
        cannot be mapped

    Example:
        map_element_to_channel('BOU', 'H', 60, 'variation').value
        -> ChannelAddress(station='BOU', channel='MVH', location='R0', network='NT')
    """
    element = element.upper()

    prefix = constants.CHANNEL_PREFIXES.get(sampling_period)
    channel = _channel_for_element(prefix or "", element)

    if channel is None:
        if not is_edge_channel(element):
            return Validation.failure(f'Unknown element "{element}"')
        # seems like an edge channel code
        channel = element
    elif prefix is None:
        return Validation.failure(
            f'Bad sampling_period value "{sampling_period}". '
            "Not supported by the wave server"
        )

    return Validation.success(ChannelAddress(
        station=station,
        network=constants.NETWORK,
        channel=channel,
        location=location_for_type(data_type),
    ))
