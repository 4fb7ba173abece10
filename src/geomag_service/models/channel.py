"""
Channel address data model.
"""

from dataclasses import dataclass, asdict
from typing import Dict

from ..core import constants


@dataclass(frozen=True)
class ChannelAddress:
    """Wave server SNCL (station, network, channel, location) address."""

    station: str
    channel: str
    location: str
    network: str = constants.NETWORK

    def as_dict(self) -> Dict[str, str]:
        """Return the address as a plain dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.station}.{self.network}.{self.channel}.{self.location}"
