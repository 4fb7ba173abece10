"""
Observatory data models.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Observatory:
    """Static observatory metadata."""

    id: str
    name: str
    latitude: float
    longitude: float
    elevation: float
    agency_name: Optional[str] = None
    sensor_orientation: Optional[str] = None
    sensor_sampling_rate: Optional[float] = None  # Hz

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Observatory":
        """Build an observatory from a metadata file entry."""
        return cls(
            id=str(data["id"]).upper(),
            name=data["name"],
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            elevation=float(data["elevation"]),
            agency_name=data.get("agency_name"),
            sensor_orientation=data.get("sensor_orientation"),
            sensor_sampling_rate=data.get("sensor_sampling_rate"),
        )
