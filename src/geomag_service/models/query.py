"""
Query data model.

Contains the fully-resolved, immutable web service query.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core import constants


@dataclass(frozen=True)
class GeomagQuery:
    """Validated web service query."""

    id: str  # Upper case observatory id
    starttime: int  # Epoch seconds
    endtime: int  # Epoch seconds
    elements: Tuple[str, ...]  # Request order, duplicates kept
    sampling_period: Optional[int] = None  # 1, 60 or 3600 seconds
    type: Optional[str] = None  # Data type name or 2-character location code
    format: Optional[str] = None  # 'iaga2002' or 'json'

    @property
    def resolved_sampling_period(self) -> int:
        """Sampling period used for fetching when none was requested."""
        if self.sampling_period is None:
            return constants.DEFAULT_SAMPLING_PERIOD
        return self.sampling_period

    @property
    def resolved_type(self) -> str:
        """Data type used for fetching when none was requested."""
        if self.type is None:
            return constants.DEFAULT_DATA_TYPE
        return self.type
