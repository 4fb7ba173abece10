"""
Assembled series data models.

Contains the per-element results and the shared time axis handed to renderers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .channel import ChannelAddress


@dataclass
class SeriesResult:
    """Converted values for one requested element."""

    channel_address: ChannelAddress
    element: str
    response: Any  # Raw wave server response
    values: List[Optional[float]]  # Aligned with AssembledData.times, None = missing


@dataclass
class AssembledData:
    """Time axis plus one series per requested element."""

    times: List[int]  # Epoch seconds
    results: Dict[str, SeriesResult] = field(default_factory=dict)

    def values_for(self, element: str) -> List[Optional[float]]:
        """
        Get the values for an element.

        Elements without a result yield all-missing values so renderers can
        always emit a full column.
        """
        result = self.results.get(element)
        if result is None:
            return [None] * len(self.times)
        return result.values
