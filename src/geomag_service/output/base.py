"""
Output renderer base class.
"""

import logging
from datetime import datetime
from typing import Callable, Mapping, Optional

import pytz

from ..models import AssembledData, GeomagQuery, Observatory

INTERVAL_NAMES = {
    1: "1-second",
    60: "1-minute",
    3600: "1-hour",
}


class Renderer:
    """Render assembled data for one output format."""

    content_type = "text/plain"

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize renderer.

        Args:
            logger: Logger instance
            clock: Callable returning the current time, for "generated" stamps
        """
        self.logger = logger or logging.getLogger(__name__)
        self.clock = clock or (lambda: datetime.now(pytz.UTC))

    def render(
        self,
        data: AssembledData,
        query: GeomagQuery,
        observatories: Mapping[str, Observatory]
    ) -> str:
        """
        Render data as text.

        Args:
            data: Assembled time axis and series
            query: Query the data was assembled for
            observatories: Observatory metadata keyed by id

        Returns:
            Rendered document
        """
        raise NotImplementedError

    @staticmethod
    def interval_name(sampling_period: int) -> str:
        return INTERVAL_NAMES.get(sampling_period, f"{sampling_period}-second")
