"""
Unit conversion module.

Converts wave server samples into the units reported to clients.
"""

import logging
from typing import List, Optional, Sequence

from ..core import constants


class UnitConverter:
    """Convert sample values between units."""

    def __init__(
        self,
        factor: float = constants.MILLI_UNIT_FACTOR,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unit converter.

        Args:
            factor: Raw values are divided by this factor
            logger: Logger instance
        """
        self.factor = factor
        self.logger = logger or logging.getLogger(__name__)

    def convert_values(self, values: Sequence[Optional[float]]) -> List[Optional[float]]:
        """
        Convert raw values, leaving missing samples as None.

        Args:
            values: Raw values in milli-units

        Returns:
            Values in full units

        Example:
            convert_values([5000, None]) -> [5.0, None]
        """
        return [None if value is None else value / self.factor for value in values]
