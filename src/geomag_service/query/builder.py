"""
Web service query builder.

Turns raw request parameters into a validated, immutable GeomagQuery.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .validators import (
    Validation,
    is_location_code,
    validate_enumerated,
    validate_time,
)
from ..core import ClientError, DateUtils, constants
from ..models import GeomagQuery

ParamValue = Union[str, Sequence[str]]


class QueryBuilder:
    """
    Build a GeomagQuery from raw request parameters.

    Unknown parameter names are rejected first; the remaining parameters
    are processed in the order given and the first invalid one stops the
    build. Empty values are treated as missing. Defaults are
    filled only after every explicit value has been applied, since the
    default end time depends on the final start time.
    """

    def __init__(
        self,
        observatories: Mapping[str, Any],
        logger: Optional[logging.Logger] = None,
        reference_time: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize query builder.

        Args:
            observatories: Metadata keyed by upper case observatory id
            logger: Logger instance
            reference_time: Callable returning "now", used for default times
        """
        self.observatories = observatories
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = DateUtils(self.logger)
        self.reference_time = reference_time

        self._parsers: Dict[str, Callable[[str, Any], Validation]] = {
            "id": self._parse_id,
            "starttime": self._parse_time,
            "endtime": self._parse_time,
            "elements": self._parse_elements,
            "sampling_period": self._parse_sampling_period,
            "type": self._parse_type,
            "format": self._parse_format,
        }

    def build(self, params: Mapping[str, ParamValue]) -> Validation:
        """
        Build a query.

        Args:
            params: Raw request parameters

        Returns:
            Validation holding the GeomagQuery, or the first error found
        """
        fields: Dict[str, Any] = {}

        # treat empty values as missing parameters
        present = [
            (name, value) for name, value in params.items()
            if not self._is_empty(value)
        ]

        # unknown names are reported whatever the other values hold
        for name, _ in present:
            if name not in self._parsers:
                return Validation.failure(f'Unknown parameter "{name}"')

        for name, value in present:
            parser = self._parsers[name]

            if name != "elements":
                single = self._single_value(name, value)
                if not single.ok:
                    return single
                value = single.value
                if self._is_empty(value):
                    continue

            result = parser(name, value)
            if not result.ok:
                self.logger.debug(f"Rejected parameter {name}: {result.error}")
                return result
            fields[name] = result.value

        if "id" not in fields:
            return Validation.failure('"id" is a required parameter')

        # set defaults
        if "starttime" not in fields:
            now = self.reference_time() if self.reference_time else None
            fields["starttime"] = self.date_utils.start_of_utc_day(now)
        if "endtime" not in fields:
            fields["endtime"] = fields["starttime"] + constants.DEFAULT_WINDOW_SECONDS
        if "elements" not in fields:
            fields["elements"] = constants.DEFAULT_ELEMENTS

        query = GeomagQuery(**fields)
        self.logger.debug(f"Built query: {query}")
        return Validation.success(query)

    @staticmethod
    def _is_empty(value: ParamValue) -> bool:
        if isinstance(value, (list, tuple)):
            return len(value) == 0
        return value is None or value == ""

    @staticmethod
    def _single_value(name: str, value: ParamValue) -> Validation:
        """Unwrap a one-item list; scalar parameters take one value only."""
        if not isinstance(value, (list, tuple)):
            return Validation.success(value)
        if len(value) == 1:
            return Validation.success(value[0])
        return Validation.failure(f'Parameter "{name}" accepts a single value')

    def _parse_id(self, name: str, value: str) -> Validation:
        return validate_enumerated(name, value.upper(), self.observatories.keys())

    def _parse_time(self, name: str, value: str) -> Validation:
        return validate_time(name, value, self.date_utils)

    def _parse_elements(self, name: str, value: ParamValue) -> Validation:
        if isinstance(value, str):
            value = value.split(",")
        elements: List[str] = [element.strip().upper() for element in value]
        return Validation.success(tuple(elements))

    def _parse_sampling_period(self, name: str, value: Any) -> Validation:
        try:
            period = int(value)
        except (TypeError, ValueError):
            return validate_enumerated(name, value, constants.SAMPLING_PERIODS)
        if str(period) != str(value).strip():
            # reject '60.0', '060' and friends
            return validate_enumerated(name, value, constants.SAMPLING_PERIODS)
        return validate_enumerated(name, period, constants.SAMPLING_PERIODS)

    def _parse_type(self, name: str, value: str) -> Validation:
        if is_location_code(value):
            # edge location code
            return Validation.success(value)
        return validate_enumerated(name, value, constants.DATA_TYPES)

    def _parse_format(self, name: str, value: str) -> Validation:
        return validate_enumerated(name, value.lower(), constants.OUTPUT_FORMATS)


def parse_query(
    params: Mapping[str, ParamValue],
    observatories: Mapping[str, Any],
    logger: Optional[logging.Logger] = None
) -> GeomagQuery:
    """
    Build a query, raising on the first invalid parameter.

    Raises:
        ClientError: If a parameter is unknown, invalid, or id is missing
    """
    result = QueryBuilder(observatories, logger=logger).build(params)
    if not result.ok:
        raise ClientError(result.error)
    return result.value
