"""
Date and timezone utilities.

Centralizes all date/time operations. Times exchanged between components are
integer epoch seconds; datetimes are always UTC and timezone-aware.
"""

import logging
from datetime import datetime
from typing import List, Optional

import pytz
from dateutil import parser as date_parser


def time_axis(starttime: int, endtime: int, step: int) -> List[int]:
    """
    Build the inclusive time axis for a request window.

    The axis starts at ``starttime`` and holds every multiple of ``step``
    up to and including the last instant not after ``endtime``, so it has
    ``(endtime - starttime) // step + 1`` points. A window that ends before
    it starts yields an empty axis.

    Args:
        starttime: First instant (epoch seconds)
        endtime: Last instant allowed on the axis (epoch seconds)
        step: Seconds between points

    Returns:
        List of epoch seconds
    """
    if step <= 0:
        raise ValueError(f"Invalid time axis step: {step}")

    count = (endtime - starttime) // step + 1
    return [starttime + i * step for i in range(max(count, 0))]


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse_time(self, value: str) -> int:
        """
        Parse a textual time into epoch seconds.

        Accepts anything ``dateutil`` understands (ISO 8601, "2024-01-02",
        "Jan 2 2024 12:00", ...). Times without a zone are taken as UTC.

        Args:
            value: Time string

        Returns:
            Epoch seconds

        Raises:
            ValueError: If the value cannot be parsed
        """
        try:
            # shifting to UTC can overflow near the ends of the datetime range
            parsed = self.to_utc(date_parser.parse(value))
            seconds = self.to_epoch(parsed)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Unable to parse time '{value}': {e}")

        self.logger.debug(f"Parsed time '{value}' -> {parsed.isoformat()}")
        return seconds

    def start_of_utc_day(self, reference_time: Optional[datetime] = None) -> int:
        """
        Get the start of the UTC day containing the reference time.

        Args:
            reference_time: Reference time (defaults to now in UTC)

        Returns:
            Epoch seconds of 00:00:00 UTC that day
        """
        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)

        day = self.to_utc(reference_time).date()
        start = pytz.UTC.localize(datetime.combine(day, datetime.min.time()))
        return self.to_epoch(start)

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @staticmethod
    def to_epoch(dt: datetime) -> int:
        """Convert an aware datetime to whole epoch seconds."""
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return int(dt.timestamp() // 1)

    @staticmethod
    def from_epoch(seconds: float) -> datetime:
        """Convert epoch seconds to an aware UTC datetime."""
        return datetime.fromtimestamp(seconds, tz=pytz.UTC)

    @staticmethod
    def to_iso(seconds: float) -> str:
        """
        Format epoch seconds as ISO 8601 with millisecond precision.

        Example:
            1704067200 -> '2024-01-01T00:00:00.000Z'
        """
        dt = DateUtils.from_epoch(seconds)
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
