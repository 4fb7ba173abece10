"""
IAGA-2002 output format.

Fixed width text: a 70 column header block followed by one row per time.
"""

from typing import List, Mapping, Optional

from .base import Renderer
from ..core import DateUtils, constants
from ..models import AssembledData, GeomagQuery, Observatory

LINE_WIDTH = 70
# Width of one data column, matching the " %9.2f" value format
COLUMN_WIDTH = 10
DEFAULT_SOURCE = "United States Geological Survey (USGS)"


class Iaga2002Renderer(Renderer):
    """Render data in IAGA-2002 format."""

    content_type = "text/plain"

    def render(
        self,
        data: AssembledData,
        query: GeomagQuery,
        observatories: Mapping[str, Observatory]
    ) -> str:
        observatory = observatories.get(query.id)
        lines = self._format_headers(query, observatory)
        lines.append(self._format_channels(query))
        lines.extend(self._format_rows(data, query))
        self.logger.debug(f"Rendered {len(data.times)} IAGA-2002 rows")
        return "\n".join(lines) + "\n"

    def _format_headers(
        self,
        query: GeomagQuery,
        observatory: Optional[Observatory]
    ) -> List[str]:
        headers = [
            ("Format", "IAGA-2002"),
            ("Source of Data", (observatory and observatory.agency_name) or DEFAULT_SOURCE),
            ("Station Name", observatory.name if observatory else ""),
            ("IAGA CODE", query.id),
            ("Geodetic Latitude", f"{observatory.latitude:.3f}" if observatory else ""),
            ("Geodetic Longitude", f"{observatory.longitude:.3f}" if observatory else ""),
            ("Elevation", f"{observatory.elevation:g}" if observatory else ""),
            ("Reported", "".join(query.elements)),
            ("Sensor Orientation", (observatory and observatory.sensor_orientation) or ""),
            ("Digital Sampling", self._digital_sampling(observatory)),
            ("Data Interval Type", self.interval_name(query.resolved_sampling_period)),
            ("Data Type", query.resolved_type),
        ]
        return [self._format_header(name, value) for name, value in headers]

    @staticmethod
    def _format_header(name: str, value: str) -> str:
        line = " " + name.ljust(23) + str(value)
        return line[:LINE_WIDTH - 1].ljust(LINE_WIDTH - 1) + "|"

    @staticmethod
    def _digital_sampling(observatory: Optional[Observatory]) -> str:
        if not observatory or not observatory.sensor_sampling_rate:
            return ""
        return f"{1.0 / observatory.sensor_sampling_rate:g} second"

    @staticmethod
    def _format_channels(query: GeomagQuery) -> str:
        line = "DATE       TIME         DOY"
        for element in query.elements:
            code = query.id + element
            # long codes give up leading space, then get cut, to keep columns aligned
            leading = max(1, min(5, COLUMN_WIDTH - len(code)))
            line += (" " * leading + code)[:COLUMN_WIDTH].ljust(COLUMN_WIDTH)
        return line.ljust(LINE_WIDTH - 1) + "|"

    @staticmethod
    def _format_rows(data: AssembledData, query: GeomagQuery) -> List[str]:
        columns = [data.values_for(element) for element in query.elements]
        rows = []
        for i, time in enumerate(data.times):
            dt = DateUtils.from_epoch(time)
            row = dt.strftime("%Y-%m-%d %H:%M:%S") + f".{dt.microsecond // 1000:03d}"
            row += f" {dt.timetuple().tm_yday:03d}   "
            for column in columns:
                value = column[i]
                if value is None:
                    value = constants.IAGA2002_MISSING_VALUE
                row += f" {value:9.2f}"
            rows.append(row)
        return rows
