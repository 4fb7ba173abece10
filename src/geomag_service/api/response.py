"""
Wave server response handling.

Aligns the trace segments returned for one channel onto a request time axis.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core import time_axis
from ..models import ChannelAddress

# Seconds a sample timestamp may be off and still match an axis instant
ALIGNMENT_TOLERANCE = 1e-3
# Relative error allowed when snapping a rounded rate to a whole second period
PERIOD_SNAP_TOLERANCE = 1e-3


@dataclass
class Trace:
    """Contiguous run of samples from the wave server."""

    starttime: float  # Epoch seconds of first sample
    sampling_rate: float  # Hz
    samples: List[Optional[float]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Trace":
        return cls(
            starttime=float(data["starttime"]),
            sampling_rate=float(data["sampling_rate"]),
            samples=list(data.get("samples") or []),
        )

    @property
    def period(self) -> float:
        """
        Seconds between samples.

        Rates like 0.0166667 Hz are rounded on the wire; their period is
        snapped to the whole second so alignment does not drift along the trace.
        """
        period = 1.0 / self.sampling_rate
        whole = round(period)
        if whole >= 1 and abs(period - whole) <= PERIOD_SNAP_TOLERANCE * period:
            return float(whole)
        return period

    def value_at(self, time: float) -> Optional[float]:
        """Get the sample recorded at exactly ``time``, or None."""
        if self.sampling_rate <= 0 or not self.samples:
            return None

        period = self.period
        offset = time - self.starttime
        index = int(round(offset / period))
        if abs(offset - index * period) > ALIGNMENT_TOLERANCE:
            return None
        if 0 <= index < len(self.samples):
            return self.samples[index]
        return None


class WaveServerResponse:
    """Traces returned for one channel address."""

    def __init__(self, address: ChannelAddress, traces: Optional[List[Trace]] = None):
        """
        Initialize response.

        Args:
            address: Channel the traces belong to
            traces: Trace segments, empty when the channel has no data
        """
        self.address = address
        self.traces = traces or []

    @classmethod
    def from_json(cls, address: ChannelAddress, data: Dict[str, Any]) -> "WaveServerResponse":
        """
        Build a response from the wave server JSON body.

        Expected format:
        {
            "traces": [
                {"starttime": 1704067200.0, "sampling_rate": 0.0166667, "samples": [...]}
            ]
        }
        """
        traces = [Trace.from_dict(trace) for trace in data.get("traces") or []]
        return cls(address, traces)

    @property
    def is_empty(self) -> bool:
        return not any(trace.samples for trace in self.traces)

    def get_values(self, starttime: int, endtime: int, step: int) -> Optional[List[Optional[float]]]:
        """
        Get samples aligned to a request time axis.

        Args:
            starttime: First axis instant (epoch seconds)
            endtime: Last instant allowed on the axis (epoch seconds)
            step: Axis step in seconds

        Returns:
            One entry per point of ``time_axis(starttime, endtime, step)``,
            None where no trace has a sample; None instead of a list when
            the channel returned no data at all
        """
        if self.is_empty:
            return None

        values = []
        for time in time_axis(starttime, endtime, step):
            value = None
            for trace in self.traces:
                value = trace.value_at(time)
                if value is not None:
                    break
            values.append(value)
        return values

    def __repr__(self) -> str:
        return f"WaveServerResponse({self.address}, traces={len(self.traces)})"
