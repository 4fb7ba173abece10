"""
Data assembly service.

Fetches every requested element from the wave server and lines the converted
values up with a shared time axis.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from ..core import ClientError, ServerError, time_axis
from ..models import AssembledData, ChannelAddress, GeomagQuery, SeriesResult
from ..processing import UnitConverter
from ..query import Validation, map_element_to_channel

# fetch_series(starttime, endtime, station, network, channel, location) -> response
FetchSeries = Callable[[int, int, str, str, str, str], Any]


@dataclass(frozen=True)
class ChannelPlan:
    """Wave server address resolved for one requested element."""

    element: str
    address: ChannelAddress


class DataAssembler:
    """Assemble per-element series for a query."""

    def __init__(
        self,
        fetch_series: FetchSeries,
        converter: Optional[UnitConverter] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize data assembler.

        Args:
            fetch_series: Callable returning a response with
                          ``get_values(starttime, endtime, step)``
            converter: Unit converter for raw values
            logger: Logger instance
        """
        self.fetch_series = fetch_series
        self.logger = logger or logging.getLogger(__name__)
        self.converter = converter or UnitConverter(logger=self.logger)

    def plan(self, query: GeomagQuery) -> Validation:
        """
        Resolve the channel address of every requested element.

        Runs before any fetch so an unknown element rejects the whole
        request without touching the wave server.

        Args:
            query: Validated query

        Returns:
            Validation holding a list of ChannelPlan in request order,
            or the first mapping error
        """
        plans: List[ChannelPlan] = []
        for element in query.elements:
            result = map_element_to_channel(
                query.id,
                element,
                query.resolved_sampling_period,
                query.resolved_type
            )
            if not result.ok:
                return result
            plans.append(ChannelPlan(element=element, address=result.value))
        return Validation.success(plans)

    def assemble(
        self,
        query: GeomagQuery,
        plans: Optional[List[ChannelPlan]] = None
    ) -> AssembledData:
        """
        Fetch and convert data for every requested element.

        Args:
            query: Validated query
            plans: Channel plans from ``plan()``; resolved here when omitted

        Returns:
            AssembledData keyed by element; a repeated element keeps the
            result of its last occurrence

        Raises:
            ClientError: If plans were not given and an element cannot be mapped
            ServerError: If a response does not line up with the time axis
            Exception: Anything raised by the fetch callable, unmodified
        """
        if plans is None:
            planned = self.plan(query)
            if not planned.ok:
                raise ClientError(planned.error)
            plans = planned.value

        starttime = query.starttime
        endtime = query.endtime
        step = query.resolved_sampling_period

        data = AssembledData(times=time_axis(starttime, endtime, step))
        self.logger.debug(f"Time axis has {len(data.times)} points")

        for plan in plans:
            address = plan.address
            response = self.fetch_series(
                starttime,
                endtime,
                address.station,
                address.network,
                address.channel,
                address.location
            )

            values = response.get_values(starttime, endtime, step)
            if values is None:
                # empty channel
                self.logger.info(f"No data for {address}")
                values = [None] * len(data.times)
            else:
                values = self.converter.convert_values(values)

            if len(values) != len(data.times):
                raise ServerError(
                    f"Channel {address} returned {len(values)} values "
                    f"for {len(data.times)} times"
                )

            data.results[plan.element] = SeriesResult(
                channel_address=address,
                element=plan.element,
                response=response,
                values=values
            )

        return data
