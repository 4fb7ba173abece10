"""
JSON output format.
"""

import json
from typing import Any, Dict, Mapping, Optional

from .base import Renderer
from ..core import DateUtils, constants
from ..models import AssembledData, GeomagQuery, Observatory


class JsonRenderer(Renderer):
    """Render data as a JSON time series document."""

    content_type = "application/json"

    def render(
        self,
        data: AssembledData,
        query: GeomagQuery,
        observatories: Mapping[str, Observatory]
    ) -> str:
        document = {
            "type": "Timeseries",
            "metadata": self._format_metadata(query, observatories.get(query.id)),
            "times": [DateUtils.to_iso(time) for time in data.times],
            "values": [],
        }

        for element in query.elements:
            result = data.results.get(element)
            series_metadata: Dict[str, Any] = {"element": element}
            if result is not None:
                series_metadata.update(result.channel_address.as_dict())
            document["values"].append({
                "id": element,
                "metadata": series_metadata,
                "values": data.values_for(element),
            })

        return json.dumps(document)

    def _format_metadata(
        self,
        query: GeomagQuery,
        observatory: Optional[Observatory]
    ) -> Dict[str, Any]:
        imo: Dict[str, Any] = {"iaga_code": query.id}
        if observatory is not None:
            imo["name"] = observatory.name
            imo["coordinates"] = [
                observatory.longitude,
                observatory.latitude,
                observatory.elevation,
            ]

        intermagnet = {
            "imo": imo,
            "reported_orientation": "".join(query.elements),
            "sensor_orientation": observatory.sensor_orientation if observatory else None,
            "data_type": query.resolved_type,
            "sampling_period": query.resolved_sampling_period,
        }
        if observatory is not None and observatory.sensor_sampling_rate:
            intermagnet["digital_sampling_rate"] = observatory.sensor_sampling_rate

        generated = self.clock()
        return {
            "intermagnet": intermagnet,
            "status": 200,
            "generated": DateUtils.to_iso(generated.timestamp()),
            "api": constants.SERVICE_VERSION,
        }
