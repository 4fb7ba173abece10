"""
Wave server operations.

Fetches raw sample traces for one SNCL address over a time window.
"""

import logging
from typing import Optional

import requests  # type: ignore

from .client import APIClient
from .response import WaveServerResponse
from ..models import ChannelAddress


class WaveServerAPI(APIClient):
    """Wave server trace retrieval."""

    TRACE_ENDPOINT = "/trace"

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        max_retries: int = 3,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )

    def fetch_series(
        self,
        starttime: int,
        endtime: int,
        station: str,
        network: str,
        channel: str,
        location: str
    ) -> WaveServerResponse:
        """
        Fetch traces for a channel.

        Args:
            starttime: Window start (epoch seconds)
            endtime: Window end (epoch seconds)
            station: Observatory id
            network: Network code
            channel: Channel code
            location: Location code

        Returns:
            Response holding the traces; empty when the channel is unknown
            to the wave server

        Raises:
            requests.exceptions.RequestException: On any other request failure
        """
        address = ChannelAddress(
            station=station,
            network=network,
            channel=channel,
            location=location
        )
        params = {
            "starttime": starttime,
            "endtime": endtime,
            "station": station,
            "network": network,
            "channel": channel,
            "location": location,
        }

        self.logger.debug(f"Fetching traces for {address}")
        try:
            data = self.get(self.TRACE_ENDPOINT, params=params)
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                self.logger.info(f"No channel {address} on wave server")
                return WaveServerResponse(address)
            raise

        response = WaveServerResponse.from_json(address, data or {})
        self.logger.debug(f"Received {response}")
        return response
