"""
Geomag web service request handling.

Runs a request through two stages: parse (query building and channel
planning) and data (assembly and rendering). A parse failure is a client
error; any data stage failure is a server error. No stage is retried and no
partial output is produced.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from .core import LoggerContext, constants
from .core.errors import BAD_REQUEST, SERVER_ERROR, STATUS_REASONS
from .models import Observatory
from .output import OutputFormat, get_renderer
from .query import QueryBuilder
from .query.builder import ParamValue
from .services import DataAssembler
from .services.assembler import FetchSeries


@dataclass
class ServiceResponse:
    """Status, content type and body for one request."""

    status: int
    content_type: str
    body: bytes

    @property
    def ok(self) -> bool:
        return self.status == 200


class GeomagWebService:
    """Translate web service parameters into rendered wave server data."""

    VERSION = constants.SERVICE_VERSION

    def __init__(
        self,
        fetch_series: FetchSeries,
        observatories: Mapping[str, Observatory],
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize web service.

        Args:
            fetch_series: Wave server fetch callable, see DataAssembler
            observatories: Read-only metadata keyed by upper case observatory id
            logger: Logger instance
        """
        self.observatories = observatories
        self.logger = logger or logging.getLogger(__name__)
        self.builder = QueryBuilder(observatories, logger=self.logger)
        self.assembler = DataAssembler(fetch_series, logger=self.logger)

    def handle(self, params: Mapping[str, ParamValue]) -> ServiceResponse:
        """
        Handle one request.

        Args:
            params: Raw request parameters

        Returns:
            Rendered data, or a plain text error response
        """
        built = self.builder.build(params)
        if not built.ok:
            return self.error(BAD_REQUEST, built.error)
        query = built.value

        planned = self.assembler.plan(query)
        if not planned.ok:
            return self.error(BAD_REQUEST, planned.error)

        try:
            with LoggerContext(self.logger, f"request for {query.id} {','.join(query.elements)}"):
                data = self.assembler.assemble(query, planned.value)
                renderer = get_renderer(OutputFormat.from_query(query.format), self.logger)
                body = renderer.render(data, query, self.observatories)
        except Exception as e:
            return self.error(SERVER_ERROR, str(e) or e.__class__.__name__)

        return ServiceResponse(
            status=200,
            content_type=renderer.content_type,
            body=body.encode("utf-8")
        )

    def error(self, status: int, message: str) -> ServiceResponse:
        """
        Build an error response.

        Args:
            status: HTTP status code
            message: Human readable description

        Returns:
            Plain text error response
        """
        reason = STATUS_REASONS.get(status, "Error")
        if status == BAD_REQUEST:
            self.logger.warning(f"Bad request: {message}")
        else:
            self.logger.error(f"Server error: {message}")

        body = (
            f"Error {status}: {reason}\n"
            "\n"
            f"{message}\n"
            "\n"
            f"Service Version: {self.VERSION}\n"
        )
        return ServiceResponse(
            status=status,
            content_type="text/plain",
            body=body.encode("utf-8")
        )
