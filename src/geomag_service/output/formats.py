"""
Output format selection.

Each known format is bound to its renderer. A query without a format gets
DEFAULT_FORMAT.
"""

import logging
from enum import Enum
from typing import Dict, Optional, Type

from .base import Renderer
from .iaga2002 import Iaga2002Renderer
from .json_format import JsonRenderer


class OutputFormat(Enum):
    """Supported output formats."""

    IAGA2002 = "iaga2002"
    JSON = "json"

    @classmethod
    def from_query(cls, value: Optional[str]) -> "OutputFormat":
        """
        Resolve a query format value.

        Raises:
            ValueError: If the value names no supported format
        """
        if value is None:
            return DEFAULT_FORMAT
        return cls(value.lower())


DEFAULT_FORMAT = OutputFormat.JSON

RENDERERS: Dict[OutputFormat, Type[Renderer]] = {
    OutputFormat.IAGA2002: Iaga2002Renderer,
    OutputFormat.JSON: JsonRenderer,
}


def get_renderer(
    output_format: OutputFormat,
    logger: Optional[logging.Logger] = None
) -> Renderer:
    """Create the renderer bound to an output format."""
    return RENDERERS[output_format](logger=logger)
