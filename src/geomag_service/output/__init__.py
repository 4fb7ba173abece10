"""
Output formats for the geomag web service.

Provides the renderers for assembled data and the format registry.
"""

from .base import Renderer
from .iaga2002 import Iaga2002Renderer
from .json_format import JsonRenderer
from .formats import OutputFormat, DEFAULT_FORMAT, RENDERERS, get_renderer

__all__ = [
    "Renderer",
    "Iaga2002Renderer",
    "JsonRenderer",
    "OutputFormat",
    "DEFAULT_FORMAT",
    "RENDERERS",
    "get_renderer",
]
