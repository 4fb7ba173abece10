"""
API layer for the wave server.

Provides the HTTP client and trace retrieval used to fetch channel data.
"""

from .client import APIClient
from .response import Trace, WaveServerResponse
from .waveserver import WaveServerAPI

__all__ = [
    "APIClient",
    "Trace",
    "WaveServerResponse",
    "WaveServerAPI",
]
