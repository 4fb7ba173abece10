"""
Core utilities for the geomag web service.

Provides configuration management, logging, error types and date handling.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils, time_axis
from .errors import ServiceError, ClientError, ServerError

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "time_axis",
    "ServiceError",
    "ClientError",
    "ServerError",
]
