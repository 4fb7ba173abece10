"""
Application-wide constants for the geomag web service.

This module defines enumerations, default values and fill values used
throughout the application.
"""

SERVICE_VERSION = "0.1.3"

# Every observatory channel lives on this network
NETWORK = "NT"

# Valid sampling periods in seconds
# 1 = second, 60 = minute, 3600 = hour
SAMPLING_PERIODS = (1, 60, 3600)
DEFAULT_SAMPLING_PERIOD = 60

# Channel prefix per sampling period
CHANNEL_PREFIXES = {
    1: "S",
    60: "M",
}

# Data type -> location code
DATA_TYPE_LOCATIONS = {
    "variation": "R0",
    "adjusted": "A0",
    "quasi-definitive": "Q0",
    "definitive": "D0",
}
DATA_TYPES = tuple(DATA_TYPE_LOCATIONS.keys())
DEFAULT_DATA_TYPE = "variation"

OUTPUT_FORMATS = ("iaga2002", "json")

DEFAULT_ELEMENTS = ("X", "Y", "Z", "F")

# Default window is one day minus one second
DEFAULT_WINDOW_SECONDS = 24 * 60 * 60 - 1

# Location codes and edge channel codes accepted verbatim
LOCATION_CODE_PATTERN = r"^[A-Z0-9]{2}$"
EDGE_CHANNEL_PATTERN = r"^[A-Z][A-Z0-9]{2}$"

# Wave server reports nanotesla * 1000
MILLI_UNIT_FACTOR = 1000.0

# IAGA-2002 fill value for missing samples
IAGA2002_MISSING_VALUE = 99999.0
