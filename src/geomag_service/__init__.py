"""
Geomagnetic Data Web Service

This package translates loosely-typed web service requests into wave server
channel queries and renders the resulting magnetic field time series.
"""

__version__ = "0.1.3"
__author__ = "USGS Geomagnetism Program"
__description__ = "Geomagnetic time series web service backed by a wave server"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "GeomagWebService":
        from .service import GeomagWebService
        return GeomagWebService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "GeomagWebService",
]
