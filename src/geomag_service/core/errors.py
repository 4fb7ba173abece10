"""
Error taxonomy for the geomag web service.

Client errors describe a bad request; server errors describe a failure while
fetching or rendering data.
"""

BAD_REQUEST = 400
SERVER_ERROR = 500

STATUS_REASONS = {
    200: "OK",
    BAD_REQUEST: "Bad Request",
    SERVER_ERROR: "Internal Server Error",
}


class ServiceError(Exception):
    """Base class for errors reported back to the requester."""

    status = SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def reason(self) -> str:
        """Get the HTTP reason phrase for this error."""
        return STATUS_REASONS.get(self.status, "Error")


class ClientError(ServiceError):
    """Malformed, missing or unknown request parameter."""

    status = BAD_REQUEST


class ServerError(ServiceError):
    """Backend fetch, render, or other unexpected failure."""

    status = SERVER_ERROR
