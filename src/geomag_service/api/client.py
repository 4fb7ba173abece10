"""
Base HTTP client for the wave server.

Wraps a requests session with retries on transient server errors.
"""

import logging
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants

RETRY_STATUS_CODES = (429, 500, 502, 503, 504)
NO_CONTENT = 204


class APIClient:
    """Base client for interacting with an HTTP wave server."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        max_retries: int = 3,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL for the wave server
            timeout: Request timeout in seconds
            max_retries: Retries for GET requests on connection errors and
                         the status codes in RETRY_STATUS_CODES
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.logger = logger or logging.getLogger(__name__)

        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.session = self._build_session(max_retries)

    @staticmethod
    def _build_session(max_retries: int) -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=list(RETRY_STATUS_CODES),
            allowed_methods=["GET"]
        ))
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({
            "Accept": "application/json",
            "User-Agent": f"geomag-service/{constants.SERVICE_VERSION}",
        })
        return session

    def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to the wave server.

        Args:
            method: HTTP method
            endpoint: Endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            requests.exceptions.RequestException: On request failure,
                including error status codes once retries are exhausted
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault("verify", self.verify_ssl)

        self.logger.debug(f"{method} {url} params={kwargs.get('params')}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            self.logger.warning(f"Wave server returned {status} for {method} {url}")
            raise
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Wave server request failed: {method} {url} - {e}")
            raise

        return response

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        """
        Make GET request.

        Args:
            endpoint: Endpoint
            params: Query parameters

        Returns:
            Decoded JSON body; empty for a 204 response
        """
        response = self._make_request("GET", endpoint, params=params)
        if response.status_code == NO_CONTENT:
            return {}
        return response.json()

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
