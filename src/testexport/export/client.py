"""HTTP transport for the test collector."""

from __future__ import annotations

import httpx

from testexport.core.exceptions import TransmissionError

DEFAULT_TIMEOUT = 30.0


def build_load_url(server_url: str, api_key: str) -> str:
    """Build the load endpoint URL: ``<server>/api/load?api_key=<key>``."""
    return f"{server_url.strip().rstrip('/')}/api/load?api_key={api_key}"


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from a collector response."""
    try:
        data = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            if data.get(key):
                return str(data[key])
    return response.text.strip() or response.reason_phrase


class CollectorClient:
    """Client posting serialized test batches to the collector.

    Usage:
        client = CollectorClient()
        client.send_post_request(build_load_url(url, api_key), body)
    """

    def __init__(self, http_client: httpx.Client | None = None, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the client.

        Args:
            http_client: Preconfigured httpx client (tests pass one with a mock transport).
            timeout: Request timeout in seconds when no client is given.
        """
        self._http_client = http_client
        self.timeout = timeout
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def send_post_request(self, url: str, body: str) -> None:
        """POST a JSON body.

        Raises:
            TransmissionError: When the collector answers with a non-2xx status.
            httpx.HTTPError: When the request could not be made at all.
        """
        if self._http_client is not None:
            response = self._http_client.post(url, content=body, headers=self._headers)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(url, content=body, headers=self._headers)

        if response.status_code == 401:
            raise TransmissionError("Unauthorized - check your API key", status_code=401)
        elif response.status_code == 404:
            raise TransmissionError("Collector endpoint not found - check the server URL", status_code=404)
        elif response.is_redirect:
            # A redirected POST never reaches the load endpoint
            location = response.headers.get("Location", "another location")
            raise TransmissionError(
                f"Collector redirected the request to {location} - check the server URL",
                status_code=response.status_code,
            )
        elif not response.is_success:
            raise TransmissionError(
                f"Request failed: {_error_detail(response)}",
                status_code=response.status_code,
            )
