"""HTTP transport backed by requests."""

import requests
import structlog

from trellolib.errors import TransportError
from trellolib.net.request import DEFAULT_HEADERS, Request, Response

logger = structlog.get_logger(__name__)


class RequestsTransport:
    """Transport using a pooled ``requests.Session``.

    Attributes:
        timeout: Default timeout in seconds
    """

    name = "requests"

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)
        self._logger = logger.bind(component="requests_transport")

    def send(self, request: Request) -> Response:
        """Send a request and wrap the raw response.

        Raises:
            TransportError: On timeout or connection failure
        """
        headers = dict(request.headers)
        data = request.encoded_body()
        if data is not None:
            headers.setdefault("Content-Type", "application/json")

        try:
            raw = self._session.request(
                method=request.verb,
                url=request.url,
                params=dict(request.params),
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            self._logger.error("http_timeout", url=request.url, timeout=self.timeout)
            raise TransportError(
                f"Request timeout after {self.timeout}s: {request.verb} {request.url}",
                cause=e,
            ) from e
        except requests.RequestException as e:
            self._logger.error("http_connection_error", url=request.url, error=str(e))
            raise TransportError(f"Connection error: {e}", cause=e) from e

        return Response(code=raw.status_code, body=raw.text, headers=dict(raw.headers))

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
