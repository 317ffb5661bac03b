"""HTTP transport backed by httpx."""

from typing import Optional

import httpx
import structlog

from trellolib.errors import TransportError
from trellolib.net.request import DEFAULT_HEADERS, Request, Response

logger = structlog.get_logger(__name__)


class HttpxTransport:
    """Transport using a synchronous ``httpx.Client``.

    Args:
        timeout: Timeout in seconds
        transport: Lower level httpx transport, e.g. ``httpx.MockTransport``
    """

    name = "httpx"

    def __init__(
        self,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout),
            headers=DEFAULT_HEADERS,
            follow_redirects=True,
            transport=transport,
        )
        self._logger = logger.bind(component="httpx_transport")

    def send(self, request: Request) -> Response:
        """Send a request and wrap the raw response.

        Raises:
            TransportError: On timeout or connection failure
        """
        headers = dict(request.headers)
        content = request.encoded_body()
        if content is not None:
            headers.setdefault("Content-Type", "application/json")

        try:
            raw = self._client.request(
                request.verb,
                request.url,
                params=dict(request.params),
                content=content,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            self._logger.error("http_timeout", url=request.url, timeout=self.timeout)
            raise TransportError(
                f"Request timeout after {self.timeout}s: {request.verb} {request.url}",
                cause=e,
            ) from e
        except httpx.HTTPError as e:
            self._logger.error("http_connection_error", url=request.url, error=str(e))
            raise TransportError(f"Connection error: {e}", cause=e) from e

        return Response(code=raw.status_code, body=raw.text, headers=dict(raw.headers))

    def close(self) -> None:
        self._client.close()
