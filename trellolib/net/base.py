"""Transport contract shared by every HTTP implementation."""

from typing import Protocol, runtime_checkable

from trellolib.net.request import Request, Response


@runtime_checkable
class Transport(Protocol):
    """Sends one signed request and returns the raw response.

    Implementations must be interchangeable: identical requests produce the
    same (status, body). Network failures are raised as
    ``trellolib.errors.TransportError`` and are never retried.
    """

    name: str

    def send(self, request: Request) -> Response:  # pragma: no cover - typing helper
        ...

    def close(self) -> None:  # pragma: no cover - typing helper
        ...
