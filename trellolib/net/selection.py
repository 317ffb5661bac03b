"""Selection of the HTTP transport implementation.

Each transport is backed by a different HTTP library. A transport is
chosen either explicitly by name or by probing ``HTTP_CLIENT_PRIORITY``
for the first library that is installed.
"""

import importlib
import importlib.util
from typing import Callable, Optional

import structlog

from trellolib.errors import ConfigurationError
from trellolib.net.base import Transport

logger = structlog.get_logger(__name__)

# The order in which HTTP libraries are tried.
HTTP_CLIENT_PRIORITY = ("requests", "httpx")

# Library name -> (transport module, transport class)
HTTP_CLIENTS = {
    "requests": ("trellolib.net.requests_transport", "RequestsTransport"),
    "httpx": ("trellolib.net.httpx_transport", "HttpxTransport"),
}


def is_library_available(library: str) -> bool:
    """Check whether ``library`` can be imported without importing it."""
    return importlib.util.find_spec(library) is not None


def load_transport_class(library: str) -> type:
    module_name, class_name = HTTP_CLIENTS[library]
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def select_transport_name(
    name: Optional[str] = None,
    is_available: Callable[[str], bool] = is_library_available,
) -> str:
    """Pick the HTTP library to use.

    Args:
        name: Explicit library name; the first installed library in priority order when None
        is_available: Availability check, injectable for tests

    Returns:
        The selected library name

    Raises:
        ValueError: If ``name`` is not a supported HTTP client
        ConfigurationError: If the requested library, or every supported
            library when probing, is not installed
    """
    if name is not None:
        if name not in HTTP_CLIENTS:
            raise ValueError(f"Unsupported HTTP client: {name}")
        if not is_available(name):
            raise ConfigurationError(
                f"Trello tried to use {name}, but that library is not installed"
            )
        return name

    for candidate in HTTP_CLIENT_PRIORITY:
        if is_available(candidate):
            logger.debug("http_client_selected", http_client=candidate)
            return candidate
        logger.debug("http_client_unavailable", http_client=candidate)

    raise ConfigurationError(
        f"Trello requires one of {' or '.join(HTTP_CLIENT_PRIORITY)} installed"
    )


def select_transport(
    name: Optional[str] = None,
    timeout: float = 30.0,
    is_available: Callable[[str], bool] = is_library_available,
) -> Transport:
    """Build the selected transport. See ``select_transport_name``."""
    library = select_transport_name(name, is_available=is_available)
    transport_class = load_transport_class(library)
    return transport_class(timeout=timeout)
