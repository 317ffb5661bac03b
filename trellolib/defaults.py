"""Optional process-wide default client.

Entities use this client when none is passed explicitly. Configure it once at
startup, before any concurrent use::

    import trellolib

    trellolib.configure(developer_public_key="key", member_token="token")
    board = trellolib.Board.find("4f092b2ee23cb6fe6d1aaabd")
"""

import threading
from typing import Any, Optional

from trellolib.client import Client
from trellolib.configuration import TrelloSettings
from trellolib.logging import get_module_logger

logger = get_module_logger()

_lock = threading.Lock()
_client: Optional[Client] = None


def configure(client: Optional[Client] = None, **settings: Any) -> Client:
    """Set the default client.

    Args:
        client: Client to use as the default; built from settings when None
        **settings: TrelloSettings fields by name, applied on top of the
            environment

    Returns:
        The new default client
    """
    global _client
    if client is None:
        client = Client(TrelloSettings(**settings))
    with _lock:
        previous, _client = _client, client
    if previous is not None and previous is not client:
        previous.close()
    logger.debug("default_client_configured", oauth=client.settings.uses_oauth)
    return client


def get_client() -> Client:
    """Return the default client, building one from the environment if unset."""
    global _client
    with _lock:
        if _client is None:
            _client = Client()
        return _client


def reset() -> None:
    """Forget the default client."""
    global _client
    with _lock:
        previous, _client = _client, None
    if previous is not None:
        previous.close()
