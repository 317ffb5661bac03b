"""Helpers for obtaining Trello credentials interactively."""

import webbrowser
from typing import Any, Optional
from urllib.parse import urlencode

from trellolib.configuration import TrelloSettings
from trellolib.logging import get_module_logger

logger = get_module_logger()

PUBLIC_KEY_URL = "https://trello.com/app-key"
AUTHORIZE_URL = "https://trello.com/1/authorize"

AUTHORIZE_DEFAULTS = {
    "name": "trellolib",
    "scope": "read,write,account",
    "expiration": "never",
    "response_type": "token",
}


def public_key_url() -> str:
    """Page listing the developer public key of the signed-in member."""
    return PUBLIC_KEY_URL


def authorize_url(
    key: Optional[str] = None,
    settings: Optional[TrelloSettings] = None,
    **options: Any,
) -> str:
    """Build the URL where a member grants a token to the application.

    Args:
        key: Application key; read from settings when None
        settings: Settings providing the key and return URL
        **options: Extra query parameters, e.g. name, scope, expiration,
            response_type, callback_method or return_url

    Raises:
        ValueError: If no application key is available
    """
    if key is None and settings is not None:
        key = settings.developer_public_key
    if not key:
        raise ValueError("Please configure your Trello public key")

    params = {"key": key, **AUTHORIZE_DEFAULTS}
    if settings is not None and settings.return_url:
        params["return_url"] = settings.return_url
    params.update({k: v for k, v in options.items() if v is not None})
    return f"{AUTHORIZE_URL}?{urlencode(params)}"


def open_url(url: str) -> str:
    """Open ``url`` in a browser; the URL is returned either way."""
    if not webbrowser.open(url):
        logger.warning("browser_unavailable", url=url)
    return url


def open_public_key_url() -> str:
    return open_url(public_key_url())


def open_authorization_url(key: Optional[str] = None, **options: Any) -> str:
    return open_url(authorize_url(key, **options))
