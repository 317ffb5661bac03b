"""Python client for the Trello REST API.

Usage:
    import trellolib

    client = trellolib.Client(
        trellolib.TrelloSettings(developer_public_key="key", member_token="token")
    )
    board = trellolib.Board.find("4f092b2ee23cb6fe6d1aaabd", client=client)
    for card in board.cards:
        print(card.name)
"""

from trellolib.client import Client
from trellolib.configuration import API_VERSION, TrelloSettings
from trellolib.defaults import configure, get_client, reset
from trellolib.errors import (
    ApiError,
    ConfigurationError,
    ErrorStatus,
    InvalidAccessToken,
    NotFoundError,
    NotSavedError,
    TransportError,
    TrelloError,
)
from trellolib.models import (
    Action,
    Attachment,
    BasicData,
    Board,
    Card,
    Checklist,
    CustomField,
    Label,
    List,
    Member,
    Notification,
    Organization,
    Token,
    Webhook,
)
from trellolib.net import HTTP_CLIENT_PRIORITY
from trellolib.urls import (
    authorize_url,
    open_authorization_url,
    open_public_key_url,
    public_key_url,
)

__version__ = "0.1.0"

__all__ = [
    "API_VERSION",
    "HTTP_CLIENT_PRIORITY",
    "Action",
    "ApiError",
    "Attachment",
    "BasicData",
    "Board",
    "Card",
    "Checklist",
    "Client",
    "ConfigurationError",
    "CustomField",
    "ErrorStatus",
    "InvalidAccessToken",
    "Label",
    "List",
    "Member",
    "NotFoundError",
    "NotSavedError",
    "Notification",
    "Organization",
    "Token",
    "TransportError",
    "TrelloError",
    "TrelloSettings",
    "Webhook",
    "authorize_url",
    "configure",
    "get_client",
    "open_authorization_url",
    "open_public_key_url",
    "public_key_url",
    "reset",
]
