"""Configuration module - public API.

Settings are explicit objects: build one, hand it to a ``Client``.

Exports:
    TrelloSettings: Trello credentials, transport and API settings
    API_VERSION: Default Trello API version segment

Example:
    ```python
    from trellolib.configuration import TrelloSettings
    from trellolib.client import Client

    client = Client(TrelloSettings(developer_public_key="key", member_token="token"))
    ```
"""

from trellolib.configuration.settings import API_VERSION, TrelloSettings

__all__ = ["API_VERSION", "TrelloSettings"]
