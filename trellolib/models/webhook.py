"""Trello webhooks.

Trello signs every callback with ``base64(HMAC-SHA1(secret, body + url))``
in the ``X-Trello-Webhook`` header, where ``secret`` is the application
secret and ``url`` the callback URL registered with the webhook.
"""

import base64
import hashlib
import hmac
from typing import Any, Optional, Union

from trellolib.errors import ConfigurationError
from trellolib.models.attributes import Attribute
from trellolib.models.base import BasicData

SIGNATURE_HEADER = "X-Trello-Webhook"


def compute_signature(body: Union[str, bytes], callback_url: str, secret: str) -> str:
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    digest = hmac.new(
        secret.encode("utf-8"),
        (body + callback_url).encode("utf-8"),
        hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


class Webhook(BasicData):
    path_name = "webhooks"

    description = Attribute()
    model_id = Attribute("idModel")
    callback_url = Attribute("callbackURL")
    active = Attribute()

    def activate(self) -> "Webhook":
        self.active = True
        return self.save()

    def deactivate(self) -> "Webhook":
        self.active = False
        return self.save()

    @classmethod
    def verify_signature(
        cls,
        body: Union[str, bytes],
        callback_url: str,
        signature: Optional[str],
        secret: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> bool:
        """Return True when ``signature`` matches the callback body and URL.

        Args:
            body: Raw request body as received
            callback_url: Callback URL registered with the webhook
            signature: Value of the X-Trello-Webhook header
            secret: Application secret; read from the client settings
                (developer_public_key_secret) when None
            client: Client whose settings hold the secret

        Raises:
            ConfigurationError: If no application secret is available
        """
        if secret is None:
            if client is None:
                from trellolib import defaults

                client = defaults.get_client()
            secret = client.settings.developer_public_key_secret
        if not secret:
            raise ConfigurationError(
                "Verifying webhooks needs developer_public_key_secret"
            )
        if not signature:
            return False
        expected = compute_signature(body, callback_url, secret)
        return hmac.compare_digest(expected, signature)

    def verify(self, body: Union[str, bytes], signature: Optional[str]) -> bool:
        """Check a callback against this webhook's own callback URL."""
        return self.verify_signature(
            body, self.callback_url or "", signature, client=self.client
        )
