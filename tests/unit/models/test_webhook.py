"""Unit tests for trellolib.models.webhook."""

import base64
import hashlib
import hmac

import pytest

from trellolib.client import Client
from trellolib.errors import ConfigurationError
from trellolib.models import Webhook
from trellolib.models.webhook import compute_signature

CALLBACK_URL = "https://example.test/trello/callback"
BODY = '{"action": {"type": "updateCard"}}'


def sign(body, url, secret):
    digest = hmac.new(secret.encode(), (body + url).encode(), hashlib.sha1).digest()
    return base64.b64encode(digest).decode()


@pytest.mark.unit
class TestWebhookLifecycle:
    """Test suite for webhook activation."""

    def test_create(self, client, transport):
        transport.queue({"id": "w1", "idModel": "b1", "callbackURL": CALLBACK_URL, "active": True})

        webhook = Webhook.create(
            client=client, model_id="b1", callback_url=CALLBACK_URL, description="Board"
        )

        assert webhook.id == "w1"
        assert transport.last_request.body == {
            "idModel": "b1",
            "callbackURL": CALLBACK_URL,
            "description": "Board",
        }

    def test_deactivate_and_activate(self, client, transport):
        webhook = Webhook({"id": "w1", "active": True}, client=client)
        transport.queue({"id": "w1", "active": False})
        transport.queue({"id": "w1", "active": True})

        webhook.deactivate()
        assert transport.last_request.body == {"active": False}
        assert webhook.active is False

        webhook.activate()
        assert transport.last_request.body == {"active": True}
        assert webhook.active is True


@pytest.mark.unit
class TestVerifySignature:
    """Test suite for callback signature verification."""

    def test_compute_signature(self):
        assert compute_signature(BODY, CALLBACK_URL, "secret") == sign(BODY, CALLBACK_URL, "secret")

    def test_valid_signature(self):
        signature = sign(BODY, CALLBACK_URL, "secret")

        assert Webhook.verify_signature(BODY, CALLBACK_URL, signature, "secret") is True

    def test_bytes_body(self):
        signature = sign(BODY, CALLBACK_URL, "secret")

        assert Webhook.verify_signature(BODY.encode(), CALLBACK_URL, signature, "secret") is True

    def test_tampered_body(self):
        signature = sign(BODY, CALLBACK_URL, "secret")

        assert Webhook.verify_signature(BODY + " ", CALLBACK_URL, signature, "secret") is False

    def test_missing_signature(self):
        assert Webhook.verify_signature(BODY, CALLBACK_URL, None, "secret") is False

    def test_secret_from_client_settings(self, settings_factory, transport):
        client = Client(
            settings_factory(developer_public_key_secret="app-secret"), transport=transport
        )
        webhook = Webhook({"id": "w1", "callbackURL": CALLBACK_URL}, client=client)

        assert webhook.verify(BODY, sign(BODY, CALLBACK_URL, "app-secret")) is True

    def test_missing_secret_raises(self, client):
        with pytest.raises(ConfigurationError):
            Webhook.verify_signature(BODY, CALLBACK_URL, "sig", client=client)
