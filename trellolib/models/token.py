"""Trello API tokens."""

from typing import Any, Optional

from trellolib.errors import ConfigurationError
from trellolib.logging import get_module_logger
from trellolib.models.association import has_many, has_one
from trellolib.models.attributes import Attribute, DateTimeAttribute
from trellolib.models.base import BasicData

logger = get_module_logger()


class Token(BasicData):
    """Authorization granted by a member to an application.

    Tokens are addressed by their secret value, not their id, so a token
    keeps the value it was looked up with.
    """

    path_name = "tokens"
    read_only = True

    identifier = Attribute(readonly=True)
    member_id = Attribute("idMember", readonly=True)
    created_at = DateTimeAttribute("dateCreated", readonly=True)
    expires_at = DateTimeAttribute("dateExpires", readonly=True)
    permissions = Attribute(readonly=True)

    member = has_one("Member", via="member_id")
    webhooks = has_many("Webhook")

    value: Optional[str] = None

    @property
    def resource_path(self) -> str:
        if self.value:
            return f"/{self.path_name}/{self.value}"
        return super().resource_path

    @classmethod
    def find(
        cls,
        entity_id: str,
        params: Optional[dict[str, Any]] = None,
        client: Optional[Any] = None,
    ) -> "Token":
        token = super().find(entity_id, params, client=client)
        token.value = entity_id
        return token

    @classmethod
    def current(cls, client: Optional[Any] = None) -> "Token":
        """Token of the member credentials in use."""
        if client is None:
            from trellolib import defaults

            client = defaults.get_client()
        if not client.settings.member_token:
            raise ConfigurationError("No member token is configured")
        return cls.find(client.settings.member_token, client=client)

    def revoke(self) -> "Token":
        """Delete the token; requests made with it fail from then on."""
        self.client.delete(self.resource_path)
        logger.info("token_revoked", token_id=self.id)
        return self
