"""Trello client settings."""

from typing import Optional

from pydantic import Field

from trellolib.configuration.base import ClientSettingsBase

# Version of the Trello API used by default.
API_VERSION = 1


class TrelloSettings(ClientSettingsBase):
    """Trello API configuration.

    Every credential is optional on its own. Which ones are needed depends on
    the call: an OAuth token selects OAuth1 signing and then requires the
    consumer key and secret; otherwise requests are authorized with the
    developer public key and member token. Public boards can be read with the
    developer public key alone.

    Environment Variables:
        TRELLO_CONSUMER_KEY: OAuth consumer key
        TRELLO_CONSUMER_SECRET: OAuth consumer secret
        TRELLO_OAUTH_TOKEN: OAuth access token
        TRELLO_OAUTH_TOKEN_SECRET: OAuth access token secret
        TRELLO_DEVELOPER_PUBLIC_KEY: Application key (https://trello.com/app-key)
        TRELLO_DEVELOPER_PUBLIC_KEY_SECRET: Application secret, used to verify
            webhook callbacks
        TRELLO_MEMBER_TOKEN: Member token for key+token authorization
        TRELLO_CALLBACK: OAuth callback URL
        TRELLO_RETURN_URL: URL the authorization flow returns to
        TRELLO_HTTP_CLIENT: HTTP library to use ("requests" or "httpx")
        TRELLO_API_HOST: API host (default: https://api.trello.com)
        TRELLO_API_VERSION: API version segment (default: 1)
        TRELLO_TIMEOUT_SECONDS: Per request timeout (default: 30)
        TRELLO_LOG_LEVEL: Logging level (default: INFO)

    Example:
        ```python
        from trellolib.configuration import TrelloSettings

        settings = TrelloSettings(
            consumer_key="key",
            consumer_secret="secret",
            oauth_token="token",
            oauth_token_secret="token-secret",
        )
        ```
    """

    consumer_key: Optional[str] = Field(default=None, alias="TRELLO_CONSUMER_KEY")
    consumer_secret: Optional[str] = Field(
        default=None, alias="TRELLO_CONSUMER_SECRET"
    )
    oauth_token: Optional[str] = Field(default=None, alias="TRELLO_OAUTH_TOKEN")
    oauth_token_secret: Optional[str] = Field(
        default=None, alias="TRELLO_OAUTH_TOKEN_SECRET"
    )
    developer_public_key: Optional[str] = Field(
        default=None, alias="TRELLO_DEVELOPER_PUBLIC_KEY"
    )
    developer_public_key_secret: Optional[str] = Field(
        default=None, alias="TRELLO_DEVELOPER_PUBLIC_KEY_SECRET"
    )
    member_token: Optional[str] = Field(default=None, alias="TRELLO_MEMBER_TOKEN")
    callback: Optional[str] = Field(default=None, alias="TRELLO_CALLBACK")
    return_url: Optional[str] = Field(default=None, alias="TRELLO_RETURN_URL")

    http_client: Optional[str] = Field(
        default=None,
        alias="TRELLO_HTTP_CLIENT",
        description="HTTP library to use; detected automatically when unset",
    )
    api_host: str = Field(
        default="https://api.trello.com",
        alias="TRELLO_API_HOST",
        min_length=8,
    )
    api_version: int = Field(default=API_VERSION, alias="TRELLO_API_VERSION", ge=1)
    timeout_seconds: float = Field(
        default=30.0,
        alias="TRELLO_TIMEOUT_SECONDS",
        gt=0,
        description="Timeout per request (seconds)",
    )
    log_level: str = Field(default="INFO", alias="TRELLO_LOG_LEVEL")

    @property
    def uses_oauth(self) -> bool:
        """True when an OAuth token is configured."""
        return bool(self.oauth_token)

    @property
    def is_configured(self) -> bool:
        """True when any credential that can authorize a request is present."""
        return bool(self.oauth_token or self.developer_public_key)

    @property
    def api_base_url(self) -> str:
        return f"{self.api_host.rstrip('/')}/{self.api_version}"

    def credentials(self) -> dict[str, Optional[str]]:
        """Return the credentials used by the selected authorization scheme."""
        if self.uses_oauth:
            return {
                "consumer_key": self.consumer_key,
                "consumer_secret": self.consumer_secret,
                "oauth_token": self.oauth_token,
                "oauth_token_secret": self.oauth_token_secret,
            }
        return {
            "developer_public_key": self.developer_public_key,
            "member_token": self.member_token,
        }
