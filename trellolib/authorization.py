"""Authorization policies that turn a request into an authorized request.

Two schemes are supported:

- ``BasicAuthPolicy`` adds the application key and member token as query
  parameters.
- ``OAuthPolicy`` signs the request with OAuth1 (HMAC-SHA1) over the verb and
  the full URL, including query parameters.

Missing credentials fail fast with ``ConfigurationError`` before the request
leaves the process. Credentials the server rejects surface later as
``InvalidAccessToken``.
"""

from abc import ABC, abstractmethod

import structlog
from oauthlib.oauth1 import SIGNATURE_HMAC
from oauthlib.oauth1 import Client as OAuth1Client

from trellolib.configuration import TrelloSettings
from trellolib.errors import ConfigurationError
from trellolib.net.request import Request

logger = structlog.get_logger(__name__)


class AuthPolicy(ABC):
    """Strategy producing authorized requests from one set of settings."""

    def __init__(self, settings: TrelloSettings) -> None:
        self.settings = settings

    @abstractmethod
    def authorize(self, request: Request) -> Request:
        """Return a copy of ``request`` carrying credentials.

        Raises:
            ConfigurationError: If the credentials the request needs are absent
        """


class BasicAuthPolicy(AuthPolicy):
    """Application key + member token passed as query parameters.

    The key alone is enough to read public resources; any write needs the
    member token as well.
    """

    def authorize(self, request: Request) -> Request:
        key = self.settings.developer_public_key
        token = self.settings.member_token

        if not key:
            raise ConfigurationError(
                "Trello has not been configured to make authorized requests: "
                "set developer_public_key and member_token, or OAuth credentials"
            )
        if not token:
            if not request.is_read:
                raise ConfigurationError(
                    f"{request.verb} requests need a member_token or OAuth "
                    "credentials; only public reads work with the key alone"
                )
            return request.with_params(key=key)

        return request.with_params(key=key, token=token)


class OAuthPolicy(AuthPolicy):
    """OAuth1 request signing with consumer and access token credentials."""

    def __init__(self, settings: TrelloSettings) -> None:
        super().__init__(settings)
        self._signer = None

    def _get_signer(self) -> OAuth1Client:
        if self._signer is None:
            consumer_key = self.settings.consumer_key
            consumer_secret = self.settings.consumer_secret
            if not consumer_key or not consumer_secret:
                raise ConfigurationError(
                    "OAuth requests need consumer_key and consumer_secret"
                )
            self._signer = OAuth1Client(
                consumer_key,
                client_secret=consumer_secret,
                resource_owner_key=self.settings.oauth_token,
                resource_owner_secret=self.settings.oauth_token_secret,
                signature_method=SIGNATURE_HMAC,
            )
        return self._signer

    def authorize(self, request: Request) -> Request:
        signer = self._get_signer()
        # The JSON body is not form encoded, so it is not part of the signature.
        _, headers, _ = signer.sign(request.full_url, http_method=request.verb)
        return request.with_headers(Authorization=headers["Authorization"])


def build_auth_policy(settings: TrelloSettings) -> AuthPolicy:
    """Select the policy matching the populated settings.

    An OAuth token selects OAuth1; anything else uses basic authorization.
    """
    if settings.uses_oauth:
        logger.debug("auth_policy_selected", policy="oauth")
        return OAuthPolicy(settings)
    logger.debug("auth_policy_selected", policy="basic")
    return BasicAuthPolicy(settings)
