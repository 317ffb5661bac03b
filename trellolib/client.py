"""Trello API client.

The client owns one ``TrelloSettings``, the auth policy derived from it and
the HTTP transport. Verb methods take a path relative to the API root and
return decoded JSON, raising a typed error for anything but a 2xx response.

Usage:
    from trellolib.client import Client
    from trellolib.configuration import TrelloSettings

    client = Client(TrelloSettings(developer_public_key="key", member_token="token"))
    board = client.get("/boards/4f092b2ee23cb6fe6d1aaabd")
"""

from typing import TYPE_CHECKING, Any, Optional

from trellolib.authorization import AuthPolicy, build_auth_policy
from trellolib.configuration import TrelloSettings
from trellolib.errors import ApiError, InvalidAccessToken, NotFoundError
from trellolib.logging import get_module_logger
from trellolib.net.base import Transport
from trellolib.net.request import Request, Response
from trellolib.net.selection import select_transport

if TYPE_CHECKING:
    from trellolib.models.base import BasicData

logger = get_module_logger()


def _query_value(value: Any) -> Any:
    # Trello expects lowercase booleans in query strings.
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class Client:
    """HTTP client for the Trello API.

    Args:
        settings: Settings to use; read from the environment when None
        transport: Transport to use; selected from settings on first call
            when None
        auth_policy: Policy to use; derived from settings when None

    Attributes:
        settings: Current settings
    """

    def __init__(
        self,
        settings: Optional[TrelloSettings] = None,
        transport: Optional[Transport] = None,
        auth_policy: Optional[AuthPolicy] = None,
    ) -> None:
        self.settings = settings if settings is not None else TrelloSettings()
        self._transport = transport
        self._auth_policy = auth_policy
        self._injected_transport = transport is not None
        self._injected_auth_policy = auth_policy is not None
        self._logger = logger.bind(component="trello_client")

    def configure(self, **overrides: Any) -> "Client":
        """Replace settings fields and forget the derived policy and transport.

        A transport or auth policy passed to the constructor is kept.
        """
        self.settings = self.settings.model_copy(update=overrides)
        if not self._injected_auth_policy:
            self._auth_policy = None
        if not self._injected_transport and self._transport is not None:
            self._transport.close()
            self._transport = None
        return self

    @property
    def auth_policy(self) -> AuthPolicy:
        if self._auth_policy is None:
            self._auth_policy = build_auth_policy(self.settings)
        return self._auth_policy

    @property
    def transport(self) -> Transport:
        """Transport in use, selected and cached on first access."""
        if self._transport is None:
            self._transport = select_transport(
                self.settings.http_client,
                timeout=self.settings.timeout_seconds,
            )
            self._logger.debug("transport_resolved", http_client=self._transport.name)
        return self._transport

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self.invoke_verb("GET", path, params=params)

    def post(self, path: str, body: Optional[dict[str, Any]] = None) -> Any:
        return self.invoke_verb("POST", path, body=body)

    def put(self, path: str, body: Optional[dict[str, Any]] = None) -> Any:
        return self.invoke_verb("PUT", path, body=body)

    def delete(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self.invoke_verb("DELETE", path, params=params)

    def invoke_verb(
        self,
        verb: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """Authorize, send and check one request.

        Args:
            verb: HTTP method
            path: Path relative to the API root, e.g. "/boards/abc"
            params: Query parameters
            body: JSON body

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ConfigurationError: Credentials or transport unavailable
            TransportError: Network failure
            InvalidAccessToken: Server answered 401
            NotFoundError: Server answered 404
            ApiError: Any other non-2xx answer
        """
        request = Request(
            verb=verb,
            url=self.build_url(path),
            params={
                k: _query_value(v) for k, v in (params or {}).items() if v is not None
            },
            body=body,
        )
        # Authorize before touching the transport so credential errors are
        # raised even when no HTTP library is installed.
        request = self.auth_policy.authorize(request)

        log = self._logger.bind(verb=request.verb, path=path)
        log.debug("trello_request", params=dict(request.params))

        response = self.transport.send(request)
        log = log.bind(status_code=response.code)

        if not response.ok:
            log.warning("trello_request_failed", body=response.body_fragment)
            raise self._error_for(response)

        log.debug("trello_response")
        return response.json

    def build_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return self.settings.api_base_url + path

    @staticmethod
    def _error_for(response: Response) -> ApiError:
        message = response.error_message()
        if response.code == 401:
            return InvalidAccessToken(
                message, status_code=response.code, body=response.body_fragment
            )
        if response.code == 404:
            return NotFoundError(
                message, status_code=response.code, body=response.body_fragment
            )
        return ApiError(message, status_code=response.code, body=response.body_fragment)

    def find(
        self,
        entity_cls: "type[BasicData]",
        entity_id: str,
        params: Optional[dict[str, Any]] = None,
    ) -> "BasicData":
        """Fetch one entity by id, e.g. ``client.find(Board, "b1")``."""
        data = self.get(f"/{entity_cls.path_name}/{entity_id}", params)
        return entity_cls.from_response(data, client=self)

    def find_many(
        self,
        entity_cls: "type[BasicData]",
        path: str,
        params: Optional[dict[str, Any]] = None,
    ) -> list["BasicData"]:
        """Fetch a collection at ``path`` and map every element."""
        data = self.get(path, params)
        return entity_cls.from_response_list(data, client=self)

    def create(
        self, entity_cls: "type[BasicData]", attributes: dict[str, Any]
    ) -> "BasicData":
        """Create an entity from python attribute names and save it."""
        entity = entity_cls(client=self, **attributes)
        return entity.save()

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()
