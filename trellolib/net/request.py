"""Request and response envelopes passed between the client and transports."""

import json
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

# Only the first part of a failing body is kept on errors and in logs.
BODY_FRAGMENT_LENGTH = 200

DEFAULT_HEADERS = {
    "User-Agent": "trellolib/0.1",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class Request:
    """Immutable description of one HTTP call.

    Attributes:
        verb: HTTP method, upper case
        url: Absolute URL without query string
        params: Query parameters
        headers: Request headers
        body: JSON-serializable request body, if any
    """

    verb: str
    url: str
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[Any] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "verb", self.verb.upper())

    @property
    def full_url(self) -> str:
        """URL including the encoded query string."""
        if not self.params:
            return self.url
        return f"{self.url}?{urlencode(self.params, doseq=True)}"

    @property
    def is_read(self) -> bool:
        return self.verb in ("GET", "HEAD")

    def with_params(self, **params: Any) -> "Request":
        return replace(self, params={**self.params, **params})

    def with_headers(self, **headers: str) -> "Request":
        return replace(self, headers={**self.headers, **headers})

    def encoded_body(self) -> Optional[str]:
        if self.body is None:
            return None
        return json.dumps(self.body)


@dataclass
class Response:
    """Raw HTTP response with status checks and lazy JSON decoding.

    Attributes:
        code: HTTP status code
        body: Raw response body text
        headers: Response headers
    """

    code: int
    body: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300

    @cached_property
    def json(self) -> Any:
        """Decoded body; None for an empty body."""
        if not self.body or not self.body.strip():
            return None
        return json.loads(self.body)

    @property
    def body_fragment(self) -> str:
        return self.body[:BODY_FRAGMENT_LENGTH] if self.body else ""

    def error_message(self) -> str:
        """Extract a human-readable error message from the body.

        Trello answers most errors with plain text; JSON bodies carry the
        message in one of a few common fields.
        """
        try:
            data = self.json
        except ValueError:
            data = None
        if isinstance(data, dict):
            for key in ("message", "error", "detail"):
                if key in data:
                    return str(data[key])
        return self.body_fragment or "Unknown error"
