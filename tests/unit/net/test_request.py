"""Unit tests for trellolib.net.request."""

import pytest

from trellolib.net.request import BODY_FRAGMENT_LENGTH, Request, Response


@pytest.mark.unit
class TestRequest:
    """Test suite for the immutable request envelope."""

    def test_verb_is_upper_cased(self):
        request = Request("get", "https://api.trello.com/1/boards/b1")

        assert request.verb == "GET"
        assert request.is_read is True

    def test_full_url_encodes_params(self):
        request = Request(
            "GET", "https://api.trello.com/1/boards/b1", params={"fields": "name,desc"}
        )

        assert request.full_url == "https://api.trello.com/1/boards/b1?fields=name%2Cdesc"

    def test_full_url_without_params(self):
        request = Request("GET", "https://api.trello.com/1/boards/b1")

        assert request.full_url == "https://api.trello.com/1/boards/b1"

    def test_with_params_returns_copy(self):
        request = Request("GET", "https://x", params={"a": "1"})

        signed = request.with_params(key="k")

        assert signed.params == {"a": "1", "key": "k"}
        assert request.params == {"a": "1"}

    def test_with_headers_returns_copy(self):
        request = Request("POST", "https://x")

        signed = request.with_headers(Authorization="OAuth ...")

        assert signed.headers == {"Authorization": "OAuth ..."}
        assert request.headers == {}
        assert signed.is_read is False

    def test_is_frozen(self):
        request = Request("GET", "https://x")

        with pytest.raises(AttributeError):
            request.verb = "POST"

    def test_encoded_body(self):
        assert Request("POST", "https://x").encoded_body() is None
        assert Request("POST", "https://x", body={"name": "A"}).encoded_body() == '{"name": "A"}'


@pytest.mark.unit
class TestResponse:
    """Test suite for the response envelope."""

    @pytest.mark.parametrize("code, ok", [(200, True), (204, True), (301, False), (404, False)])
    def test_ok(self, code, ok):
        assert Response(code).ok is ok

    def test_json_decoding(self):
        assert Response(200, '{"id": "b1"}').json == {"id": "b1"}

    def test_empty_body_decodes_to_none(self):
        assert Response(200, "").json is None
        assert Response(200, "  ").json is None

    def test_body_fragment_is_bounded(self):
        response = Response(500, "x" * (BODY_FRAGMENT_LENGTH + 50))

        assert len(response.body_fragment) == BODY_FRAGMENT_LENGTH

    def test_error_message_from_plain_text(self):
        assert Response(400, "invalid value for name").error_message() == "invalid value for name"

    def test_error_message_from_json(self):
        response = Response(400, '{"message": "invalid id", "error": "ERROR"}')

        assert response.error_message() == "invalid id"

    def test_error_message_empty_body(self):
        assert Response(500).error_message() == "Unknown error"
