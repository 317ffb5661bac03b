"""Unit tests for trellolib.errors."""

import pytest

from trellolib.errors import (
    ApiError,
    ErrorStatus,
    InvalidAccessToken,
    NotFoundError,
    TrelloError,
    classify_status_code,
)


@pytest.mark.unit
class TestClassifyStatusCode:
    """Test suite for classify_status_code."""

    @pytest.mark.parametrize(
        "code, status",
        [
            (401, ErrorStatus.UNAUTHORIZED),
            (403, ErrorStatus.UNAUTHORIZED),
            (404, ErrorStatus.NOT_FOUND),
            (429, ErrorStatus.TRANSIENT_ERROR),
            (500, ErrorStatus.TRANSIENT_ERROR),
            (503, ErrorStatus.TRANSIENT_ERROR),
            (400, ErrorStatus.PERMANENT_ERROR),
            (422, ErrorStatus.PERMANENT_ERROR),
        ],
    )
    def test_mapping(self, code, status):
        assert classify_status_code(code) is status


@pytest.mark.unit
class TestApiError:
    """Test suite for ApiError and its subclasses."""

    def test_carries_status_and_body(self):
        error = ApiError("invalid id", status_code=400, body="invalid id")

        assert error.status_code == 400
        assert error.status is ErrorStatus.PERMANENT_ERROR
        assert error.retryable is False
        assert str(error) == "[400] invalid id"

    def test_server_errors_are_retryable(self):
        assert ApiError("oops", status_code=502).retryable is True

    def test_local_error_without_status(self):
        error = ApiError("Expected a list")

        assert error.status is ErrorStatus.PERMANENT_ERROR
        assert str(error) == "Expected a list"

    def test_not_found_is_always_classified_not_found(self):
        error = NotFoundError("Board b1 has no organization")

        assert error.status is ErrorStatus.NOT_FOUND
        assert isinstance(error, ApiError)

    def test_hierarchy(self):
        assert issubclass(InvalidAccessToken, ApiError)
        assert issubclass(ApiError, TrelloError)
