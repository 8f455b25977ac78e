"""Tests for mapping ARM error responses to exceptions."""

import pytest
import requests

from az_mgmt.core import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
)


class TestFromResponse:
    """HttpResponseError.from_response picks the class and message."""

    @pytest.mark.parametrize(
        ("status", "error_cls"),
        [
            (401, ClientAuthenticationError),
            (403, ClientAuthenticationError),
            (404, ResourceNotFoundError),
            (409, ResourceExistsError),
            (400, HttpResponseError),
            (500, HttpResponseError),
        ],
    )
    def test_status_maps_to_class(self, make_response, status, error_cls) -> None:
        err = HttpResponseError.from_response(make_response(status, {"error": {"code": "X", "message": "y"}}))
        assert type(err) is error_cls
        assert err.status_code == status

    def test_nested_error_envelope(self, make_response) -> None:
        err = HttpResponseError.from_response(
            make_response(400, {"error": {"code": "InvalidResourceName", "message": "Name is too long."}})
        )
        assert err.error_code == "InvalidResourceName"
        assert err.message == "(400) InvalidResourceName: Name is too long."
        assert str(err) == err.message

    def test_flat_error_shape(self, make_response) -> None:
        err = HttpResponseError.from_response(make_response(400, {"code": "BadRequest", "message": "Bad origin"}))
        assert err.error_code == "BadRequest"
        assert err.message == "(400) BadRequest: Bad origin"

    def test_non_json_body_uses_text(self, make_response) -> None:
        err = HttpResponseError.from_response(make_response(502, text="upstream unavailable"))
        assert err.error_code is None
        assert err.message == "(502) upstream unavailable"

    def test_empty_body_uses_reason(self, make_response) -> None:
        err = HttpResponseError.from_response(make_response(404))
        assert err.message == "(404) Not Found"

    def test_keeps_response_and_is_requests_error(self, make_response) -> None:
        resp = make_response(409, {"error": {"code": "Conflict", "message": "exists"}})
        err = HttpResponseError.from_response(resp)
        assert err.response is resp
        assert isinstance(err, requests.HTTPError)
