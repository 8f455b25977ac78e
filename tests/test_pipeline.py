"""Tests for the HTTP pipeline retry behaviour."""

from unittest.mock import call

import pytest
import requests

from az_mgmt import __version__
from az_mgmt.core import Pipeline, RetryOptions

URL = "https://management.azure.com/subscriptions"


class TestSend:
    """A successful request goes straight through."""

    def test_passes_headers_params_and_timeout(self, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"value": []})
        pipeline = Pipeline(timeout=12)

        resp = pipeline.send(
            "GET",
            URL,
            headers={"Authorization": "Bearer fake-token"},
            params={"api-version": "2020-01-01"},
        )

        assert resp.status_code == 200
        mock_request.assert_called_once()
        method, url = mock_request.call_args.args
        kwargs = mock_request.call_args.kwargs
        assert (method, url) == ("GET", URL)
        assert kwargs["headers"]["Authorization"] == "Bearer fake-token"
        assert kwargs["headers"]["User-Agent"] == f"az-mgmt/{__version__}"
        assert kwargs["params"] == {"api-version": "2020-01-01"}
        assert kwargs["json"] is None
        assert kwargs["timeout"] == 12

    def test_custom_user_agent(self, mock_request) -> None:
        Pipeline(user_agent="my-tool/1.0").send("GET", URL, headers={})
        assert mock_request.call_args.kwargs["headers"]["User-Agent"] == "my-tool/1.0"

    def test_client_errors_are_not_retried(self, mock_request, make_response, sleep) -> None:
        mock_request.return_value = make_response(404, {"error": {"code": "NotFound"}})

        resp = Pipeline().send("GET", URL, headers={})

        assert resp.status_code == 404
        assert mock_request.call_count == 1
        sleep.assert_not_called()


class TestRetry:
    """Throttling, server errors and network failures are retried."""

    def test_retries_throttled_request_using_retry_after(self, mock_request, make_response, sleep) -> None:
        mock_request.side_effect = [
            make_response(429, headers={"Retry-After": "3"}),
            make_response(200, {}),
        ]

        resp = Pipeline().send("GET", URL, headers={})

        assert resp.status_code == 200
        assert mock_request.call_count == 2
        sleep.assert_called_once_with(3)

    def test_retry_after_is_capped_by_backoff_max(self, mock_request, make_response, sleep) -> None:
        mock_request.side_effect = [
            make_response(429, headers={"Retry-After": "120"}),
            make_response(200, {}),
        ]

        Pipeline(retry=RetryOptions(max_retries=3, backoff_max=5)).send("GET", URL, headers={})

        sleep.assert_called_once_with(5)

    def test_server_errors_back_off_exponentially(self, mock_request, make_response, sleep) -> None:
        mock_request.side_effect = [
            make_response(503),
            make_response(500),
            make_response(200, {}),
        ]

        resp = Pipeline().send("PUT", URL, headers={}, json={"location": "westeurope"})

        assert resp.status_code == 200
        assert sleep.call_args_list == [call(1), call(2)]
        assert mock_request.call_args.kwargs["json"] == {"location": "westeurope"}

    def test_server_error_honours_retry_after(self, mock_request, make_response, sleep) -> None:
        mock_request.side_effect = [
            make_response(503, headers={"Retry-After": "7"}),
            make_response(200, {}),
        ]

        resp = Pipeline().send("GET", URL, headers={})

        assert resp.status_code == 200
        sleep.assert_called_once_with(7)

    def test_unparseable_retry_after_falls_back_to_backoff(self, mock_request, make_response, sleep) -> None:
        mock_request.side_effect = [
            make_response(429, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}),
            make_response(200, {}),
        ]

        Pipeline().send("GET", URL, headers={})

        sleep.assert_called_once_with(1)

    def test_returns_last_response_when_retries_exhausted(self, mock_request, make_response, sleep) -> None:
        mock_request.return_value = make_response(503)

        resp = Pipeline(retry=RetryOptions(max_retries=3)).send("GET", URL, headers={})

        assert resp.status_code == 503
        assert mock_request.call_count == 3
        assert sleep.call_count == 2

    def test_connection_error_is_retried(self, mock_request, make_response, sleep) -> None:
        mock_request.side_effect = [requests.ConnectionError("reset"), make_response(200, {})]

        resp = Pipeline().send("GET", URL, headers={})

        assert resp.status_code == 200
        sleep.assert_called_once_with(1)

    def test_timeout_reraised_on_last_attempt(self, mock_request) -> None:
        mock_request.side_effect = requests.Timeout("slow")

        with pytest.raises(requests.Timeout):
            Pipeline(retry=RetryOptions(max_retries=2)).send("GET", URL, headers={})
        assert mock_request.call_count == 2

    def test_zero_retries_still_sends_once(self, mock_request) -> None:
        Pipeline(retry=RetryOptions(max_retries=0)).send("GET", URL, headers={})
        assert mock_request.call_count == 1
