"""Tests for long-running operation polling."""

from unittest.mock import call

import pytest

from az_mgmt.core import (
    OperationFailedError,
    RequestBuilder,
    Resource,
    ResourceExistsError,
    ResourceNotFoundError,
)

API = "2020-01-01"
RESOURCE_URL = "https://management.azure.com/subscriptions/s/resourceGroups/rg/providers/Microsoft.Cdn/profiles/p1"
ASYNC_URL = "https://management.azure.com/subscriptions/s/providers/Microsoft.Cdn/operationresults/op-1"
LOCATION_URL = "https://management.azure.com/subscriptions/s/providers/Microsoft.Cdn/locations/op-1"


def _builder(client, method: str) -> RequestBuilder:
    return RequestBuilder(
        client,
        method,
        "/subscriptions/{s}/resourceGroups/{rg}/providers/Microsoft.Cdn/profiles/{name}",
        api_version=API,
        path_params={"s": "s", "rg": "rg", "name": "p1"},
        expected=(200, 201, 202, 204),
        response_type=Resource,
        long_running=True,
    )


class TestAsyncOperationHeader:
    """Azure-AsyncOperation status monitors."""

    def test_put_polls_until_succeeded_then_gets_resource(
        self, arm_client, mock_request, make_response, sleep
    ) -> None:
        mock_request.side_effect = [
            make_response(201, {"name": "p1"}, headers={"Azure-AsyncOperation": ASYNC_URL, "Retry-After": "2"}),
            make_response(200, {"status": "InProgress"}),
            make_response(200, {"status": "Succeeded"}),
            make_response(200, {"name": "p1", "properties": {"provisioningState": "Succeeded"}}),
        ]

        poller = _builder(arm_client, "PUT").begin()
        assert poller.status() == "InProgress"
        assert not poller.done()

        result = poller.result()

        assert result.name == "p1"
        assert poller.status() == "Succeeded"
        assert poller.done()
        urls = [c.args[1] for c in mock_request.call_args_list]
        assert urls == [RESOURCE_URL, ASYNC_URL, ASYNC_URL, RESOURCE_URL]
        assert mock_request.call_args_list[1].kwargs["params"] is None
        assert mock_request.call_args_list[3].kwargs["params"] == {"api-version": API}
        # first wait honours Retry-After, later ones use the default interval
        assert sleep.call_args_list == [call(2), call(5)]

    def test_failed_operation_raises(self, arm_client, mock_request, make_response) -> None:
        mock_request.side_effect = [
            make_response(201, headers={"Azure-AsyncOperation": ASYNC_URL}),
            make_response(
                200,
                {"status": "Failed", "error": {"code": "BadRequest", "message": "Origin host name is invalid"}},
            ),
        ]
        poller = _builder(arm_client, "PUT").begin()

        with pytest.raises(OperationFailedError) as exc_info:
            poller.result()

        assert exc_info.value.error_code == "BadRequest"
        assert "Origin host name is invalid" in exc_info.value.message
        assert poller.status() == "Failed"

    def test_failure_is_raised_again_on_later_calls(self, arm_client, mock_request, make_response) -> None:
        mock_request.side_effect = [
            make_response(202, headers={"Azure-AsyncOperation": ASYNC_URL}),
            make_response(200, {"status": "Failed", "error": {"code": "Conflict", "message": "in use"}}),
        ]
        poller = _builder(arm_client, "PUT").begin()

        with pytest.raises(OperationFailedError) as first:
            poller.result()
        with pytest.raises(OperationFailedError) as second:
            poller.result()
        with pytest.raises(OperationFailedError):
            poller.wait()

        assert second.value is first.value
        assert poller.done()
        assert mock_request.call_count == 2

    def test_canceled_operation_raises(self, arm_client, mock_request, make_response) -> None:
        mock_request.side_effect = [
            make_response(202, headers={"Azure-AsyncOperation": ASYNC_URL}),
            make_response(200, {"status": "Canceled"}),
        ]
        with pytest.raises(OperationFailedError, match="Canceled"):
            _builder(arm_client, "DELETE").begin().wait()

    def test_post_with_location_fetches_result_from_location(
        self, arm_client, mock_request, make_response
    ) -> None:
        mock_request.side_effect = [
            make_response(202, headers={"Azure-AsyncOperation": ASYNC_URL, "Location": LOCATION_URL}),
            make_response(200, {"status": "Succeeded"}),
            make_response(200, {"name": "from-location"}),
        ]

        result = _builder(arm_client, "POST").begin().result()

        assert result.name == "from-location"
        assert mock_request.call_args_list[2].args[1] == LOCATION_URL

    def test_explicit_polling_interval(self, arm_client, mock_request, make_response, sleep) -> None:
        mock_request.side_effect = [
            make_response(202, headers={"Azure-AsyncOperation": ASYNC_URL}),
            make_response(200, {"status": "Succeeded"}),
        ]

        _builder(arm_client, "DELETE").begin(polling_interval=0).wait()

        sleep.assert_called_once_with(0)

    def test_polling_error_status_raises_typed_error(self, arm_client, mock_request, make_response) -> None:
        mock_request.side_effect = [
            make_response(202, headers={"Azure-AsyncOperation": ASYNC_URL}),
            make_response(404, {"error": {"code": "NotFound", "message": "gone"}}),
        ]
        with pytest.raises(ResourceNotFoundError):
            _builder(arm_client, "DELETE").begin().wait()


class TestLocationHeader:
    """Location polling ends on the first non-202 response."""

    def test_delete_returns_none(self, arm_client, mock_request, make_response) -> None:
        mock_request.side_effect = [
            make_response(202, headers={"Location": LOCATION_URL}),
            make_response(202, headers={"Location": LOCATION_URL}),
            make_response(204),
        ]

        poller = _builder(arm_client, "DELETE").begin()

        assert poller.result() is None
        assert poller.status() == "Succeeded"
        assert mock_request.call_count == 3

    def test_post_returns_location_body(self, arm_client, mock_request, make_response) -> None:
        mock_request.side_effect = [
            make_response(202, headers={"Location": LOCATION_URL}),
            make_response(200, {"name": "done"}),
        ]

        assert _builder(arm_client, "POST").begin().result().name == "done"

    def test_patch_gets_resource_after_location_completes(
        self, arm_client, mock_request, make_response
    ) -> None:
        mock_request.side_effect = [
            make_response(202, headers={"Location": LOCATION_URL}),
            make_response(200),
            make_response(200, {"name": "p1", "tags": {"env": "prod"}}),
        ]

        result = _builder(arm_client, "PATCH").begin().result()

        assert result.name == "p1"
        assert mock_request.call_args_list[2].args[1] == RESOURCE_URL


class TestSynchronousCompletion:
    """An initial response without polling headers is already final."""

    def test_result_is_initial_body(self, arm_client, mock_request, make_response, sleep) -> None:
        mock_request.return_value = make_response(200, {"name": "p1"})

        poller = _builder(arm_client, "PUT").begin()

        assert poller.done()
        assert poller.status() == "Succeeded"
        assert poller.result().name == "p1"
        assert mock_request.call_count == 1
        sleep.assert_not_called()

    def test_initial_error_raises_before_polling(self, arm_client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(409, {"error": {"code": "Conflict", "message": "busy"}})
        with pytest.raises(ResourceExistsError, match="Conflict"):
            _builder(arm_client, "PUT").begin()
