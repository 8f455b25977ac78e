"""Polling for ARM long-running operations."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from az_mgmt.core._request import API_VERSION_PARAM, Response
from az_mgmt.core.exceptions import HttpResponseError, OperationFailedError

if TYPE_CHECKING:
    from az_mgmt.core._request import RequestBuilder

logger = logging.getLogger(__name__)

DEFAULT_POLLING_INTERVAL = 5
_TERMINAL_OK = {"succeeded"}
_TERMINAL_FAILED = {"failed", "canceled", "cancelled"}


class LROPoller:
    """Track an operation that ARM accepted asynchronously.

    Prefers the ``Azure-AsyncOperation`` status monitor and falls back to
    the ``Location`` header.  An initial response with neither header is
    already final.
    """

    def __init__(
        self,
        builder: RequestBuilder,
        initial: Response,
        polling_interval: float | None = None,
    ) -> None:
        self._builder = builder
        self._initial = initial
        self._interval = polling_interval
        self._final: Response | None = None
        self._error: OperationFailedError | None = None
        self._status = "InProgress"

        headers = initial.headers
        self._async_url = headers.get("Azure-AsyncOperation")
        self._location_url = headers.get("Location")
        if not self._async_url and not self._location_url:
            self._status = "Succeeded"
            self._final = initial

    def status(self) -> str:
        return self._status

    def done(self) -> bool:
        return self._status.lower() in _TERMINAL_OK | _TERMINAL_FAILED

    def _sleep(self, resp: Response) -> None:
        delay: float = self._interval if self._interval is not None else DEFAULT_POLLING_INTERVAL
        retry_after = resp.headers.get("Retry-After")
        if retry_after:
            try:
                delay = int(retry_after)
            except (TypeError, ValueError):
                pass
        time.sleep(delay)

    def _get(self, url: str, params: dict[str, str] | None = None) -> Response:
        raw = self._builder.client.send("GET", url, params=params)
        if raw.status_code >= 400:
            raise HttpResponseError.from_response(raw)
        return Response(raw, self._builder.response_type)

    def _get_resource(self) -> Response:
        return self._get(self._builder.url, {API_VERSION_PARAM: self._builder.api_version})

    def _poll_async_operation(self, url: str) -> None:
        last: Response = self._initial
        while True:
            self._sleep(last)
            last = self._get(url)
            body = last.json() or {}
            self._status = str(body.get("status") or "InProgress")
            logger.debug("Operation %s status: %s", url, self._status)
            if self._status.lower() in _TERMINAL_FAILED:
                error = body.get("error") or {}
                code = error.get("code")
                self._error = OperationFailedError(
                    f"Long-running operation {self._status}: "
                    f"{code or ''} {error.get('message', '')}".strip(),
                    response=last.raw,
                    status_code=last.status_code,
                    error_code=code,
                )
                raise self._error
            if self._status.lower() in _TERMINAL_OK:
                return

    def _poll_location(self, url: str) -> Response:
        last: Response = self._initial
        while True:
            self._sleep(last)
            last = self._get(url)
            if last.status_code != 202:
                self._status = "Succeeded"
                return last

    def wait(self) -> None:
        """Block until the operation reaches a terminal state."""
        if self._error is not None:
            raise self._error
        if self.done():
            return
        method = self._builder.method
        if self._async_url:
            self._poll_async_operation(self._async_url)
            if method in ("PUT", "PATCH"):
                self._final = self._get_resource()
            elif method == "POST" and self._location_url:
                self._final = self._get(self._location_url)
        elif self._location_url:
            location_result = self._poll_location(self._location_url)
            if method in ("PUT", "PATCH"):
                self._final = self._get_resource()
            else:
                self._final = location_result

    def result(self) -> Any:
        """Wait for completion and return the deserialized final body."""
        self.wait()
        if self._final is None or self._builder.method == "DELETE":
            return None
        return self._final.into_body()
