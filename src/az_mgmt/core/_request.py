"""Per-operation request builder and response wrapper."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from datetime import datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, quote, urljoin, urlsplit

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from az_mgmt.core._pagination import Pageable
from az_mgmt.core.exceptions import DeserializationError, HttpResponseError

if TYPE_CHECKING:
    from az_mgmt.core._client import ArmClient
    from az_mgmt.core._polling import LROPoller

logger = logging.getLogger(__name__)

API_VERSION_PARAM = "api-version"


@lru_cache(maxsize=512)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def deserialize(response_type: Any, data: Any) -> Any:
    """Validate decoded JSON *data* into *response_type*."""
    try:
        return _adapter(response_type).validate_python(data)
    except ValidationError as exc:
        raise DeserializationError(f"Response does not match {response_type!r}: {exc}") from exc


def serialize(body: Any) -> Any:
    """Turn a request body into JSON-ready data."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, list):
        return [serialize(item) for item in body]
    return body


class Response:
    """An HTTP response paired with the model its body decodes to."""

    def __init__(self, raw: requests.Response, response_type: Any = None) -> None:
        self.raw = raw
        self.response_type = response_type

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.raw.headers

    def json(self) -> Any:
        """Return the decoded JSON body, or ``None`` for an empty body."""
        if not self.raw.content:
            return None
        try:
            return self.raw.json()
        except ValueError as exc:
            raise DeserializationError(
                f"Response body is not valid JSON (status {self.status_code})"
            ) from exc

    def into_body(self) -> Any:
        """Deserialize the body into the operation's response model."""
        data = self.json()
        if data is None or self.response_type is None:
            return None
        return deserialize(self.response_type, data)


class RequestBuilder:
    """Captured parameters for a single REST operation.

    Nothing is sent until :meth:`send`, :meth:`into_body`,
    :meth:`into_pageable` or :meth:`begin` is called.
    """

    def __init__(
        self,
        client: ArmClient,
        method: str,
        path: str,
        *,
        api_version: str,
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
        expected: Collection[int] = (200,),
        response_type: Any = None,
        skip_quote: Collection[str] = (),
        long_running: bool = False,
    ) -> None:
        self.client = client
        self.method = method
        self.path = path
        self.api_version = api_version
        self.path_params = dict(path_params or {})
        self.query = dict(query or {})
        self.body = body
        self.expected = frozenset(expected)
        self.response_type = response_type
        self.skip_quote = frozenset(skip_quote)
        self.long_running = long_running

        # Fail before any I/O on a missing path segment.
        for name, value in self.path_params.items():
            if value is None or str(value).strip("/") == "":
                raise ValueError(f"{name} must be a non-empty string")

    def __repr__(self) -> str:
        return f"<RequestBuilder {self.method} {self.path}>"

    @property
    def url(self) -> str:
        """Absolute request URL, without the query string."""
        encoded: dict[str, str] = {}
        for name, value in self.path_params.items():
            if name in self.skip_quote:
                encoded[name] = quote(str(value).strip("/"), safe="/:")
            else:
                encoded[name] = quote(str(value), safe="")
        return self.client.endpoint + self.path.format(**encoded)

    @property
    def params(self) -> dict[str, str]:
        """Query parameters: ``api-version`` first, then the set optionals."""
        params = {API_VERSION_PARAM: self.api_version}
        for name, value in self.query.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, list | tuple):
                value = ",".join(str(v) for v in value)
            params[name] = str(value)
        return params

    def _check(self, resp: requests.Response) -> requests.Response:
        if resp.status_code not in self.expected:
            logger.debug("%s %s -> unexpected status %s", self.method, resp.url, resp.status_code)
            raise HttpResponseError.from_response(resp)
        return resp

    def send(self) -> Response:
        """Send the request and return the raw response wrapper."""
        resp = self.client.send(
            self.method,
            self.url,
            params=self.params,
            json=serialize(self.body),
        )
        return Response(self._check(resp), self.response_type)

    def into_body(self) -> Any:
        """Send the request and return the deserialized response body."""
        return self.send().into_body()

    def _next_page(self, continuation: str) -> Any:
        url = urljoin(self.client.endpoint + "/", continuation)
        query = parse_qs(urlsplit(url).query)
        params = None if API_VERSION_PARAM in query else {API_VERSION_PARAM: self.api_version}
        resp = self._check(self.client.send(self.method, url, params=params))
        return Response(resp, self.response_type).into_body()

    def into_pageable(self) -> Pageable:
        """Return a lazy iterator over every page of a list operation."""

        def make_request(continuation: str | None) -> Any:
            if continuation is None:
                return self.into_body()
            return self._next_page(continuation)

        return Pageable(make_request)

    def begin(self, polling_interval: float | None = None) -> LROPoller:
        """Start a long-running operation and return a poller for it."""
        from az_mgmt.core._polling import LROPoller

        if not self.long_running:
            raise TypeError(f"{self.method} {self.path} is not a long-running operation")
        return LROPoller(self, self.send(), polling_interval=polling_interval)
