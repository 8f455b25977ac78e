"""Shared test fixtures for az-mgmt tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from http import HTTPStatus
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

ENDPOINT = "https://management.azure.com"


@pytest.fixture(autouse=True)
def _mock_credential():
    """Prevent real Azure credential calls in every test."""
    mock_token = MagicMock()
    mock_token.token = "fake-token"
    with patch("az_mgmt.core._auth.credential") as cred:
        cred.get_token.return_value = mock_token
        yield cred


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Isolate settings from the developer's ARM_* variables and .env file."""
    for name in (
        "ARM_CLOUD",
        "ARM_ENDPOINT",
        "ARM_TENANT_ID",
        "ARM_SUBSCRIPTION_ID",
        "ARM_TIMEOUT",
        "ARM_MAX_RETRIES",
        "ARM_RETRY_BACKOFF_MAX",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def sleep():
    """Make retries and polling instantaneous."""
    with patch("az_mgmt.core._pipeline.time.sleep") as mock_sleep:
        yield mock_sleep


def _make_response(
    status_code: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
    url: str = ENDPOINT + "/",
    text: str | None = None,
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    if text is not None:
        resp._content = text.encode()
    elif body is None:
        resp._content = b""
    else:
        resp._content = json.dumps(body).encode()
    resp.headers.update(headers or {})
    resp.url = url
    resp.reason = HTTPStatus(status_code).phrase
    resp.encoding = "utf-8"
    return resp


@pytest.fixture()
def make_response() -> Callable[..., requests.Response]:
    """Factory for real ``requests.Response`` objects with a JSON body."""
    return _make_response


@pytest.fixture()
def mock_request():
    """Patch the transport; set ``return_value`` or ``side_effect`` per test."""
    with patch("az_mgmt.core._pipeline.requests.request") as req:
        req.return_value = _make_response(200, {})
        yield req


@pytest.fixture()
def arm_client():
    """A bare ArmClient using the mocked credential and the public endpoint."""
    from az_mgmt.core import ArmClient

    return ArmClient.builder().build()
