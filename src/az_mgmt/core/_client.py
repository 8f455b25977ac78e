"""Base management client, its fluent builder, and the sub-client base."""

from __future__ import annotations

import logging
from typing import Any, Generic, Self, TypeVar

import requests

from az_mgmt.core import _auth
from az_mgmt.core._auth import AZURE_PUBLIC_CLOUD, _get_headers, default_scopes
from az_mgmt.core._pipeline import Pipeline, RetryOptions
from az_mgmt.core._request import RequestBuilder
from az_mgmt.core.settings import ClientSettings

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = AZURE_PUBLIC_CLOUD

C = TypeVar("C", bound="ArmClient")


class ArmClient:
    """Endpoint, credential, scopes and pipeline shared by sub-clients."""

    def __init__(
        self,
        endpoint: str,
        credential: Any,
        scopes: list[str],
        pipeline: Pipeline,
        tenant_id: str | None = None,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.credential = credential
        self.scopes = scopes
        self.pipeline = pipeline
        self.tenant_id = tenant_id

    def __repr__(self) -> str:
        return f"<{type(self).__name__} endpoint={self.endpoint!r}>"

    @classmethod
    def builder(cls, credential: Any = None) -> ClientBuilder[Self]:
        """Start configuring a client; *credential* defaults to ``DefaultAzureCredential``."""
        return ClientBuilder(cls, credential)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        credential: Any = None,
    ) -> Self:
        """Build a client from environment-driven :class:`ClientSettings`."""
        settings = settings or ClientSettings()
        builder = (
            cls.builder(credential)
            .endpoint(settings.resolved_endpoint)
            .retry(RetryOptions(settings.arm_max_retries, settings.arm_retry_backoff_max))
            .timeout(settings.arm_timeout)
        )
        if settings.arm_tenant_id:
            builder = builder.tenant_id(settings.arm_tenant_id)
        return builder.build()

    def _headers(self) -> dict[str, str]:
        return _get_headers(self.credential, self.scopes, self.tenant_id)

    def send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> requests.Response:
        """Authenticate and send one request through the pipeline."""
        return self.pipeline.send(method, url, headers=self._headers(), params=params, json=json)


class ClientBuilder(Generic[C]):
    """Fluent configuration for an :class:`ArmClient` subclass."""

    def __init__(self, client_cls: type[C], credential: Any = None) -> None:
        self._client_cls = client_cls
        self._credential = credential
        self._endpoint: str | None = None
        self._scopes: list[str] | None = None
        self._retry = RetryOptions()
        self._timeout = 30
        self._tenant_id: str | None = None

    def endpoint(self, endpoint: str) -> Self:
        self._endpoint = endpoint
        return self

    def scopes(self, *scopes: str) -> Self:
        self._scopes = list(scopes)
        return self

    def retry(self, retry: RetryOptions | int) -> Self:
        """Set retry options, or just the number of attempts."""
        self._retry = RetryOptions(max_retries=retry) if isinstance(retry, int) else retry
        return self

    def timeout(self, seconds: int) -> Self:
        self._timeout = seconds
        return self

    def tenant_id(self, tenant_id: str) -> Self:
        self._tenant_id = tenant_id
        return self

    def build(self) -> C:
        endpoint = (self._endpoint or DEFAULT_ENDPOINT).rstrip("/")
        scopes = self._scopes or default_scopes(endpoint)
        credential = self._credential if self._credential is not None else _auth.credential
        pipeline = Pipeline(retry=self._retry, timeout=self._timeout)
        logger.debug("Building %s for %s", self._client_cls.__name__, endpoint)
        return self._client_cls(endpoint, credential, scopes, pipeline, self._tenant_id)


class SubClient:
    """Groups the operations of one resource type."""

    API_VERSION: str = ""

    def __init__(self, client: ArmClient) -> None:
        self._client = client

    def _request(self, method: str, path: str, **kwargs: Any) -> RequestBuilder:
        kwargs.setdefault("api_version", self.API_VERSION)
        return RequestBuilder(self._client, method, path, **kwargs)
