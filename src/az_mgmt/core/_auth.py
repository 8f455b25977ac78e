"""Authentication helpers for Azure ARM API calls."""

from __future__ import annotations

import base64
import json
import logging
from typing import Any

from azure.identity import DefaultAzureCredential

logger = logging.getLogger(__name__)

AZURE_PUBLIC_CLOUD = "https://management.azure.com"
AZURE_CHINA_CLOUD = "https://management.chinacloudapi.cn"
AZURE_US_GOVERNMENT = "https://management.usgovcloudapi.net"
AZURE_GERMAN_CLOUD = "https://management.microsoftazure.de"

CLOUD_ENDPOINTS = {
    "public": AZURE_PUBLIC_CLOUD,
    "china": AZURE_CHINA_CLOUD,
    "usgovernment": AZURE_US_GOVERNMENT,
    "germany": AZURE_GERMAN_CLOUD,
}

credential = DefaultAzureCredential()


def default_scopes(endpoint: str) -> list[str]:
    """Return the ``.default`` OAuth scope for an ARM *endpoint*."""
    return [f"{endpoint.rstrip('/')}/.default"]


def _get_headers(
    token_credential: Any,
    scopes: list[str],
    tenant_id: str | None = None,
) -> dict[str, str]:
    """Return authorization headers using *token_credential*.

    When *tenant_id* is provided the token is scoped to that tenant.
    """
    kwargs: dict[str, str] = {}
    if tenant_id:
        kwargs["tenant_id"] = tenant_id
    token = token_credential.get_token(" ".join(scopes), **kwargs)
    return {
        "Authorization": f"Bearer {token.token}",
        "Content-Type": "application/json",
    }


def token_claims(token_credential: Any, scopes: list[str]) -> dict[str, Any]:
    """Decode the claims of the current access token.

    The signature is not verified; this is only used to show the caller
    which tenant and principal a credential resolves to.
    """
    token = token_credential.get_token(" ".join(scopes))
    try:
        payload = token.token.split(".")[1]
        payload += "=" * (-len(payload) % 4)
        claims: dict[str, Any] = json.loads(base64.urlsafe_b64decode(payload))
    except (IndexError, ValueError):
        logger.debug("Access token is not a decodable JWT")
        return {}
    return claims
