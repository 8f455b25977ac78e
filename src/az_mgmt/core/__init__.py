"""Shared runtime for the management clients.

Re-exports the public names so that provider packages and callers can
``from az_mgmt.core import X`` without reaching into private modules.
"""

# -- Auth & constants -------------------------------------------------------
from az_mgmt.core._auth import (  # noqa: F401
    AZURE_CHINA_CLOUD,
    AZURE_GERMAN_CLOUD,
    AZURE_PUBLIC_CLOUD,
    AZURE_US_GOVERNMENT,
    CLOUD_ENDPOINTS,
    _get_headers,
    default_scopes,
    token_claims,
)

# -- Client plumbing ---------------------------------------------------------
from az_mgmt.core._client import (  # noqa: F401
    DEFAULT_ENDPOINT,
    ArmClient,
    ClientBuilder,
    SubClient,
)

# -- Models ------------------------------------------------------------------
from az_mgmt.core._models import (  # noqa: F401
    ArmModel,
    CreatedByType,
    ErrorDetail,
    ErrorResponse,
    ListResult,
    Operation,
    OperationDisplay,
    OperationListResult,
    ProxyResource,
    Resource,
    SubResource,
    SystemData,
    TrackedResource,
    as_model,
    discriminated,
    open_enum,
)

# -- Pagination & polling ----------------------------------------------------
from az_mgmt.core._pagination import Pageable  # noqa: F401
from az_mgmt.core._pipeline import Pipeline, RetryOptions  # noqa: F401
from az_mgmt.core._polling import LROPoller  # noqa: F401
from az_mgmt.core._request import RequestBuilder, Response  # noqa: F401

# -- Errors & settings -------------------------------------------------------
from az_mgmt.core.exceptions import (  # noqa: F401
    ClientAuthenticationError,
    DeserializationError,
    HttpResponseError,
    OperationFailedError,
    ResourceExistsError,
    ResourceNotFoundError,
)
from az_mgmt.core.settings import ClientSettings  # noqa: F401
