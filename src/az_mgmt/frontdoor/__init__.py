"""Front Door management client (api-versions 2020-05-01, 2020-11-01, 2019-11-01)."""

from az_mgmt.core._client import ClientBuilder  # noqa: F401
from az_mgmt.frontdoor import models  # noqa: F401
from az_mgmt.frontdoor._client import FrontDoorClient  # noqa: F401
from az_mgmt.frontdoor.operations import (  # noqa: F401
    EXPERIMENTS_API_VERSION,
    FRONT_DOOR_API_VERSION,
    WAF_API_VERSION,
)

Client = FrontDoorClient
