"""Microsoft.Cdn management client (api-version 2019-12-31)."""

from az_mgmt.cdn import models  # noqa: F401
from az_mgmt.cdn._client import CdnClient  # noqa: F401
from az_mgmt.cdn.operations import API_VERSION  # noqa: F401
from az_mgmt.core._client import ClientBuilder  # noqa: F401

Client = CdnClient
