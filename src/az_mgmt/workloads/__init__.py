"""Microsoft.Workloads management client (api-version 2021-12-01-preview)."""

from az_mgmt.core._client import ClientBuilder  # noqa: F401
from az_mgmt.workloads import models  # noqa: F401
from az_mgmt.workloads._client import WorkloadsClient  # noqa: F401
from az_mgmt.workloads.operations import API_VERSION  # noqa: F401

Client = WorkloadsClient
