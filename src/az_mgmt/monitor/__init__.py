"""Azure Monitor (Microsoft.Insights) management client."""

from az_mgmt.core._client import ClientBuilder  # noqa: F401
from az_mgmt.monitor import models  # noqa: F401
from az_mgmt.monitor._client import MonitorClient  # noqa: F401

Client = MonitorClient
