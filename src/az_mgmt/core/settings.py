"""Client settings loaded from environment variables."""

import logging
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings

from az_mgmt.core._auth import CLOUD_ENDPOINTS

logger = logging.getLogger(__name__)


class ClientSettings(BaseSettings):
    """Configuration shared by every management client.

    Values are read from environment variables (case-insensitive) and
    optionally from a ``.env`` file in the working directory.
    """

    arm_cloud: Literal["public", "china", "usgovernment", "germany"] = "public"
    arm_endpoint: str = ""
    arm_tenant_id: str = ""
    arm_subscription_id: str = ""

    arm_timeout: int = 30
    arm_max_retries: int = 3
    arm_retry_backoff_max: int = 8

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @model_validator(mode="after")
    def _validate_endpoint(self) -> "ClientSettings":
        if self.arm_endpoint and not self.arm_endpoint.startswith("https://"):
            raise ValueError(
                f"ARM_ENDPOINT must be an https:// URL, got {self.arm_endpoint!r}. "
                "Leave it empty to use the endpoint of ARM_CLOUD."
            )
        if self.arm_max_retries < 1:
            raise ValueError("ARM_MAX_RETRIES must be at least 1")
        return self

    @property
    def resolved_endpoint(self) -> str:
        """Explicit endpoint if set, otherwise the endpoint of ``arm_cloud``."""
        return (self.arm_endpoint or CLOUD_ENDPOINTS[self.arm_cloud]).rstrip("/")
