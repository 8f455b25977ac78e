"""HTTP pipeline: transport plus retry on throttling and transient failures."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import requests

from az_mgmt import __version__

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryOptions:
    """How many attempts to make and the cap on server-requested waits."""

    max_retries: int = 3
    backoff_max: int = 8


class Pipeline:
    """Send ARM requests with retry/back-off on 429, 5xx and network errors.

    When every attempt is throttled or fails server-side the last response
    is returned so the caller can turn it into a typed error.
    """

    def __init__(
        self,
        retry: RetryOptions | None = None,
        timeout: int = 30,
        user_agent: str | None = None,
    ) -> None:
        self.retry = retry or RetryOptions()
        self.timeout = timeout
        self.user_agent = user_agent or f"az-mgmt/{__version__}"

    def _retry_after(self, resp: requests.Response, attempt: int) -> int:
        retry_header = resp.headers.get("Retry-After")
        if retry_header:
            try:
                return min(int(retry_header), self.retry.backoff_max)
            except (TypeError, ValueError):
                pass
        return 2**attempt  # 1, 2, 4

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> requests.Response:
        headers = {**headers, "User-Agent": self.user_agent}
        max_retries = max(self.retry.max_retries, 1)
        attempt = 0
        while True:
            logger.debug("%s %s (attempt %s/%s)", method, url, attempt + 1, max_retries)
            try:
                resp = requests.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    json=json,
                    timeout=self.timeout,
                )
            except (requests.Timeout, requests.ConnectionError):
                if attempt < max_retries - 1:
                    wait_time = 2**attempt
                    logger.warning(
                        "%s %s failed, retrying in %ss (attempt %s/%s)",
                        method,
                        url,
                        wait_time,
                        attempt + 1,
                        max_retries,
                    )
                    time.sleep(wait_time)
                    attempt += 1
                    continue
                raise

            if resp.status_code == 429 or resp.status_code >= 500:
                if attempt == max_retries - 1:
                    return resp
                wait_time = self._retry_after(resp, attempt)
                logger.warning(
                    "%s %s returned %s, retrying in %ss (attempt %s/%s)",
                    method,
                    url,
                    resp.status_code,
                    wait_time,
                    attempt + 1,
                    max_retries,
                )
                time.sleep(wait_time)
                attempt += 1
                continue
            return resp
