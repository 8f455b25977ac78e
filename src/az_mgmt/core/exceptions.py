"""Exceptions raised by the management clients."""

from __future__ import annotations

import requests


class HttpResponseError(requests.HTTPError):
    """An ARM call returned a status the operation does not accept.

    ``error_code`` and ``message`` come from the ARM error envelope when the
    service sent one.
    """

    def __init__(
        self,
        message: str,
        *,
        response: requests.Response | None = None,
        status_code: int | None = None,
        error_code: str | None = None,
    ) -> None:
        super().__init__(message, response=response)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code

    @classmethod
    def from_response(cls, resp: requests.Response) -> HttpResponseError:
        """Build the most specific error for *resp*."""
        error_code, detail = _parse_error_body(resp)
        detail = detail or resp.reason or "Operation returned an invalid status"
        message = f"({resp.status_code}) {detail}"
        if error_code:
            message = f"({resp.status_code}) {error_code}: {detail}"

        error_cls: type[HttpResponseError] = _STATUS_ERRORS.get(resp.status_code, cls)
        return error_cls(
            message,
            response=resp,
            status_code=resp.status_code,
            error_code=error_code,
        )


class ClientAuthenticationError(HttpResponseError):
    """401/403 from ARM."""


class ResourceNotFoundError(HttpResponseError):
    """404 from ARM."""


class ResourceExistsError(HttpResponseError):
    """409 from ARM."""


class OperationFailedError(HttpResponseError):
    """A long-running operation ended in ``Failed`` or ``Canceled``."""


class DeserializationError(ValueError):
    """A response body could not be decoded into the expected model."""


_STATUS_ERRORS: dict[int, type[HttpResponseError]] = {
    401: ClientAuthenticationError,
    403: ClientAuthenticationError,
    404: ResourceNotFoundError,
    409: ResourceExistsError,
}


def _parse_error_body(resp: requests.Response) -> tuple[str | None, str | None]:
    """Return ``(code, message)`` from either ARM error shape.

    Handles ``{"error": {"code": ..., "message": ...}}`` and the flat
    ``{"code": ..., "message": ...}`` used by older providers.
    """
    try:
        data = resp.json()
    except ValueError:
        text = (resp.text or "")[:500]
        return None, text or None
    if not isinstance(data, dict):
        return None, None
    error = data.get("error")
    if isinstance(error, dict):
        data = error
    code = data.get("code")
    message = data.get("message")
    return (str(code) if code else None), (str(message) if message else None)
