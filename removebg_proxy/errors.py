"""Errors surfaced to callers of the proxy as `{"error": message}` bodies."""

from __future__ import annotations

NO_IMAGE_MESSAGE = "No image provided"
UPSTREAM_PREFIX = "Remove.bg API error: "
INTERNAL_MESSAGE = "Failed to remove background"


class ProxyError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ProxyError):
    """Missing or unacceptable input; safe to show to the caller."""

    status_code = 400


class UpstreamError(ProxyError):
    """The removal service answered with a non-success status."""

    def __init__(self, status_code: int, upstream_text: str):
        super().__init__(f"{UPSTREAM_PREFIX}{upstream_text}", status_code=status_code)
        self.upstream_text = upstream_text


class InternalError(ProxyError):
    """Any other failure. The message is fixed so details never leak."""

    status_code = 500

    def __init__(self) -> None:
        super().__init__(INTERNAL_MESSAGE)
