"""
Background-removal providers.

The proxy only depends on the `BackgroundRemover` protocol, so the hosted
provider can be swapped without touching request handling. `RemoveBgClient`
is the remove.bg implementation:
 - sends the image as base64 inside a JSON body,
 - authenticates with the `X-Api-Key` header,
 - makes a single attempt and returns the raw PNG bytes.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

import requests
from pydantic import SecretStr

from . import config
from .encoding import encode_base64
from .errors import UpstreamError

logger = logging.getLogger(__name__)


class BackgroundRemover(Protocol):
    def remove(self, image_bytes: bytes) -> bytes:
        """Return a PNG cut-out of `image_bytes`."""
        ...


class RemoveBgClient:
    """Client for the remove.bg `removebg` endpoint."""

    def __init__(
        self,
        api_url: str,
        size: str = "regular",
        timeout: Optional[float] = None,
        api_key_loader: Callable[[], Optional[SecretStr]] = config.load_api_key,
    ):
        self.api_url = api_url
        self.size = size
        self.timeout = timeout
        self._api_key_loader = api_key_loader

    @classmethod
    def from_settings(cls, settings: Optional[config.Settings] = None) -> "RemoveBgClient":
        settings = settings or config.get_settings()
        return cls(
            api_url=settings.removebg_api_url,
            size=settings.removebg_size,
            timeout=settings.request_timeout_seconds,
        )

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        api_key = self._api_key_loader()
        if api_key is None:
            # Left to the provider to reject with its own auth error.
            logger.warning("REMOVEBG_API_KEY is not set; sending request without credentials")
        else:
            headers["X-Api-Key"] = api_key.get_secret_value()
        return headers

    def remove(self, image_bytes: bytes) -> bytes:
        """
        Remove the background of an image.

        Raises:
            UpstreamError: when remove.bg answers with a non-success status.
            requests.RequestException: on transport failures.
        """
        payload = {"image_file_b64": encode_base64(image_bytes), "size": self.size}
        logger.info("Calling remove.bg size=%s input_bytes=%d", self.size, len(image_bytes))
        resp = requests.post(self.api_url, json=payload, headers=self._headers(), timeout=self.timeout)
        if not 200 <= resp.status_code < 300:
            logger.warning("remove.bg returned status=%s", resp.status_code)
            raise UpstreamError(resp.status_code, resp.text)
        return resp.content
