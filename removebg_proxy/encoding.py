"""Base64 and data URI helpers."""

from __future__ import annotations

import base64

PNG_DATA_URI_PREFIX = "data:image/png;base64,"


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def to_data_uri(data: bytes, mime_type: str = "image/png") -> str:
    """Wrap raw bytes as a `data:<mime>;base64,<payload>` string."""
    return f"data:{mime_type};base64,{encode_base64(data)}"


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """
    Split a base64 data URI into its MIME type and decoded bytes.

    Raises:
        ValueError: when the string is not a base64 data URI.
    """
    if not uri.startswith("data:"):
        raise ValueError("Not a data URI")
    header, sep, payload = uri[len("data:") :].partition(",")
    if not sep or not header.endswith(";base64"):
        raise ValueError("Only base64 data URIs are supported")
    mime_type = header[: -len(";base64")] or "text/plain"
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except ValueError as exc:
        raise ValueError("Invalid base64 payload") from exc
