"""
Shared fixtures for the proxy tests.

Fixtures:
    - client: FastAPI TestClient bound to the proxy app
    - fake_remover: stand-in BackgroundRemover injected via dependency override
    - png_bytes / jpeg_bytes: small binary payloads
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from removebg_proxy import config
from removebg_proxy.api import app, get_remover

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256))
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00\x10JFIF" + b"\x7f" * 64


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the host environment and the settings cache."""
    for name in ("REMOVEBG_API_KEY", "REMOVEBG_API_URL", "REMOVEBG_SIZE", "MAX_UPLOAD_BYTES", "REQUEST_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def jpeg_bytes():
    return JPEG_BYTES


@pytest.fixture
def fake_remover(png_bytes):
    remover = MagicMock()
    remover.remove.return_value = png_bytes
    app.dependency_overrides[get_remover] = lambda: remover
    yield remover
    app.dependency_overrides.pop(get_remover, None)


@pytest.fixture
def client():
    return TestClient(app)
