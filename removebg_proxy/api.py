"""
FastAPI layer in front of the remove.bg API.

Endpoints:
 - GET /health
 - POST /api/remove-background
"""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.datastructures import UploadFile

from . import config
from .encoding import to_data_uri
from .errors import NO_IMAGE_MESSAGE, InternalError, ProxyError, UpstreamError, ValidationError
from .remover import BackgroundRemover, RemoveBgClient

settings = config.get_settings()
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

IMAGE_FIELD = "image"

app = FastAPI(title="Background Removal Proxy", version="0.1.0")


class RemoveBackgroundResponse(BaseModel):
    image: str


@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def get_remover() -> BackgroundRemover:
    return RemoveBgClient.from_settings()


def _too_large(limit: int) -> ValidationError:
    return ValidationError(f"Image exceeds maximum upload size of {limit} bytes", status_code=413)


async def _read_image(request: Request) -> bytes:
    limit = config.get_settings().max_upload_bytes
    form = await request.form()
    try:
        upload = form.get(IMAGE_FIELD)
        if not isinstance(upload, UploadFile):
            raise ValidationError(NO_IMAGE_MESSAGE)
        # Spooled size is known up front; reject before loading into memory.
        if limit and upload.size is not None and upload.size > limit:
            raise _too_large(limit)
        image_bytes = await upload.read()
    finally:
        await form.close()

    if limit and len(image_bytes) > limit:
        raise _too_large(limit)
    return image_bytes


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/remove-background", response_model=RemoveBackgroundResponse)
async def remove_background(request: Request, remover: BackgroundRemover = Depends(get_remover)):
    try:
        image_bytes = await _read_image(request)
        # requests is blocking; keep it off the event loop.
        png_bytes = await run_in_threadpool(remover.remove, image_bytes)
        image_uri = to_data_uri(png_bytes)
    except (ValidationError, UpstreamError):
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error removing background: %s", exc)
        raise InternalError() from exc

    return RemoveBackgroundResponse(image=image_uri)
