"""Image upload endpoint."""

import logging
import uuid
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from watchlist.api.dependencies import CurrentSession, get_current_session
from watchlist.config import get_settings
from watchlist.exceptions import BadRequestError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/upload",
    tags=["upload"],
    dependencies=[Depends(get_current_session)],
)

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

UPLOAD_URL_PREFIX = "/uploads"


@router.post("/image")
async def upload_image(
    image: Annotated[UploadFile, File(description="Image (JPEG, PNG, GIF, or WebP)")],
    session: CurrentSession,
):
    """Store an uploaded image and return the URL it is served from.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    settings = get_settings()

    extension = ALLOWED_IMAGE_TYPES.get(image.content_type or "")
    if extension is None:
        raise BadRequestError(
            f"Invalid file type. Allowed types: {', '.join(sorted(ALLOWED_IMAGE_TYPES))}"
        )

    # Read one byte past the limit so oversize files are detected without reading them fully
    data = await image.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise BadRequestError(
            f"File too large. Maximum size is {settings.max_upload_bytes // (1024 * 1024)}MB."
        )

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    filename = f"{uuid.uuid4().hex}{extension}"
    (upload_dir / filename).write_bytes(data)

    logger.info(f"User {session.id} uploaded {filename} ({len(data)} bytes)")
    return {"imageUrl": f"{UPLOAD_URL_PREFIX}/{filename}"}
