"""Helpers for turning base64 image payloads into displayable forms."""

import base64
import io
import logging
import time
import uuid
from pathlib import Path

from PIL import Image

from .models import GenerationResult

logger = logging.getLogger(__name__)


def decode_image(image_b64: str) -> Image.Image:
    """Decode a base64 PNG payload into a PIL image.

    Raises:
        ValueError: If the payload is not valid base64 image data
    """
    try:
        raw = base64.b64decode(image_b64, validate=True)
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (ValueError, OSError) as e:
        raise ValueError(f"Could not decode image payload: {e}") from e
    return image


def save_download(result: GenerationResult, directory: Path) -> Path:
    """Write the result's PNG bytes to ``jaguar-<epoch ms>-<token>.png``.

    The random token keeps files from concurrent sessions apart when they
    land in the same millisecond.

    Args:
        result: Generation result holding the base64 image
        directory: Target directory (created if missing)

    Returns:
        Path of the written file
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"jaguar-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}.png"
    with path.open("xb") as f:
        f.write(base64.b64decode(result.image))
    logger.info(f"Saved download file: {path}")
    return path
