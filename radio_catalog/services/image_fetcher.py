from pathlib import Path
import os
import requests
import logging
from urllib.parse import urlparse
from typing import Optional
from PIL import Image

from radio_catalog.config import HarvestSettings, USER_AGENT
from radio_catalog.models import ImageResult

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".png"
VERIFIABLE_EXTENSIONS = [".png", ".jpg", ".jpeg", ".gif", ".webp"]


def image_extension(source_url: str) -> str:
    return os.path.splitext(urlparse(source_url).path)[1].split("?")[0] or DEFAULT_EXTENSION


def create_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "image/*,*/*;q=0.8",
    })
    return session


def is_inside(local_path: Path, image_dir: Path) -> bool:
    return image_dir.resolve() in local_path.resolve().parents


def verify_image(local_path: Path) -> bool:
    """Diagnostic only: a file Pillow cannot verify is reported and kept."""
    # Only raster types Pillow can open; .ico, .svg etc. are kept as-is.
    if local_path.suffix.lower() not in VERIFIABLE_EXTENSIONS:
        return True
    try:
        with Image.open(local_path) as img:
            img.verify()
        return True
    except Exception as e:
        logger.warning(f"PIL could not verify image {local_path}: {e} (keeping file anyway)")
        return False


def fetch_and_store(
    source_url: Optional[str],
    base_filename: Optional[str],
    settings: Optional[HarvestSettings] = None,
    session: Optional[requests.Session] = None,
) -> ImageResult:
    """
    Download `source_url` into the image directory as `{base_filename}{ext}`
    and return its public reference under the image base URL.
    Failures are logged and returned as an empty result, never raised.
    """
    if not source_url or not base_filename:
        return ImageResult.failed("missing-input")

    settings = settings or HarvestSettings()
    session = session or create_session()

    image_dir = Path(settings.image_dir)
    try:
        filename = f"{base_filename}{image_extension(source_url)}"
        local_path = image_dir / filename
        inside = is_inside(local_path, image_dir)
    except ValueError as e:
        logger.warning(f"Failed image download for {base_filename}: {e}")
        return ImageResult.failed("download-failed")

    if not inside:
        logger.warning(f"Refusing to write {local_path} outside {image_dir} for {base_filename}")
        return ImageResult.failed("write-failed")

    try:
        resp = session.get(source_url, timeout=settings.image_timeout)
        resp.raise_for_status()
    except Exception as e:
        logger.warning(f"Failed image download for {base_filename}: {e}")
        return ImageResult.failed("download-failed")

    try:
        image_dir.mkdir(parents=True, exist_ok=True)
        with open(local_path, "wb") as f:
            f.write(resp.content)
    except OSError as e:
        logger.warning(f"Failed to write image {local_path} for {base_filename}: {e}")
        return ImageResult.failed("write-failed")

    verify_image(local_path)
    return ImageResult(reference=f"{settings.image_base_url}{filename}")
