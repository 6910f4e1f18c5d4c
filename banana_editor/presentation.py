###############################################################################
# Result presentation  – download naming + save-to-disk
###############################################################################
import time
from pathlib import Path

from banana_editor.stream import ResultImage

# mimetypes maps image/jpeg to ".jpe" on some platforms
_EXTENSIONS = {"image/jpeg": "jpg", "image/svg+xml": "svg"}


def file_extension(mime_type: str) -> str:
    return _EXTENSIONS.get(mime_type, mime_type.split("/")[-1] or "png")


def download_filename(mime_type: str = "image/png", now: float | None = None) -> str:
    """``generated-image-<epoch ms>.<ext>``; the timestamp keeps names unique."""
    millis = round((time.time() if now is None else now) * 1000)
    return f"generated-image-{millis}.{file_extension(mime_type)}"


def save_result(result: ResultImage, directory, now: float | None = None) -> Path:
    path = Path(directory) / download_filename(result.mime_type, now)
    path.write_bytes(result.data)
    return path
