"""
Upload staging for resume documents.

Copies an uploaded byte stream into the upload cache directory under a fixed
filename so that later steps can work from a local path. Each upload replaces
the previous one; a failed upload leaves the previous one in place.
"""

import contextlib
import io
import os
import shutil
from pathlib import Path
from typing import BinaryIO, Optional, Union

from dotenv import load_dotenv

from jobmatch.contexts.intake.logger import log_upload_failed, log_upload_staged

load_dotenv()

UPLOAD_CACHE_PATH = Path(os.getenv("UPLOAD_CACHE_PATH", "outs/cache"))
UPLOAD_FILENAME = "uploaded_resume.pdf"

# Shown to the user when staging fails
UPLOAD_FAILED_NOTICE = "Failed to upload resume. Please try again."

UploadSource = Union[str, Path, bytes, bytearray, BinaryIO]


def _open_upload(source: UploadSource) -> BinaryIO:
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(bytes(source))
    if isinstance(source, (str, Path)):
        return open(source, "rb")
    if hasattr(source, "read"):
        return source
    raise TypeError(f"Unsupported upload type: {type(source).__name__}")


def stage_upload(
    source: Optional[UploadSource], cache_dir: Optional[Union[str, Path]] = None
) -> Optional[Path]:
    """
    Copy an uploaded document into the cache directory.

    Args:
        source: Uploaded content (path, bytes, or readable binary stream).
                None means the picker returned nothing.
        cache_dir: Staging directory (default: UPLOAD_CACHE_PATH)

    Returns:
        Path to the staged file, or None if the upload could not be read or
        written. Callers show UPLOAD_FAILED_NOTICE in that case.
    """
    if source is None:
        return None

    partial_path = None

    try:
        cache_dir = Path(cache_dir or UPLOAD_CACHE_PATH)
        staged_path = cache_dir / UPLOAD_FILENAME
        partial_path = cache_dir / f"{UPLOAD_FILENAME}.part"
        cache_dir.mkdir(parents=True, exist_ok=True)
        stream = _open_upload(source)
        # Only close streams opened here
        owns_stream = stream is not source
        try:
            # Source may be the staged file itself; swap in the copy only once complete
            with open(partial_path, "wb") as out:
                shutil.copyfileobj(stream, out)
        finally:
            if owns_stream:
                stream.close()
        os.replace(partial_path, staged_path)
    except Exception as e:
        log_upload_failed(e)
        if partial_path is not None:
            with contextlib.suppress(OSError):
                partial_path.unlink(missing_ok=True)
        return None

    log_upload_staged(staged_path, staged_path.stat().st_size)
    return staged_path
