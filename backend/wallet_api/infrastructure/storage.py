"""File Storage — writes accepted uploads under the configured upload directory.

Invariants:
    - Stored names are random (uuid4 hex) + original extension; client names never reach the filesystem
    - Returns the path relative to the working directory, as persisted on the user row
"""

import logging
import os
import uuid

from wallet_api.core.uploads import image_extension

logger = logging.getLogger(__name__)


def save_upload(upload_dir: str, original_name: str, content: bytes) -> str:
    """Persist the file and return its stored path."""
    os.makedirs(upload_dir, exist_ok=True)
    filename = f"{uuid.uuid4().hex}{image_extension(original_name)}"
    path = os.path.join(upload_dir, filename)
    with open(path, "wb") as fh:
        fh.write(content)
    logger.info(f"Stored upload {filename} ({len(content)} bytes)")
    return path
