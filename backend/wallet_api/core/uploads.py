"""Upload Rules — image type and size restrictions for avatar uploads.

Invariants:
    - Extension AND content type must both name an allowed image format
    - Size limit is inclusive (size == max_bytes is accepted)
"""

import os

from wallet_api.core.errors import UploadRejectedError

ALLOWED_EXTENSIONS = frozenset({".svg", ".jpg", ".jpeg", ".png", ".webp"})
ALLOWED_CONTENT_TYPES = frozenset({
    "image/svg+xml", "image/jpeg", "image/png", "image/webp",
})


def image_extension(filename: str) -> str:
    return os.path.splitext(filename)[1].lower()


def check_image_upload(
    filename: str | None, content_type: str | None, size: int, max_bytes: int,
) -> None:
    """Raise UploadRejectedError if the file is not an allowed image."""
    if not filename:
        raise UploadRejectedError("No image provided")
    extension = image_extension(filename)
    if extension not in ALLOWED_EXTENSIONS or content_type not in ALLOWED_CONTENT_TYPES:
        raise UploadRejectedError(
            "File upload only supports the following filetypes - svg|jpg|png|webp",
        )
    if size > max_bytes:
        raise UploadRejectedError(f"File exceeds the {max_bytes} byte limit")
