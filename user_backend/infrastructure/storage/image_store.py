"""
Profile image storage.

Uploaded images are kept inline on the user document as base64. ``delete``
also cleans up images that live as files under the configured upload
directory; anything else is left alone.
"""

import asyncio
import base64
import logging
from pathlib import Path
from typing import Optional

from ...core.exceptions import BadRequestError, FileTooLargeError
from ...domain.constants import ALLOWED_IMAGE_EXTENSIONS, ALLOWED_IMAGE_MIME
from ...domain.models.user import UploadedImage

logger = logging.getLogger(__name__)


class ImageStore:
    """Validates, encodes and deletes user profile images"""

    def __init__(self, max_file_size: int, upload_dir: str) -> None:
        self.max_file_size = max_file_size
        self.upload_dir = Path(upload_dir)

    def validate(self, upload: UploadedImage) -> None:
        """
        Check an upload against the size limit and the allowed image types

        Raises:
            FileTooLargeError: If the upload exceeds max_file_size
            BadRequestError: If the upload is not an allowed image type
        """
        if upload.size > self.max_file_size:
            raise FileTooLargeError("File too large")

        content_type = (upload.content_type or "").strip().lower()
        ext = Path(upload.filename or "").suffix.lower()
        if content_type not in ALLOWED_IMAGE_MIME and ext not in ALLOWED_IMAGE_EXTENSIONS:
            raise BadRequestError(
                f"File type is not allowed. Allowed formats: {', '.join(sorted(ALLOWED_IMAGE_EXTENSIONS))}"
            )

    @staticmethod
    def encode(upload: UploadedImage) -> str:
        return base64.b64encode(upload.content).decode("ascii")

    def _resolve(self, stored_path: str) -> Optional[Path]:
        """Return the file for stored_path if it is inside upload_dir, else None."""
        # Base64 has no "." so inline images never carry an image extension
        if Path(stored_path).suffix.lower() not in ALLOWED_IMAGE_EXTENSIONS:
            return None
        root = self.upload_dir.resolve()
        candidate = Path(stored_path)
        if not candidate.is_absolute():
            candidate = root / candidate.name
        candidate = candidate.resolve()
        if root not in candidate.parents:
            return None
        return candidate

    async def delete(self, stored_path: Optional[str]) -> None:
        """
        Best-effort removal of a stored image file.

        Never raises; failures are logged and otherwise ignored.
        """
        if not stored_path:
            return

        try:
            path = self._resolve(stored_path)
            if path is None:
                logger.debug("[image_store] Nothing on disk to delete for stored image")
                return
            await asyncio.to_thread(path.unlink, missing_ok=True)
            logger.info("[image_store] Deleted image %s", path)
        except (OSError, ValueError) as e:
            logger.warning("[image_store] Could not delete image %s: %s", stored_path[:80], e)
