"""Constants for domain model field names"""

from .user_fields import UserFields
from .media_constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_IMAGE_MIME,
    DEFAULT_MAX_FILE_SIZE,
)

__all__ = [
    "UserFields",
    "ALLOWED_IMAGE_EXTENSIONS",
    "ALLOWED_IMAGE_MIME",
    "DEFAULT_MAX_FILE_SIZE",
]
