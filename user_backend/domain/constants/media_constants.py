"""
Shared constants for profile image uploads.

Used by the image store and the user controllers. Single place for easier updates.
"""

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
ALLOWED_IMAGE_MIME = frozenset({"image/jpeg", "image/png", "image/webp"})

# Default upper bound for an uploaded image, overridable with MAX_FILE_SIZE
DEFAULT_MAX_FILE_SIZE = 2 * 1024 * 1024
