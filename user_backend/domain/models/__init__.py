from .user import User, PendingRegistration, UploadedImage
from .pagination import PaginatedResult

__all__ = ["User", "PendingRegistration", "UploadedImage", "PaginatedResult"]
