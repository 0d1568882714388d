"""
Shared pytest fixtures for user backend tests.
"""
from unittest.mock import AsyncMock

import pytest

from user_backend.core.security import TokenCodec
from user_backend.domain.models.user import UploadedImage, User
from user_backend.infrastructure.storage.image_store import ImageStore

ACTIVATION_KEY = "test_activation_key_for_testing_only_0123456789"
MAX_FILE_SIZE = 1024

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 56


def make_user(
    user_id: str = "64b7f0c2a1b2c3d4e5f60718",
    name: str = "John Doe",
    email: str = "john@example.com",
    **overrides,
) -> User:
    fields = {
        "phone": "0123456789",
        "password": "secret123",
        "address": "221B Baker Street",
        "image": None,
        "is_admin": False,
    }
    fields.update(overrides)
    return User(id=user_id, name=name, email=email, **fields)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    repo.exists_by_email.return_value = False
    return repo


@pytest.fixture
def mock_email_dispatcher():
    dispatcher = AsyncMock()
    dispatcher.send.return_value = None
    return dispatcher


@pytest.fixture
def token_codec():
    return TokenCodec(algorithm="HS256")


@pytest.fixture
def image_store(tmp_path):
    return ImageStore(max_file_size=MAX_FILE_SIZE, upload_dir=str(tmp_path))


@pytest.fixture
def small_image():
    return UploadedImage(filename="avatar.png", content_type="image/png", content=PNG_BYTES)


@pytest.fixture
def large_image():
    return UploadedImage(
        filename="huge.png",
        content_type="image/png",
        content=b"\x00" * (MAX_FILE_SIZE + 1),
    )


@pytest.fixture
def user_factory():
    """Factory fixture building User domain models with sensible defaults."""
    return make_user
