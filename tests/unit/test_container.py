"""
Unit tests for the DI container wiring.
"""
from unittest.mock import MagicMock, patch

import pytest

from user_backend.application.use_cases.auth.register_user import RegisterUserUseCase
from user_backend.application.use_cases.auth.verify_user_account import VerifyUserAccountUseCase
from user_backend.application.use_cases.user.delete_user import DeleteUserUseCase
from user_backend.application.use_cases.user.list_users import ListUsersUseCase
from user_backend.application.use_cases.user.update_user import UpdateUserUseCase
from user_backend.core.config import Settings
from user_backend.core.security import TokenCodec
from user_backend.di.base_container import BaseContainer
from user_backend.di.container import DIContainer
from user_backend.domain.repositories.user_repository import UserRepository
from user_backend.infrastructure.storage.image_store import ImageStore


class TestBaseContainer:

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        marker = object()
        container.register_singleton("marker", marker)
        assert container.get("marker") is marker

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory("list", lambda: [])
        assert container.get("list") is not container.get("list")

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            BaseContainer().get("missing")


@pytest.fixture
def container():
    settings = Settings()
    with patch(
        "user_backend.di.providers.database_provider.get_user_collection", return_value=MagicMock()
    ):
        yield DIContainer(settings=settings)


class TestDIContainer:

    def test_resolves_registration_use_cases(self, container):
        register = container.get(RegisterUserUseCase)
        verify = container.get(VerifyUserAccountUseCase)

        assert register.activation_key == container.settings.jwt_activation_key
        assert register.token_codec is container.get(TokenCodec)
        assert verify.user_repository is container.get(UserRepository)

    def test_resolves_profile_use_cases(self, container):
        assert isinstance(container.get(ListUsersUseCase), ListUsersUseCase)
        update = container.get(UpdateUserUseCase)
        delete = container.get(DeleteUserUseCase)
        assert update.image_store is container.get(ImageStore)
        assert delete.image_store is update.image_store

    def test_image_store_uses_configured_limit(self, container):
        assert container.get(ImageStore).max_file_size == container.settings.max_file_size
