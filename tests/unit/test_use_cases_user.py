"""
Unit tests for user profile use cases (List, Get, Update, Delete).
"""
from unittest.mock import AsyncMock

import bcrypt
import pytest
from user_backend.application.use_cases.user.delete_user import DeleteUserUseCase
from user_backend.application.use_cases.user.get_user import GetUserUseCase
from user_backend.application.use_cases.user.list_users import ListUsersUseCase
from user_backend.application.use_cases.user.update_user import UpdateUserUseCase
from user_backend.core.exceptions import FileTooLargeError, NotFoundError
from user_backend.domain.models.pagination import PaginatedResult

USER_ID = "64b7f0c2a1b2c3d4e5f60718"


class TestListUsersUseCase:
    """Tests for ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_defaults_page_one_limit_five(self, mock_user_repo):
        mock_user_repo.list.return_value = PaginatedResult.build([], count=0, page=1, limit=5)

        await ListUsersUseCase(mock_user_repo).execute()

        mock_user_repo.list.assert_awaited_once_with(search="", page=1, limit=5)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "page, limit, expected",
        [("2", "10", (2, 10)), ("abc", "0", (1, 5)), ("-3", "x", (1, 5)), (3, None, (3, 5))],
    )
    async def test_page_and_limit_parsing(self, mock_user_repo, page, limit, expected):
        mock_user_repo.list.return_value = PaginatedResult.build([], count=0, page=1, limit=5)

        await ListUsersUseCase(mock_user_repo).execute(search=" jo ", page=page, limit=limit)

        mock_user_repo.list.assert_awaited_once_with(
            search="jo", page=expected[0], limit=expected[1]
        )

    @pytest.mark.asyncio
    async def test_maps_page_to_response(self, mock_user_repo, user_factory):
        users = [user_factory(user_id=f"id-{i}", email=f"u{i}@x.com") for i in range(5)]
        mock_user_repo.list.return_value = PaginatedResult.build(users, count=12, page=1, limit=5)

        result = await ListUsersUseCase(mock_user_repo).execute(page="1", limit="5")

        assert len(result.users) == 5
        assert result.pagination.total_pages == 3
        assert result.pagination.previous_page is None
        assert result.pagination.next_page == 2
        dumped = result.model_dump(by_alias=True)
        assert dumped["pagination"] == {
            "totalPages": 3,
            "currentPage": 1,
            "previousPage": None,
            "nextPage": 2,
        }
        assert "password" not in dumped["users"][0]


class TestGetUserUseCase:
    """Tests for GetUserUseCase"""

    @pytest.mark.asyncio
    async def test_found(self, mock_user_repo, user_factory):
        mock_user_repo.get_by_id.return_value = user_factory(user_id=USER_ID, password=None)

        result = await GetUserUseCase(mock_user_repo).execute(USER_ID)

        assert result.id == USER_ID
        assert result.name == "John Doe"

    @pytest.mark.asyncio
    async def test_not_found_propagates(self, mock_user_repo):
        mock_user_repo.get_by_id.side_effect = NotFoundError("User does not exist with this id")

        with pytest.raises(NotFoundError):
            await GetUserUseCase(mock_user_repo).execute(USER_ID)


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_deletes_record_then_image(self, mock_user_repo, user_factory):
        mock_user_repo.delete_by_id.return_value = user_factory(user_id=USER_ID, image="avatar.png")
        image_store = AsyncMock()

        await DeleteUserUseCase(mock_user_repo, image_store).execute(USER_ID)

        mock_user_repo.delete_by_id.assert_awaited_once_with(USER_ID)
        image_store.delete.assert_awaited_once_with("avatar.png")

    @pytest.mark.asyncio
    async def test_not_found_skips_image_deletion(self, mock_user_repo):
        mock_user_repo.delete_by_id.side_effect = NotFoundError("User does not exist with this id")
        image_store = AsyncMock()

        with pytest.raises(NotFoundError):
            await DeleteUserUseCase(mock_user_repo, image_store).execute(USER_ID)
        image_store.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_image_cleanup_failure_is_not_reported(
        self, mock_user_repo, user_factory, image_store, tmp_path
    ):
        # A directory cannot be unlinked; the store must swallow the error
        blocked = tmp_path / "avatar.png"
        blocked.mkdir()
        mock_user_repo.delete_by_id.return_value = user_factory(user_id=USER_ID, image=str(blocked))

        await DeleteUserUseCase(mock_user_repo, image_store).execute(USER_ID)

        mock_user_repo.delete_by_id.assert_awaited_once()


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase"""

    @pytest.mark.asyncio
    async def test_only_whitelisted_fields_are_applied(self, mock_user_repo, user_factory, image_store):
        mock_user_repo.update_by_id.return_value = user_factory(user_id=USER_ID, name="New Name")

        result = await UpdateUserUseCase(mock_user_repo, image_store).execute(
            USER_ID,
            {"name": "New Name", "email": "other@x.com", "is_admin": True, "phone": None},
        )

        mock_user_repo.get_by_id.assert_awaited_once_with(USER_ID)
        mock_user_repo.update_by_id.assert_awaited_once_with(USER_ID, {"name": "New Name"})
        assert result.name == "New Name"

    @pytest.mark.asyncio
    async def test_image_is_validated_and_encoded(
        self, mock_user_repo, user_factory, image_store, small_image
    ):
        mock_user_repo.update_by_id.return_value = user_factory(user_id=USER_ID)

        await UpdateUserUseCase(mock_user_repo, image_store).execute(USER_ID, {}, small_image)

        _, updates = mock_user_repo.update_by_id.call_args.args
        assert updates == {"image": image_store.encode(small_image)}

    @pytest.mark.asyncio
    async def test_submitted_image_string_is_ignored(self, mock_user_repo, user_factory, image_store):
        mock_user_repo.update_by_id.return_value = user_factory(user_id=USER_ID)

        await UpdateUserUseCase(mock_user_repo, image_store).execute(USER_ID, {"image": "raw"})

        mock_user_repo.update_by_id.assert_awaited_once_with(USER_ID, {})

    @pytest.mark.asyncio
    async def test_oversized_image_rejected_before_update(
        self, mock_user_repo, image_store, large_image
    ):
        with pytest.raises(FileTooLargeError):
            await UpdateUserUseCase(mock_user_repo, image_store).execute(USER_ID, {}, large_image)
        mock_user_repo.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_user_is_not_found(self, mock_user_repo, image_store):
        mock_user_repo.get_by_id.side_effect = NotFoundError("User does not exist with this id")

        with pytest.raises(NotFoundError):
            await UpdateUserUseCase(mock_user_repo, image_store).execute(USER_ID, {"name": "X"})
        mock_user_repo.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_password_hashed_when_enabled(self, mock_user_repo, user_factory, image_store):
        mock_user_repo.update_by_id.return_value = user_factory(user_id=USER_ID)

        await UpdateUserUseCase(mock_user_repo, image_store, hash_passwords=True).execute(
            USER_ID, {"password": "newsecret"}
        )

        _, updates = mock_user_repo.update_by_id.call_args.args
        assert bcrypt.checkpw(b"newsecret", updates["password"].encode("utf-8"))

    @pytest.mark.asyncio
    async def test_password_stored_as_submitted_by_default(
        self, mock_user_repo, user_factory, image_store
    ):
        mock_user_repo.update_by_id.return_value = user_factory(user_id=USER_ID)

        await UpdateUserUseCase(mock_user_repo, image_store).execute(USER_ID, {"password": "newsecret"})

        mock_user_repo.update_by_id.assert_awaited_once_with(USER_ID, {"password": "newsecret"})
