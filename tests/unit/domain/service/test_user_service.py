"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from board.domain.error import NotFoundError
from board.domain.repository import UserRepository
from board.domain.service import UserService
from board.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_returns_saved_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user("Masha"))

        assert await user_service.get_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))


class TestGetAuthors:
    """Tests for get_authors method."""

    @pytest.mark.asyncio
    async def test_maps_known_authors_and_skips_missing(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alex = await user_repo.save(make_user("Alex"))
        syed = await user_repo.save(make_user("Syed"))
        missing = UserId(uuid4())

        authors = await user_service.get_authors([alex.id, syed.id, alex.id, missing])

        assert authors == {alex.id: alex, syed.id: syed}

    @pytest.mark.asyncio
    async def test_no_ids_gives_empty_mapping(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_authors([]) == {}
