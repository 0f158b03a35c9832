"""
IdeaBoard Backend: Idea Service Unit Tests
============================================

What we test:
    ✅ Created ids are valid, distinct UUIDs
    ✅ find_idea after create_idea returns the same message/image, no likes
    ✅ Missing message raises ValidationError; image defaults to ""
    ✅ list_ideas(n) returns at most n ideas, newest first
    ✅ delete_idea then find_idea raises NotFoundError; deleting twice is fine
    ✅ Storage failures: list degrades to [], find propagates DatabaseError
    ✅ compose_with_likes does not mutate its input
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest

from ideaboard.exceptions import DatabaseError, NotFoundError, ValidationError
from ideaboard.schemas.idea import IdeaCreate, IdeaResponse
from ideaboard.schemas.like import LikeResponse
from ideaboard.services.idea_service import IdeaService


class TestIdeaServiceCreate:

    def setup_method(self):
        self.service = IdeaService()

    @pytest.mark.asyncio
    async def test_ids_are_unique_uuid4(self, db_session):
        ids = set()
        for i in range(100):
            idea = await self.service.create_idea(db_session, IdeaCreate(message=f"idea {i}"))
            assert idea.id.version == 4
            ids.add(idea.id)
        assert len(ids) == 100

    @pytest.mark.asyncio
    async def test_find_after_create(self, db_session):
        created = await self.service.create_idea(
            db_session, IdeaCreate(message="hello", image="sunset.jpg")
        )

        found = await self.service.find_idea(db_session, created.id)

        assert found.id == created.id
        assert found.message == "hello"
        assert found.image == "sunset.jpg"
        assert found.likes == []

    @pytest.mark.asyncio
    async def test_image_defaults_to_empty_string(self, db_session):
        created = await self.service.create_idea(db_session, IdeaCreate(message="no picture"))
        assert created.image == ""
        assert created.likes == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("idea_in", [None, IdeaCreate(), IdeaCreate(message="", image="x.png")])
    async def test_message_is_required(self, mock_db_session, idea_in):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_idea(mock_db_session, idea_in)

        assert exc_info.value.field == "message"
        mock_db_session.add.assert_not_called()


class TestIdeaServiceList:

    def setup_method(self):
        self.service = IdeaService()

    @pytest.mark.asyncio
    async def test_list_respects_limit_and_order(self, db_session):
        for i in range(6):
            await self.service.create_idea(db_session, IdeaCreate(message=f"idea {i}"))

        ideas = await self.service.list_ideas(db_session, limit=4)

        assert len(ideas) == 4
        timestamps = [idea.created_at for idea in ideas]
        assert all(a >= b for a, b in zip(timestamps, timestamps[1:]))
        assert all(idea.likes == [] for idea in ideas)

    @pytest.mark.asyncio
    async def test_list_empty_table(self, db_session):
        assert await self.service.list_ideas(db_session, limit=50) == []

    @pytest.mark.asyncio
    async def test_list_returns_empty_on_failure(self, mock_db_session):
        with patch("ideaboard.services.idea_service.IdeaRepository") as repo_cls:
            repo_cls.return_value.select_all = AsyncMock(side_effect=DatabaseError())

            assert await self.service.list_ideas(mock_db_session, limit=50) == []


class TestIdeaServiceFindAndDelete:

    def setup_method(self):
        self.service = IdeaService()

    @pytest.mark.asyncio
    async def test_find_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.find_idea(db_session, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_find_storage_failure_is_not_not_found(self, mock_db_session):
        with patch("ideaboard.services.idea_service.IdeaRepository") as repo_cls:
            repo_cls.return_value.select_by_id = AsyncMock(side_effect=DatabaseError())

            with pytest.raises(DatabaseError):
                await self.service.find_idea(mock_db_session, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_delete_then_find_raises_not_found(self, db_session):
        created = await self.service.create_idea(db_session, IdeaCreate(message="short-lived"))

        await self.service.delete_idea(db_session, created.id)

        with pytest.raises(NotFoundError):
            await self.service.find_idea(db_session, created.id)

    @pytest.mark.asyncio
    async def test_delete_twice_does_not_error(self, db_session):
        created = await self.service.create_idea(db_session, IdeaCreate(message="twice"))

        await self.service.delete_idea(db_session, created.id)
        await self.service.delete_idea(db_session, created.id)


class TestComposeWithLikes:

    def test_returns_new_value_and_keeps_original(self):
        now = datetime.now(timezone.utc)
        idea = IdeaResponse(id=uuid.uuid4(), created_at=now, message="m", image="")
        likes = [LikeResponse(id=uuid.uuid4(), created_at=now)]

        composed = IdeaService.compose_with_likes(idea, likes)

        assert composed.likes == likes
        assert composed.id == idea.id
        assert composed.message == idea.message
        assert idea.likes == []
        assert composed is not idea
