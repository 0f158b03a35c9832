"""
IdeaBoard Backend: HTTP API Tests
===================================

End-to-end through FastAPI (httpx ASGITransport) on a SQLite database.

What we test:
    ✅ The full create → like → unlike → delete scenario
    ✅ 400 structured error for a missing message
    ✅ 204 for unknown ideas, 204 for deletes, JSON content type everywhere
    ✅ Storage-failure fallbacks per endpoint
    ✅ GET /ideas cap and like attachment
    ✅ Foreign key on likes: cascade on idea delete, no orphan likes
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select

from ideaboard.config import settings
from ideaboard.exceptions import DatabaseError
from ideaboard.models import Like
from ideaboard.services.idea_service import idea_service
from ideaboard.services.like_service import like_service


async def create_idea(client, message="hello", **extra):
    response = await client.post("/ideas", json={"message": message, **extra})
    assert response.status_code == 201
    return response.json()


class TestIdeaScenario:

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, test_client):
        # Create
        response = await test_client.post("/ideas", json={"message": "hello"})
        assert response.status_code == 201
        assert response.headers["content-type"] == "application/json"
        created = response.json()
        idea_id = created["id"]
        uuid.UUID(idea_id)
        assert created["message"] == "hello"
        assert created["image"] == ""
        assert created["likes"] == []
        assert "created_at" in created

        # Read back
        response = await test_client.get(f"/ideas/{idea_id}")
        assert response.status_code == 200
        fetched = response.json()
        assert fetched["id"] == idea_id
        assert fetched["message"] == "hello"
        assert fetched["likes"] == []

        # Two likes, newest first
        first = await test_client.post(f"/ideas/{idea_id}/likes")
        second = await test_client.post(f"/ideas/{idea_id}/likes")
        assert first.status_code == 200
        assert second.status_code == 200
        assert set(second.json()) == {"id", "created_at"}

        likes = (await test_client.get(f"/ideas/{idea_id}")).json()["likes"]
        assert [like["id"] for like in likes] == [second.json()["id"], first.json()["id"]]

        # Minus one removes the newest
        response = await test_client.delete(f"/ideas/{idea_id}/likes")
        assert response.status_code == 204
        likes = (await test_client.get(f"/ideas/{idea_id}")).json()["likes"]
        assert [like["id"] for like in likes] == [first.json()["id"]]

        # Delete the idea
        response = await test_client.delete(f"/ideas/{idea_id}")
        assert response.status_code == 204
        response = await test_client.get(f"/ideas/{idea_id}")
        assert response.status_code == 204
        assert response.content == b""


class TestCreateIdea:

    @pytest.mark.asyncio
    async def test_image_is_stored(self, test_client):
        created = await create_idea(test_client, message="with picture", image="cat.png")
        fetched = (await test_client.get(f"/ideas/{created['id']}")).json()
        assert fetched["image"] == "cat.png"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"image": "cat.png"}, {"message": ""}])
    async def test_missing_message_is_400(self, test_client, body):
        response = await test_client.post("/ideas", json=body)

        assert response.status_code == 400
        payload = response.json()
        assert payload["error"] == "validation_error"
        assert payload["details"] == {"field": "message"}
        assert payload["request_id"]

    @pytest.mark.asyncio
    async def test_missing_body_is_400(self, test_client):
        response = await test_client.post("/ideas")
        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_storage_failure_is_500(self, test_client):
        with patch("ideaboard.services.idea_service.IdeaRepository") as repo_cls:
            repo_cls.return_value.insert = AsyncMock(side_effect=DatabaseError())

            response = await test_client.post("/ideas", json={"message": "lost"})

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"


class TestListIdeas:

    @pytest.mark.asyncio
    async def test_results_have_likes_attached(self, test_client):
        liked = await create_idea(test_client, message="liked")
        await create_idea(test_client, message="plain")
        await test_client.post(f"/ideas/{liked['id']}/likes")

        response = await test_client.get("/ideas")

        assert response.status_code == 200
        results = response.json()["results"]
        assert [idea["message"] for idea in results] == ["plain", "liked"]
        assert len(results[1]["likes"]) == 1
        assert results[0]["likes"] == []

    @pytest.mark.asyncio
    async def test_result_cap(self, test_client, monkeypatch):
        monkeypatch.setattr(settings, "ideas_list_limit", 2)
        for i in range(3):
            await create_idea(test_client, message=f"idea {i}")

        results = (await test_client.get("/ideas")).json()["results"]

        assert [idea["message"] for idea in results] == ["idea 2", "idea 1"]

    @pytest.mark.asyncio
    async def test_storage_failure_gives_empty_list(self, test_client):
        with patch("ideaboard.services.idea_service.IdeaRepository") as repo_cls:
            repo_cls.return_value.select_all = AsyncMock(side_effect=DatabaseError())

            response = await test_client.get("/ideas")

        assert response.status_code == 200
        assert response.json() == {"results": []}

    @pytest.mark.asyncio
    async def test_like_failure_leaves_likes_empty(self, test_client):
        created = await create_idea(test_client)
        await test_client.post(f"/ideas/{created['id']}/likes")

        with patch("ideaboard.services.like_service.LikeRepository") as repo_cls:
            repo_cls.return_value.select_by_idea_id = AsyncMock(side_effect=DatabaseError())

            response = await test_client.get("/ideas")

        assert response.status_code == 200
        assert response.json()["results"][0]["likes"] == []


class TestGetAndDeleteIdea:

    @pytest.mark.asyncio
    async def test_unknown_idea_is_204(self, test_client):
        response = await test_client.get(f"/ideas/{uuid.uuid4()}")

        assert response.status_code == 204
        assert response.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_invalid_uuid_is_rejected(self, test_client):
        response = await test_client.get("/ideas/not-a-uuid")
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_lookup_storage_failure_is_500(self, test_client):
        with patch.object(idea_service, "find_idea", AsyncMock(side_effect=DatabaseError())):
            response = await test_client.get(f"/ideas/{uuid.uuid4()}")

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, test_client):
        created = await create_idea(test_client)

        assert (await test_client.delete(f"/ideas/{created['id']}")).status_code == 204
        assert (await test_client.delete(f"/ideas/{created['id']}")).status_code == 204

    @pytest.mark.asyncio
    async def test_delete_storage_failure_still_204(self, test_client):
        with patch.object(idea_service, "delete_idea", AsyncMock(side_effect=DatabaseError())):
            response = await test_client.delete(f"/ideas/{uuid.uuid4()}")

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_delete_removes_the_ideas_likes(self, test_client, database):
        created = await create_idea(test_client)
        await test_client.post(f"/ideas/{created['id']}/likes")
        await test_client.post(f"/ideas/{created['id']}/likes")

        assert (await test_client.delete(f"/ideas/{created['id']}")).status_code == 204
        assert (await test_client.get(f"/ideas/{created['id']}")).status_code == 204

        async with database.session() as session:
            remaining = await session.scalar(select(func.count()).select_from(Like))
        assert remaining == 0


class TestLikesEndpoints:

    @pytest.mark.asyncio
    async def test_list_likes(self, test_client):
        created = await create_idea(test_client)
        posted = (await test_client.post(f"/ideas/{created['id']}/likes")).json()

        response = await test_client.get(f"/ideas/{created['id']}/likes")

        assert response.status_code == 200
        assert response.json() == {"results": [posted]}

    @pytest.mark.asyncio
    async def test_list_likes_storage_failure_is_empty_200(self, test_client):
        with patch("ideaboard.services.like_service.LikeRepository") as repo_cls:
            repo_cls.return_value.select_by_idea_id = AsyncMock(side_effect=DatabaseError())

            response = await test_client.get(f"/ideas/{uuid.uuid4()}/likes")

        assert response.status_code == 200
        assert response.json() == {"results": []}

    @pytest.mark.asyncio
    async def test_plus_one_storage_failure_is_204(self, test_client):
        with patch.object(like_service, "create_like", AsyncMock(side_effect=DatabaseError())):
            response = await test_client.post(f"/ideas/{uuid.uuid4()}/likes")

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_plus_one_on_unknown_idea_is_204(self, test_client):
        response = await test_client.post(f"/ideas/{uuid.uuid4()}/likes")

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_minus_one_without_likes_is_204(self, test_client):
        created = await create_idea(test_client)

        response = await test_client.delete(f"/ideas/{created['id']}/likes")

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_minus_one_storage_failure_is_204(self, test_client):
        with patch.object(like_service, "delete_like", AsyncMock(side_effect=DatabaseError())):
            response = await test_client.delete(f"/ideas/{uuid.uuid4()}/likes")

        assert response.status_code == 204


class TestRequestId:

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get("/ideas", headers={"X-Request-ID": "trace-123"})
        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/ideas")
        assert len(response.headers["X-Request-ID"]) == 8
