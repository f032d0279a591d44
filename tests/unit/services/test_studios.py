"""Tests for StudioClient."""

import json

import pytest

from clipdeck_api.models import CreateStudioData, StudioListFilters, UpdateStudioData

BASE_URL = "https://api.test.com"


@pytest.mark.asyncio
@pytest.mark.respx(base_url=BASE_URL)
class TestStudioClient:
    async def test_list(self, api, respx_mock, ok_page):
        respx_mock.get("/studios").respond(200, json=ok_page)

        await api.studios.list(StudioListFilters(search="gaming", sort_by="rating", limit=20))

        assert dict(respx_mock.calls.last.request.url.params) == {
            "search": "gaming",
            "sortBy": "rating",
            "limit": "20",
        }

    async def test_get_by_slug(self, api, respx_mock, ok_record):
        respx_mock.get("/studios/pixel-forge").respond(200, json=ok_record)

        assert await api.studios.get_by_slug("pixel-forge") == ok_record

    async def test_create(self, api, respx_mock, ok_record):
        route = respx_mock.post("/studios").respond(201, json=ok_record)

        await api.studios.create(
            CreateStudioData(name="Pixel Forge", slug="pixel-forge", avatar_url="https://cdn.test.com/a.png")
        )

        assert json.loads(route.calls.last.request.content) == {
            "name": "Pixel Forge",
            "slug": "pixel-forge",
            "avatarUrl": "https://cdn.test.com/a.png",
        }

    async def test_update(self, api, respx_mock, ok_record):
        route = respx_mock.patch("/studios/pixel-forge").respond(200, json=ok_record)

        await api.studios.update("pixel-forge", UpdateStudioData(website="https://pf.test"))

        assert json.loads(route.calls.last.request.content) == {"website": "https://pf.test"}

    async def test_remove(self, api, respx_mock):
        route = respx_mock.delete("/studios/pixel-forge").respond(204)

        assert await api.studios.remove("pixel-forge") is None
        assert route.called

    async def test_get_members(self, api, respx_mock):
        members = [{"userId": "u1", "role": "owner"}]
        respx_mock.get("/studios/pixel-forge/members").respond(200, json=members)

        assert await api.studios.get_members("pixel-forge") == members

    async def test_join(self, api, respx_mock, ok_record):
        respx_mock.post("/studios/pixel-forge/join").respond(200, json=ok_record)

        assert await api.studios.join("pixel-forge") == ok_record

    async def test_leave(self, api, respx_mock):
        route = respx_mock.post("/studios/pixel-forge/leave").respond(200, json={})

        assert await api.studios.leave("pixel-forge") is None
        assert route.called

    async def test_rate(self, api, respx_mock, ok_record):
        route = respx_mock.post("/studios/pixel-forge/rate").respond(200, json=ok_record)

        await api.studios.rate("pixel-forge", 5, "Great team")

        assert json.loads(route.calls.last.request.content) == {
            "rating": 5,
            "review": "Great team",
        }

    async def test_rate_without_review(self, api, respx_mock, ok_record):
        route = respx_mock.post("/studios/pixel-forge/rate").respond(200, json=ok_record)

        await api.studios.rate("pixel-forge", 4)

        assert json.loads(route.calls.last.request.content) == {"rating": 4}

    async def test_get_invites(self, api, respx_mock):
        respx_mock.get("/studios/invites").respond(200, json=[])

        assert await api.studios.get_invites() == []
