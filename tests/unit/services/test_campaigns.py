"""Tests for CampaignClient.

Each method must hit the correct path with the correct HTTP method,
send the expected body or query and return the server body untouched.
"""

import json

import httpx
import pytest

from clipdeck_api.exceptions import ApiError
from clipdeck_api.models import CampaignListFilters, CreateCampaignData, UpdateCampaignData

BASE_URL = "https://api.test.com"


@pytest.mark.asyncio
@pytest.mark.respx(base_url=BASE_URL)
class TestCampaignClient:
    async def test_list(self, api, respx_mock, ok_page):
        respx_mock.get("/campaigns").respond(200, json=ok_page)

        result = await api.campaigns.list({"status": "active", "page": 2, "limit": 10})

        assert result == ok_page
        request = respx_mock.calls.last.request
        assert request.headers["authorization"] == "Bearer test-token"
        assert dict(request.url.params) == {"status": "active", "page": "2", "limit": "10"}

    async def test_list_with_model_filters(self, api, respx_mock, ok_page):
        respx_mock.get("/campaigns").respond(200, json=ok_page)

        await api.campaigns.list(CampaignListFilters(status="draft"))

        assert dict(respx_mock.calls.last.request.url.params) == {"status": "draft"}

    async def test_list_without_filters(self, api, respx_mock, ok_page):
        respx_mock.get("/campaigns").respond(200, json=ok_page)

        await api.campaigns.list()

        assert respx_mock.calls.last.request.url.query == b""

    async def test_get_by_id(self, api, respx_mock, ok_record):
        respx_mock.get("/campaigns/camp_abc123").respond(200, json=ok_record)

        assert await api.campaigns.get_by_id("camp_abc123") == ok_record

    async def test_get_by_id_not_found(self, api, respx_mock):
        respx_mock.get("/campaigns/nonexistent").respond(
            404, json={"error": {"code": "NOT_FOUND", "message": "Campaign not found"}}
        )

        with pytest.raises(ApiError) as exc_info:
            await api.campaigns.get_by_id("nonexistent")

        assert exc_info.value.code == "NOT_FOUND"
        assert exc_info.value.message == "Campaign not found"
        assert exc_info.value.status == 404

    async def test_create(self, api, respx_mock, ok_record):
        route = respx_mock.post("/campaigns").respond(201, json=ok_record)

        result = await api.campaigns.create(
            CreateCampaignData(
                title="Epic Moments",
                description="Share your most epic gaming moments",
                game_id="game_1",
                max_participants=50,
                tags=["gaming", "highlights"],
            )
        )

        assert result == ok_record
        assert json.loads(route.calls.last.request.content) == {
            "title": "Epic Moments",
            "description": "Share your most epic gaming moments",
            "gameId": "game_1",
            "maxParticipants": 50,
            "tags": ["gaming", "highlights"],
        }

    async def test_create_validation_error(self, api, respx_mock):
        respx_mock.post("/campaigns").respond(
            400,
            json={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Invalid campaign data",
                    "details": {"title": "required"},
                }
            },
        )

        with pytest.raises(ApiError) as exc_info:
            await api.campaigns.create({"description": "no title"})

        assert exc_info.value.code == "VALIDATION_ERROR"
        assert exc_info.value.details == {"title": "required"}

    async def test_update_sends_only_given_fields(self, api, respx_mock, ok_record):
        route = respx_mock.patch("/campaigns/camp_1").respond(200, json=ok_record)

        await api.campaigns.update("camp_1", {"title": "X"})
        await api.campaigns.update("camp_1", UpdateCampaignData(title="X"))

        assert [json.loads(c.request.content) for c in route.calls] == [
            {"title": "X"},
            {"title": "X"},
        ]

    async def test_update_can_clear_a_field(self, api, respx_mock, ok_record):
        route = respx_mock.patch("/campaigns/camp_1").respond(200, json=ok_record)

        await api.campaigns.update(
            "camp_1", UpdateCampaignData(title="X", description=None)
        )

        assert json.loads(route.calls.last.request.content) == {
            "title": "X",
            "description": None,
        }

    async def test_join(self, api, respx_mock, ok_record):
        route = respx_mock.post("/campaigns/camp_1/join").respond(200, json=ok_record)

        assert await api.campaigns.join("camp_1") == ok_record
        assert route.calls.last.request.content == b""

    async def test_join_conflict(self, api, respx_mock):
        respx_mock.post("/campaigns/camp_1/join").respond(
            409, json={"error": {"code": "CONFLICT", "message": "Campaign is full"}}
        )

        with pytest.raises(ApiError) as exc_info:
            await api.campaigns.join("camp_1")

        assert exc_info.value.code == "CONFLICT"
        assert exc_info.value.status == 409

    async def test_leave_returns_none(self, api, respx_mock):
        respx_mock.post("/campaigns/camp_1/leave").respond(200, json={"left": True})

        assert await api.campaigns.leave("camp_1") is None

    async def test_get_participants(self, api, respx_mock):
        participants = [{"userId": "u1"}, {"userId": "u2"}]
        respx_mock.get("/campaigns/camp_1/participants").respond(200, json=participants)

        assert await api.campaigns.get_participants("camp_1") == participants

    async def test_update_status(self, api, respx_mock, ok_record):
        route = respx_mock.patch("/campaigns/camp_1/status").respond(200, json=ok_record)

        await api.campaigns.update_status("camp_1", "active")

        assert json.loads(route.calls.last.request.content) == {"status": "active"}

    async def test_path_params_are_encoded(self, api, respx_mock, ok_record):
        respx_mock.route(method="GET").respond(200, json=ok_record)

        await api.campaigns.get_by_id("a/b c")

        assert respx_mock.calls.last.request.url.raw_path == b"/campaigns/a%2Fb%20c"

    async def test_network_error(self, api, respx_mock):
        respx_mock.get("/campaigns").mock(side_effect=httpx.ConnectError)

        with pytest.raises(ApiError) as exc_info:
            await api.campaigns.list()

        assert exc_info.value.code == "NETWORK_ERROR"
        assert exc_info.value.status == 0
