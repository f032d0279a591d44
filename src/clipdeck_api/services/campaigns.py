"""Campaign management endpoints.

Campaigns are the briefs studios publish and editors join to submit clips.

Examples:
    >>> async with ClipdeckClient(config) as client:
    ...     page = await client.campaigns.list({"status": "active"})
    ...     campaign = await client.campaigns.create(
    ...         CreateCampaignData(title="Best Plays", description="Share your best moments")
    ...     )
"""

from typing import Any, Dict, List, Optional

from ..utils.payload import Payload, path_param
from .base import BaseClient


class CampaignClient(BaseClient):
    """Client for the ``/campaigns`` resource family."""

    async def list(
        self, filters: Optional[Payload] = None
    ) -> Dict[str, Any]:
        """List campaigns with optional filtering and pagination.

        :param filters: Status filter and pagination, as
            :class:`CampaignListFilters` or a dict
        :type filters: Optional[CampaignListFilters]
        :return: Paginated envelope ``{data, total, page, limit, totalPages}``
        :rtype: Dict[str, Any]
        :raises ApiError: If the request fails
        """
        return await self.get("/campaigns", params=filters)

    async def get_by_id(self, id: str) -> Dict[str, Any]:
        """Retrieve a single campaign.

        :param id: Campaign ID
        :type id: str
        :return: The campaign record
        :rtype: Dict[str, Any]
        :raises ApiError: ``NOT_FOUND`` if the campaign does not exist
        """
        return await self.get(f"/campaigns/{path_param(id)}")

    async def create(self, data: Payload) -> Dict[str, Any]:
        """Create a campaign.

        :param data: Campaign data
        :type data: CreateCampaignData
        :return: The created campaign
        :rtype: Dict[str, Any]
        """
        return await self.post("/campaigns", json=data)

    async def update(self, id: str, data: Payload) -> Dict[str, Any]:
        """Partially update a campaign.

        Only the provided fields are sent; everything else is left as is
        on the server.

        :param id: Campaign ID
        :type id: str
        :param data: Fields to change
        :type data: UpdateCampaignData
        :return: The updated campaign
        :rtype: Dict[str, Any]
        """
        return await self.patch(f"/campaigns/{path_param(id)}", json=data)

    async def join(self, id: str) -> Dict[str, Any]:
        """Join a campaign as a participant.

        :raises ApiError: ``CONFLICT`` if the campaign is full or already joined
        """
        return await self.post(f"/campaigns/{path_param(id)}/join")

    async def leave(self, id: str) -> None:
        """Leave a previously joined campaign."""
        await self.post(f"/campaigns/{path_param(id)}/leave")

    async def get_participants(self, id: str) -> List[Dict[str, Any]]:
        return await self.get(f"/campaigns/{path_param(id)}/participants")

    async def update_status(self, id: str, status: str) -> Dict[str, Any]:
        """Change a campaign's lifecycle status (e.g. ``"active"``, ``"closed"``).

        :param id: Campaign ID
        :type id: str
        :param status: New status
        :type status: str
        :return: The updated campaign
        :rtype: Dict[str, Any]
        """
        return await self.patch(
            f"/campaigns/{path_param(id)}/status", json={"status": status}
        )

