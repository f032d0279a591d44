"""Clip submission and review endpoints."""

from typing import Any, Dict, List, Optional

from ..utils.payload import Payload, path_param
from .base import BaseClient


class ClipClient(BaseClient):
    """Client for the ``/clips`` resource family.

    Editors submit clips to campaigns; campaign owners review them and
    track their performance.
    """

    async def list(self, filters: Optional[Payload] = None) -> Dict[str, Any]:
        """List clips filtered by campaign, editor or review status.

        :param filters: :class:`ClipListFilters` or a dict
        :type filters: Optional[ClipListFilters]
        :return: Paginated envelope
        :rtype: Dict[str, Any]
        """
        return await self.get("/clips", params=filters)

    async def get_by_id(self, id: str) -> Dict[str, Any]:
        return await self.get(f"/clips/{path_param(id)}")

    async def submit(self, data: Payload) -> Dict[str, Any]:
        """Submit a clip to a campaign.

        :param data: Clip data, at least ``campaignId``, ``title`` and ``videoUrl``
        :type data: SubmitClipData
        :return: The created clip, usually in ``pending`` review status
        :rtype: Dict[str, Any]
        """
        return await self.post("/clips", json=data)

    async def update_status(
        self, id: str, status: str, reason: Optional[str] = None
    ) -> Dict[str, Any]:
        """Approve or reject a clip.

        :param id: Clip ID
        :type id: str
        :param status: New review status (e.g. ``"approved"``, ``"rejected"``)
        :type status: str
        :param reason: Optional explanation shown to the editor
        :type reason: Optional[str]
        :return: The updated clip
        :rtype: Dict[str, Any]
        """
        return await self.patch(
            f"/clips/{path_param(id)}/status",
            json={"status": status, "reason": reason},
        )

    async def get_stats(self, id: str) -> Dict[str, Any]:
        """Return current view/engagement statistics for a clip."""
        return await self.get(f"/clips/{path_param(id)}/stats")

    async def get_stats_history(self, id: str) -> List[Dict[str, Any]]:
        """Return the time series of statistic snapshots for a clip."""
        return await self.get(f"/clips/{path_param(id)}/stats/history")
