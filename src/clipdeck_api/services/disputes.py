"""Dispute endpoints."""

from typing import Any, Dict, List, Optional

from ..utils.payload import Payload, path_param
from .base import BaseClient


class DisputeClient(BaseClient):
    async def list(self, filters: Optional[Payload] = None) -> Dict[str, Any]:
        return await self.get("/disputes", params=filters)

    async def get_by_id(self, id: str) -> Dict[str, Any]:
        return await self.get(f"/disputes/{path_param(id)}")

    async def create(self, data: Payload) -> Dict[str, Any]:
        """Open a dispute about a clip.

        :param data: :class:`CreateDisputeData` or a dict
        :type data: CreateDisputeData
        :return: The created dispute
        :rtype: Dict[str, Any]
        """
        return await self.post("/disputes", json=data)

    async def get_mine(self) -> List[Dict[str, Any]]:
        return await self.get("/disputes/mine")

    async def resolve(
        self, id: str, action: str, notes: Optional[str] = None
    ) -> Dict[str, Any]:
        """Resolve a dispute.

        :param id: Dispute ID
        :type id: str
        :param action: Resolution action (e.g. ``"approve"``, ``"reject"``)
        :type action: str
        :param notes: Optional resolution notes
        :type notes: Optional[str]
        :return: The resolved dispute
        :rtype: Dict[str, Any]
        """
        return await self.post(
            f"/disputes/{path_param(id)}/resolve",
            json={"action": action, "notes": notes},
        )
