"""Notification endpoints."""

from typing import Any, Dict, Optional

from ..utils.payload import Payload, path_param
from .base import BaseClient


class NotificationClient(BaseClient):
    async def list(self, params: Optional[Payload] = None) -> Dict[str, Any]:
        """List notifications.

        :param params: :class:`NotificationListParams` or a dict; use
            ``unreadOnly`` to skip read notifications
        :type params: Optional[NotificationListParams]
        :return: Paginated envelope
        :rtype: Dict[str, Any]
        """
        return await self.get("/notifications", params=params)

    async def get_unread_count(self) -> Dict[str, Any]:
        """Return ``{"count": <int>}``."""
        return await self.get("/notifications/unread/count")

    async def mark_as_read(self, id: Optional[str] = None) -> None:
        """Mark one notification as read, or the server's default set when no id is given.

        :param id: Notification ID
        :type id: Optional[str]
        """
        if id:
            await self.patch(f"/notifications/{path_param(id)}/read")
        else:
            await self.patch("/notifications/read")

    async def mark_all_as_read(self) -> None:
        await self.patch("/notifications/read-all")

    async def remove(self, id: str) -> None:
        await self.delete(f"/notifications/{path_param(id)}")
