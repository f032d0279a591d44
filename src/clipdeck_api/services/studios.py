"""Studio endpoints.

Studios are teams of editors; they are addressed by their URL slug
rather than by ID.
"""

from typing import Any, Dict, List, Optional

from ..utils.payload import Payload, path_param
from .base import BaseClient


class StudioClient(BaseClient):
    """Client for the ``/studios`` resource family."""

    async def list(self, filters: Optional[Payload] = None) -> Dict[str, Any]:
        """List studios.

        :param filters: :class:`StudioListFilters` or a dict (``search``,
            ``sortBy`` and pagination)
        :type filters: Optional[StudioListFilters]
        :return: Paginated envelope
        :rtype: Dict[str, Any]
        """
        return await self.get("/studios", params=filters)

    async def get_by_slug(self, slug: str) -> Dict[str, Any]:
        return await self.get(f"/studios/{path_param(slug)}")

    async def create(self, data: Payload) -> Dict[str, Any]:
        """Create a studio owned by the authenticated user.

        :param data: :class:`CreateStudioData` or a dict
        :type data: CreateStudioData
        :return: The created studio
        :rtype: Dict[str, Any]
        :raises ApiError: ``CONFLICT`` if the slug is taken
        """
        return await self.post("/studios", json=data)

    async def update(self, slug: str, data: Payload) -> Dict[str, Any]:
        return await self.patch(f"/studios/{path_param(slug)}", json=data)

    async def remove(self, slug: str) -> None:
        """Permanently delete a studio. Only owners may do this."""
        await self.delete(f"/studios/{path_param(slug)}")

    async def get_members(self, slug: str) -> List[Dict[str, Any]]:
        return await self.get(f"/studios/{path_param(slug)}/members")

    async def join(self, slug: str) -> Dict[str, Any]:
        return await self.post(f"/studios/{path_param(slug)}/join")

    async def leave(self, slug: str) -> None:
        await self.post(f"/studios/{path_param(slug)}/leave")

    async def rate(
        self, slug: str, rating: int, review: Optional[str] = None
    ) -> Dict[str, Any]:
        """Rate a studio.

        :param slug: Studio slug
        :type slug: str
        :param rating: Rating value (1-5)
        :type rating: int
        :param review: Optional written review
        :type review: Optional[str]
        :return: The stored rating
        :rtype: Dict[str, Any]
        """
        return await self.post(
            f"/studios/{path_param(slug)}/rate",
            json={"rating": rating, "review": review},
        )

    async def get_invites(self) -> List[Dict[str, Any]]:
        """Return pending studio invitations for the authenticated user."""
        return await self.get("/studios/invites")
