"""User, profile and referral endpoints."""

from typing import Any, Dict, List, Optional

from ..utils.payload import Payload, path_param
from .base import BaseClient


class UserClient(BaseClient):
    """Client for ``/users``.

    Methods named ``*_me`` and the profile/referral helpers act on the
    authenticated user; the others look up arbitrary users.
    """

    async def get_me(self) -> Dict[str, Any]:
        return await self.get("/users/me")

    async def update_me(self, data: Payload) -> Dict[str, Any]:
        """Update the authenticated user's account fields.

        :param data: :class:`UpdateUserData` or a dict
        :type data: UpdateUserData
        :return: The updated user
        :rtype: Dict[str, Any]
        """
        return await self.patch("/users/me", json=data)

    async def get_profile(self) -> Dict[str, Any]:
        return await self.get("/users/me/profile")

    async def update_profile(self, data: Payload) -> Dict[str, Any]:
        """Update the authenticated user's public profile.

        :param data: :class:`UpdateProfileData` or a dict
        :type data: UpdateProfileData
        :return: The updated profile
        :rtype: Dict[str, Any]
        """
        return await self.patch("/users/me/profile", json=data)

    async def get_by_id(self, id: str) -> Dict[str, Any]:
        return await self.get(f"/users/{path_param(id)}")

    async def get_by_username(self, username: str) -> Dict[str, Any]:
        return await self.get(f"/users/username/{path_param(username)}")

    async def search(
        self, query: str, limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Search users by name.

        :param query: Search text
        :type query: str
        :param limit: Maximum number of results
        :type limit: Optional[int]
        :return: Matching users
        :rtype: List[Dict[str, Any]]
        """
        return await self.get(
            "/users/search", params={"query": query, "limit": limit}
        )

    # Referrals
    async def get_referral_stats(self) -> Dict[str, Any]:
        return await self.get("/users/me/referrals")

    async def generate_referral_code(self) -> Dict[str, Any]:
        return await self.post("/users/me/referrals/generate")

    async def apply_referral(self, code: str) -> Dict[str, Any]:
        """Redeem another user's referral code for the authenticated user."""
        return await self.post("/users/me/referrals/apply", json={"code": code})
