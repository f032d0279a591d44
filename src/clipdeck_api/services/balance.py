"""Balance, transaction and payout endpoints.

Examples:
    >>> balance = await client.balance.get_balance()
    >>> payout = await client.balance.request_payout(
    ...     RequestPayoutData(amount=50.0, method="paypal", details={"email": "me@example.com"})
    ... )
"""

from typing import Any, Dict, Optional

from ..utils.payload import Payload
from .base import BaseClient


class BalanceClient(BaseClient):
    """Client for the authenticated user's ``/balance``."""

    async def get_balance(self) -> Dict[str, Any]:
        """Return the current balance (available and pending amounts).

        :return: Balance record
        :rtype: Dict[str, Any]
        """
        return await self.get("/balance")

    async def get_transactions(
        self, params: Optional[Payload] = None
    ) -> Dict[str, Any]:
        """List balance transactions (earnings, payouts, bonuses).

        :param params: :class:`TransactionListParams` or a dict
        :type params: Optional[TransactionListParams]
        :return: Paginated envelope of transactions
        :rtype: Dict[str, Any]
        """
        return await self.get("/balance/transactions", params=params)

    async def request_payout(self, data: Payload) -> Dict[str, Any]:
        """Request a payout of available funds.

        :param data: Amount, method and method-specific details
        :type data: RequestPayoutData
        :return: The created payout request
        :rtype: Dict[str, Any]
        :raises ApiError: ``VALIDATION_ERROR`` if the amount exceeds the
            available balance
        """
        return await self.post("/balance/payouts", json=data)
