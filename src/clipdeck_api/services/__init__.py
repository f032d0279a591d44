"""Resource clients for the Clipdeck API."""

from .balance import BalanceClient
from .base import BaseClient
from .campaigns import CampaignClient
from .clips import ClipClient
from .disputes import DisputeClient
from .notifications import NotificationClient
from .studios import StudioClient
from .users import UserClient

__all__ = [
    "BaseClient",
    "CampaignClient",
    "ClipClient",
    "UserClient",
    "NotificationClient",
    "BalanceClient",
    "StudioClient",
    "DisputeClient",
]
