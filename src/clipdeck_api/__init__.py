"""Async typed client for the Clipdeck REST API.

Quick start::

    from clipdeck_api import ClientConfig, ClipdeckClient

    config = ClientConfig(base_url="https://api.clipdeck.io", token_provider="tok_123")
    async with ClipdeckClient(config) as client:
        campaigns = await client.campaigns.list({"status": "active"})
"""

from .auth import (
    BaseTokenProvider,
    CallbackTokenProvider,
    StaticTokenProvider,
)
from .client import ClipdeckClient
from .config import ClientConfig, Settings
from .exceptions import ApiError, ClipdeckError, ConfigurationError
from .models import (
    CampaignListFilters,
    ClipListFilters,
    CreateCampaignData,
    CreateDisputeData,
    CreateStudioData,
    DisputeListFilters,
    NotificationListParams,
    PaginatedResponse,
    RequestPayoutData,
    StudioListFilters,
    SubmitClipData,
    TransactionListParams,
    UpdateCampaignData,
    UpdateProfileData,
    UpdateStudioData,
    UpdateUserData,
)
from .services import (
    BalanceClient,
    BaseClient,
    CampaignClient,
    ClipClient,
    DisputeClient,
    NotificationClient,
    StudioClient,
    UserClient,
)
from .utils.errors import ErrorCode, handle_api_error

__version__ = "0.1.0"

__all__ = [
    "ClipdeckClient",
    "ClientConfig",
    "Settings",
    # Errors
    "ClipdeckError",
    "ApiError",
    "ConfigurationError",
    "ErrorCode",
    "handle_api_error",
    # Auth
    "BaseTokenProvider",
    "StaticTokenProvider",
    "CallbackTokenProvider",
    # Clients
    "BaseClient",
    "CampaignClient",
    "ClipClient",
    "UserClient",
    "NotificationClient",
    "BalanceClient",
    "StudioClient",
    "DisputeClient",
    # Models
    "PaginatedResponse",
    "CampaignListFilters",
    "CreateCampaignData",
    "UpdateCampaignData",
    "ClipListFilters",
    "SubmitClipData",
    "UpdateUserData",
    "UpdateProfileData",
    "NotificationListParams",
    "TransactionListParams",
    "RequestPayoutData",
    "StudioListFilters",
    "CreateStudioData",
    "UpdateStudioData",
    "DisputeListFilters",
    "CreateDisputeData",
]
