"""Clipdeck API models package.

Request models for each resource family plus the shared pagination
envelope.
"""

from .base_models import CamelModel, PaginatedResponse
from .requests import (
    CampaignListFilters,
    ClipListFilters,
    CreateCampaignData,
    CreateDisputeData,
    CreateStudioData,
    DisputeListFilters,
    NotificationListParams,
    RequestPayoutData,
    StudioListFilters,
    SubmitClipData,
    TransactionListParams,
    UpdateCampaignData,
    UpdateProfileData,
    UpdateStudioData,
    UpdateUserData,
)

__all__ = [
    "CamelModel",
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
