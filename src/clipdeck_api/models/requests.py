"""Request models for the Clipdeck API resources.

Every model can be replaced by a plain dict using the camelCase wire
names. Fields left unset are not sent; a field explicitly set to None is
sent as ``null`` so it can be cleared on the server.
"""

from typing import Dict, List, Optional

from pydantic import Field

from .base_models import CamelModel


# Campaign Models
class CampaignListFilters(CamelModel):
    """Filters for listing campaigns.

    :param status: Campaign status (e.g. ``"active"``, ``"draft"``)
    :type status: Optional[str]
    :param page: Page number, 1-indexed
    :type page: Optional[int]
    :param limit: Maximum results per page
    :type limit: Optional[int]
    """

    status: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None


class CreateCampaignData(CamelModel):
    """Data for creating a campaign."""

    title: str
    description: str
    game_id: Optional[str] = None
    budget: Optional[float] = None
    max_participants: Optional[int] = None
    start_date: Optional[str] = Field(None, description="ISO 8601 date")
    end_date: Optional[str] = Field(None, description="ISO 8601 date")
    requirements: Optional[str] = None
    tags: Optional[List[str]] = None


class UpdateCampaignData(CamelModel):
    """Partial campaign update; only provided fields are sent."""

    title: Optional[str] = None
    description: Optional[str] = None
    budget: Optional[float] = None
    max_participants: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    requirements: Optional[str] = None
    tags: Optional[List[str]] = None


# Clip Models
class ClipListFilters(CamelModel):
    campaign_id: Optional[str] = None
    editor_id: Optional[str] = None
    status: Optional[str] = Field(
        None, description="Review status (pending, approved, rejected)"
    )
    page: Optional[int] = None
    limit: Optional[int] = None


class SubmitClipData(CamelModel):
    """Data for submitting a clip to a campaign.

    :param campaign_id: Campaign the clip is submitted to
    :type campaign_id: str
    :param title: Clip title
    :type title: str
    :param video_url: URL of the hosted video
    :type video_url: str
    :param duration: Clip length in seconds
    :type duration: Optional[float]
    :param platform: Source platform (e.g. ``"twitch"``, ``"youtube"``)
    :type platform: Optional[str]
    """

    campaign_id: str
    title: str
    description: Optional[str] = None
    video_url: str
    thumbnail_url: Optional[str] = None
    duration: Optional[float] = None
    platform: Optional[str] = None


# User Models
class UpdateUserData(CamelModel):
    display_name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None


class UpdateProfileData(CamelModel):
    bio: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None
    skills: Optional[List[str]] = None
    timezone: Optional[str] = None
    language: Optional[str] = None


# Notification Models
class NotificationListParams(CamelModel):
    page: Optional[int] = None
    limit: Optional[int] = None
    unread_only: Optional[bool] = None
    type: Optional[str] = None


# Balance Models
class TransactionListParams(CamelModel):
    """Filters for listing balance transactions.

    :param type: Transaction type (e.g. ``"earning"``, ``"payout"``, ``"bonus"``)
    :type type: Optional[str]
    :param start_date: Lower bound, ISO 8601
    :type start_date: Optional[str]
    :param end_date: Upper bound, ISO 8601
    :type end_date: Optional[str]
    """

    page: Optional[int] = None
    limit: Optional[int] = None
    type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class RequestPayoutData(CamelModel):
    """Payout request.

    :param amount: Amount in platform currency
    :type amount: float
    :param method: Payout method (e.g. ``"paypal"``, ``"bank_transfer"``)
    :type method: str
    :param details: Method-specific details such as an account email
    :type details: Dict[str, str]
    """

    amount: float
    method: str
    details: Dict[str, str]


# Studio Models
class StudioListFilters(CamelModel):
    page: Optional[int] = None
    limit: Optional[int] = None
    search: Optional[str] = None
    sort_by: Optional[str] = None


class CreateStudioData(CamelModel):
    name: str
    slug: str
    description: Optional[str] = None
    avatar_url: Optional[str] = None
    website: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None


class UpdateStudioData(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    avatar_url: Optional[str] = None
    website: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None


# Dispute Models
class DisputeListFilters(CamelModel):
    status: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None


class CreateDisputeData(CamelModel):
    """Data for opening a dispute about a clip.

    :param clip_id: Disputed clip
    :type clip_id: str
    :param reason: Short reason code
    :type reason: str
    :param description: Free-form explanation
    :type description: str
    :param evidence: URLs supporting the dispute
    :type evidence: Optional[List[str]]
    """

    clip_id: str
    reason: str
    description: str
    evidence: Optional[List[str]] = None
