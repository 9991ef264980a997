"""
Pydantic schemas for request/response validation.

Import all schemas here for easy access.
"""

from streamvault.schemas.advertisement import (
    AdvertisementRequestCreate,
    AdvertisementRequestResponse,
    ErrorResponse,
    RecentRequestCheck,
    RecentRequestCheckResponse,
    SuccessResponse,
)
from streamvault.schemas.content import (
    ContentItem,
    EmbedRequest,
    EmbedResolution,
    Episode,
    HeroDisplay,
    HeroRequest,
    MovieContent,
    PlayerSource,
    PlayerSourceRequest,
    ShowContent,
    WebSeriesContent,
)

__all__ = [
    # Advertisement requests
    "AdvertisementRequestCreate",
    "AdvertisementRequestResponse",
    "RecentRequestCheck",
    "RecentRequestCheckResponse",
    "SuccessResponse",
    "ErrorResponse",
    # Content
    "ContentItem",
    "MovieContent",
    "WebSeriesContent",
    "ShowContent",
    "Episode",
    "HeroRequest",
    "HeroDisplay",
    "EmbedRequest",
    "EmbedResolution",
    "PlayerSourceRequest",
    "PlayerSource",
]
