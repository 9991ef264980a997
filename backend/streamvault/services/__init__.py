"""Business logic services."""

from streamvault.services.advertisements import AdvertisementRequestService
from streamvault.services.embed import resolve_embed
from streamvault.services.hero import select_hero, select_hero_content
from streamvault.services.player import PlayerService, resolve_video_url

__all__ = [
    "AdvertisementRequestService",
    "PlayerService",
    "resolve_embed",
    "resolve_video_url",
    "select_hero",
    "select_hero_content",
]
