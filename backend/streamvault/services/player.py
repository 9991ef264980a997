"""
Player source resolution.

Decides which stored URL the player page plays for a content item (a specific
episode, the movie file, the first episode of a web series, a show's URL) and
normalizes it with the embed resolver.
"""

from typing import Any, Optional

from pydantic import ValidationError as SchemaValidationError

from streamvault.core.exceptions import StreamVaultError
from streamvault.core.logging import get_logger
from streamvault.db.repositories import ContentStore
from streamvault.schemas.content import (
    ContentItem,
    Episode,
    MovieContent,
    PlayerSource,
    ShowContent,
    WebSeriesContent,
)
from streamvault.services.embed import resolve_embed
from streamvault.services.strategies import first_present

logger = get_logger(__name__)


def _episode_url(content: ContentItem, episode: Optional[Episode]) -> Optional[str]:
    return episode.video_url if episode else None


def _movie_url(content: ContentItem, episode: Optional[Episode]) -> Optional[str]:
    if isinstance(content, MovieContent) and content.movie:
        return content.movie.video_url
    return None


def _first_episode_url(content: ContentItem, episode: Optional[Episode]) -> Optional[str]:
    if isinstance(content, WebSeriesContent):
        season = content.first_season
        if season and season.episodes:
            return season.episodes[0].video_url
    return None


def _show_url(content: ContentItem, episode: Optional[Episode]) -> Optional[str]:
    if isinstance(content, ShowContent) and content.show and content.show.episode_id_list:
        return content.video_url
    return None


def _content_url(content: ContentItem, episode: Optional[Episode]) -> Optional[str]:
    return content.video_url


VIDEO_URL_STRATEGIES = (
    _episode_url,
    _movie_url,
    _first_episode_url,
    _show_url,
    _content_url,
)


def resolve_video_url(content: ContentItem, episode: Optional[Episode] = None) -> str:
    """
    Pick the raw video source for ``content``.

    Precedence: the requested episode, the movie file, the first episode of
    the first season, a show's own URL, then any URL on the content envelope.
    """
    return first_present(VIDEO_URL_STRATEGIES, content, episode, default="")


class PlayerService:
    """
    Builds the PlayerSource for the player page.

    Example:
        >>> service = PlayerService(ContentStore(get_supabase_client()))
        >>> source = await service.resolve(content, episode_id=42)
        >>> source.embed_url
    """

    def __init__(self, content_store: ContentStore):
        self.content_store = content_store

    async def load_episode(self, episode_id: Any) -> Optional[Episode]:
        """
        Fetch one episode row.

        Lookup failures are logged and yield None so the player falls back
        to the content's own source.
        """
        try:
            row = await self.content_store.get_episode(episode_id)
        except StreamVaultError as e:
            logger.error(
                "episode_lookup_failed",
                episode_id=episode_id,
                error=e.message,
                error_type=type(e).__name__,
            )
            return None

        if row is None:
            logger.info("episode_not_found", episode_id=episode_id)
            return None

        try:
            return Episode.model_validate(row)
        except SchemaValidationError as e:
            logger.error("episode_row_invalid", episode_id=episode_id, error=str(e))
            return None

    async def resolve(self, content: ContentItem, episode_id: Any = None) -> PlayerSource:
        episode = await self.load_episode(episode_id) if episode_id is not None else None
        video_url = resolve_video_url(content, episode)
        resolution = resolve_embed(video_url)

        logger.debug(
            "player_source_resolved",
            content_id=content.id,
            content_type=content.content_type,
            episode_id=episode_id,
            is_embed_code=resolution.is_embed_code,
        )

        return PlayerSource(
            video_url=video_url,
            embed_url=resolution.embed_url,
            is_embed_code=resolution.is_embed_code,
            episode=episode,
        )
