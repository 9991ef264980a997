"""
Home page hero selection.

Picks the newest catalog item flagged for the home hero slot and projects it
into a HeroDisplay. Movies carry the flag on the movie record; web series
carry it on their first season. Pure functions over already-loaded content.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple, Union

from streamvault.core.config import settings
from streamvault.schemas.content import (
    ContentItem,
    HeroDisplay,
    MovieContent,
    MovieDetails,
    WebSeriesContent,
    WebSeriesSeason,
)
from streamvault.services.strategies import first_present

HeroDetails = Union[MovieDetails, WebSeriesSeason, None]

PLACEHOLDER_HERO = HeroDisplay(
    id=1,
    title="Welcome to StreamVault",
    description="Discover amazing movies, web series, and shows. Upload your content to get started.",
    rating="TV-PG",
    year="2024",
    score="9.0",
    image="/placeholder.svg",
    type="Platform",
    video_url="",
)

DEFAULT_DESCRIPTION = "No description available"
DEFAULT_RATING = "TV-PG"
DEFAULT_YEAR = "2024"
DEFAULT_SCORE = "8.0"
DEFAULT_IMAGE = "/placeholder.svg"
DEFAULT_SEASON_NUMBER = 1

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


# Each strategy takes (item, details); details is the movie record or first season.
DESCRIPTION_STRATEGIES = (
    lambda item, details: getattr(details, "description", None),
    lambda item, details: getattr(details, "season_description", None),
    lambda item, details: item.description,
)
RATING_STRATEGIES = (
    lambda item, details: getattr(details, "rating_type", None),
)
YEAR_STRATEGIES = (
    lambda item, details: _as_text(getattr(details, "release_year", None)),
    lambda item, details: str(item.created_at.year) if item.created_at else None,
)
SCORE_STRATEGIES = (
    lambda item, details: _as_text(getattr(details, "rating", None)),
)
IMAGE_STRATEGIES = (
    lambda item, details: getattr(details, "thumbnail_url", None),
)
SEASON_NUMBER_STRATEGIES = (
    lambda item, details: getattr(item, "season_number", None),
    lambda item, details: getattr(details, "season_number", None),
)


def _as_text(value) -> Optional[str]:
    """Render numbers the way the storefront does: 8.0 becomes "8"."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _hero_details(item: ContentItem) -> HeroDetails:
    if isinstance(item, MovieContent):
        return item.movie
    if isinstance(item, WebSeriesContent):
        return item.first_season
    return None


def _hero_video_url(item: ContentItem) -> str:
    if isinstance(item, MovieContent):
        return (item.movie.video_url if item.movie else None) or ""
    if isinstance(item, WebSeriesContent):
        season = item.first_season
        if season and season.episodes:
            return season.episodes[0].video_url or ""
    return ""


def is_hero_candidate(item: ContentItem, tag: Optional[str] = None) -> bool:
    """Whether ``item`` is flagged for the hero slot."""
    tag = tag or settings.HERO_FEATURE_TAG
    if not isinstance(item, (MovieContent, WebSeriesContent)):
        return False
    details = _hero_details(item)
    return bool(details and details.feature_in and tag in details.feature_in)


def _recency_key(item: ContentItem) -> Tuple[bool, datetime]:
    created_at = item.created_at
    if created_at is None:
        return False, _EPOCH
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return True, created_at


def select_hero_content(
    items: Iterable[ContentItem],
    tag: Optional[str] = None,
) -> Optional[ContentItem]:
    """
    Return the newest hero-flagged item, or None.

    Ties on ``created_at`` keep input order; items without a timestamp rank
    after every dated item.
    """
    candidates: List[ContentItem] = [item for item in items if is_hero_candidate(item, tag)]
    if not candidates:
        return None
    # sorted() is stable, also with reverse=True
    return sorted(candidates, key=_recency_key, reverse=True)[0]


def to_hero_display(item: ContentItem) -> HeroDisplay:
    """Project a content item into display fields, defaulting every gap."""
    details = _hero_details(item)
    is_series = isinstance(item, WebSeriesContent)

    return HeroDisplay(
        id=item.id,
        title=item.title,
        description=first_present(DESCRIPTION_STRATEGIES, item, details, default=DEFAULT_DESCRIPTION),
        rating=first_present(RATING_STRATEGIES, item, details, default=DEFAULT_RATING),
        year=first_present(YEAR_STRATEGIES, item, details, default=DEFAULT_YEAR),
        score=first_present(SCORE_STRATEGIES, item, details, default=DEFAULT_SCORE),
        image=first_present(IMAGE_STRATEGIES, item, details, default=DEFAULT_IMAGE),
        type="series" if is_series else item.content_type,
        season_number=first_present(
            SEASON_NUMBER_STRATEGIES, item, details, default=DEFAULT_SEASON_NUMBER
        ),
        video_url=_hero_video_url(item),
        navigation_id=item.content_id if item.content_id is not None else item.id,
    )


def select_hero(items: Iterable[ContentItem], tag: Optional[str] = None) -> HeroDisplay:
    """
    Pick the home page hero from mixed movie and web-series content.

    Args:
        items: Catalog items in display order (movies first, then web series)
        tag: Feature tag to look for; defaults to settings.HERO_FEATURE_TAG

    Returns:
        HeroDisplay of the newest flagged item, or the platform placeholder
    """
    content = select_hero_content(items, tag)
    if content is None:
        return PLACEHOLDER_HERO.model_copy()
    return to_hero_display(content)
