"""
Pydantic schemas for catalog content, hero selection and media playback.

Content records arrive in the shape the catalog stores them: a common
envelope (id, title, created_at, ...) tagged by ``content_type`` with the
variant-specific record nested under ``movie``, ``web_series`` or ``show``.
"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


Identifier = Union[int, str]


# ========================================
# Catalog Records
# ========================================

class Episode(BaseModel):
    """A single playable episode."""

    model_config = ConfigDict(extra="ignore")

    episode_id: Optional[Identifier] = None
    title: Optional[str] = None
    video_url: Optional[str] = None
    duration: Optional[Union[int, float, str]] = None


class MovieDetails(BaseModel):
    """Movie-specific fields."""

    model_config = ConfigDict(extra="ignore")

    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None
    rating_type: Optional[str] = Field(None, examples=["PG-13"])
    rating: Optional[Union[int, float]] = Field(None, examples=[8.4])
    release_year: Optional[Union[int, str]] = Field(None, examples=[2023])
    feature_in: Optional[List[str]] = Field(None, examples=[["Home Hero", "Trending"]])


class WebSeriesSeason(BaseModel):
    """One season of a web series."""

    model_config = ConfigDict(extra="ignore")

    description: Optional[str] = None
    season_description: Optional[str] = None
    season_number: Optional[int] = None
    thumbnail_url: Optional[str] = None
    rating_type: Optional[str] = None
    rating: Optional[Union[int, float]] = None
    release_year: Optional[Union[int, str]] = None
    episodes: List[Episode] = Field(default_factory=list)
    feature_in: Optional[List[str]] = None


class WebSeriesDetails(BaseModel):
    """Web-series record; each catalog entry carries a single season."""

    model_config = ConfigDict(extra="ignore")

    seasons: List[WebSeriesSeason] = Field(default_factory=list)
    season_id_list: Optional[List[Identifier]] = None


class ShowDetails(BaseModel):
    """Show record."""

    model_config = ConfigDict(extra="ignore")

    episode_id_list: Optional[List[Identifier]] = None


class _ContentEnvelope(BaseModel):
    """Fields shared by every content variant."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Identifier
    content_id: Optional[Identifier] = None
    title: str = ""
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    video_url: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("videoUrl", "video_url"),
    )


class MovieContent(_ContentEnvelope):
    content_type: Literal["Movie"]
    movie: Optional[MovieDetails] = None


class WebSeriesContent(_ContentEnvelope):
    content_type: Literal["Web Series"]
    web_series: Optional[WebSeriesDetails] = None
    season_number: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("seasonNumber", "season_number"),
    )

    @property
    def first_season(self) -> Optional[WebSeriesSeason]:
        if self.web_series and self.web_series.seasons:
            return self.web_series.seasons[0]
        return None


class ShowContent(_ContentEnvelope):
    content_type: Literal["Show"]
    show: Optional[ShowDetails] = None


ContentItem = Annotated[
    Union[MovieContent, WebSeriesContent, ShowContent],
    Field(discriminator="content_type"),
]


# ========================================
# Request Schemas
# ========================================

class HeroRequest(BaseModel):
    """Content lists the home page has already loaded."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    movies: List[ContentItem] = Field(default_factory=list)
    web_series: List[ContentItem] = Field(default_factory=list)


class EmbedRequest(BaseModel):
    """A media URL or HTML embed snippet to normalize."""

    raw: Optional[str] = Field(
        None,
        description="Media URL or <iframe> snippet",
        examples=["https://youtu.be/dQw4w9WgXcQ", '<iframe src="https://player.vimeo.com/video/1"></iframe>'],
    )


class PlayerSourceRequest(BaseModel):
    """Content to play, optionally narrowed to one episode."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: ContentItem
    episode_id: Optional[Identifier] = None


# ========================================
# Response Schemas
# ========================================

class HeroDisplay(BaseModel):
    """Display-ready summary of the home page hero."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Identifier
    title: str
    description: str
    rating: str
    year: str
    score: str
    image: str
    type: str
    season_number: Optional[int] = None
    video_url: str = ""
    navigation_id: Optional[Identifier] = None


class EmbedResolution(BaseModel):
    """Result of normalizing a media URL."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    embed_url: str = Field(..., description="URL to load, empty when unresolvable")
    is_embed_code: bool = Field(
        ...,
        description="True to render in an iframe, False to render a native video element",
    )


class PlayerSource(BaseModel):
    """What the player page should load."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    video_url: str
    embed_url: str
    is_embed_code: bool
    episode: Optional[Episode] = None
