"""
Content presentation endpoints.

Hero selection and embed resolution are pure projections over data the
client already holds; the player source endpoint may additionally look up
an episode row.
"""

from fastapi import APIRouter, Depends

from streamvault.db.deps import CatalogStore
from streamvault.schemas.content import (
    EmbedRequest,
    EmbedResolution,
    HeroDisplay,
    HeroRequest,
    PlayerSource,
    PlayerSourceRequest,
)
from streamvault.services.embed import resolve_embed
from streamvault.services.hero import select_hero
from streamvault.services.player import PlayerService

router = APIRouter(prefix="/content", tags=["Content"])


def get_player_service(store: CatalogStore) -> PlayerService:
    return PlayerService(store)


@router.post(
    "/hero",
    response_model=HeroDisplay,
    summary="Select the home page hero",
    description=(
        "Picks the newest movie or web-series season tagged 'Home Hero'. "
        "Returns a platform placeholder when nothing is tagged."
    ),
)
async def hero(request: HeroRequest) -> HeroDisplay:
    return select_hero([*request.movies, *request.web_series])


@router.post(
    "/embed",
    response_model=EmbedResolution,
    summary="Normalize a media URL or iframe snippet",
)
async def embed(request: EmbedRequest) -> EmbedResolution:
    return resolve_embed(request.raw)


@router.post(
    "/player-source",
    response_model=PlayerSource,
    summary="Resolve what the player should load",
)
async def player_source(
    request: PlayerSourceRequest,
    service: PlayerService = Depends(get_player_service),
) -> PlayerSource:
    return await service.resolve(request.content, episode_id=request.episode_id)
