"""
Media URL normalization for the player.

Turns whatever a content record stores as its video source (a YouTube or
Vimeo page URL, a pasted ``<iframe>`` snippet, a direct video file, any other
embeddable URL) into the URL the player loads and whether it goes in an
iframe or a native ``<video>`` element.
"""

import logging
import re
from typing import Callable, Optional, Sequence

from streamvault.schemas.content import EmbedResolution

logger = logging.getLogger(__name__)


YOUTUBE_EMBED_TEMPLATE = (
    "https://www.youtube.com/embed/{video_id}"
    "?autoplay=0&controls=1&rel=0&modestbranding=1&showinfo=0&iv_load_policy=3"
)
VIMEO_EMBED_TEMPLATE = (
    "https://player.vimeo.com/video/{video_id}"
    "?autoplay=0&title=0&byline=0&portrait=0&pip=0"
)
VIDEO_FILE_EXTENSIONS = (".mp4", ".webm", ".ogg")

IFRAME_SRC_PATTERN = re.compile(r"""src=["']([^"']+)["']""")

UNRESOLVED = EmbedResolution(embed_url="", is_embed_code=False)

Rule = Callable[[str], Optional[EmbedResolution]]


# ========================================
# Video ID Extraction
# ========================================

def extract_youtube_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a youtu.be or youtube.com/watch URL.

    Example:
        >>> extract_youtube_id("https://youtu.be/abc123?t=5")
        'abc123'
        >>> extract_youtube_id("https://www.youtube.com/watch?v=abc123&list=x")
        'abc123'
    """
    if "youtu.be/" in url:
        video_id = url.split("youtu.be/", 1)[1].split("?")[0]
    elif "youtube.com/watch?v=" in url:
        video_id = url.split("v=", 1)[1].split("&")[0]
    else:
        return None
    return video_id or None


def extract_vimeo_id(url: str) -> Optional[str]:
    """The last path segment of a Vimeo URL, without its query string."""
    video_id = url.split("/")[-1].split("?")[0]
    return video_id or None


# ========================================
# Classification Rules
# ========================================

def _empty_input(raw: str) -> Optional[EmbedResolution]:
    if not raw:
        return UNRESOLVED
    return None


def _iframe_snippet(raw: str) -> Optional[EmbedResolution]:
    if "<iframe" not in raw or "src=" not in raw:
        return None
    match = IFRAME_SRC_PATTERN.search(raw)
    if match:
        return EmbedResolution(embed_url=match.group(1), is_embed_code=True)
    return None


def _youtube(url: str) -> Optional[EmbedResolution]:
    if "youtube.com" not in url and "youtu.be" not in url:
        return None

    has_id_form = "youtu.be/" in url or "youtube.com/watch?v=" in url
    if not has_id_form and "youtube.com/embed/" in url:
        # Already a player URL
        return EmbedResolution(embed_url=url, is_embed_code=True)

    video_id = extract_youtube_id(url)
    if video_id:
        return EmbedResolution(
            embed_url=YOUTUBE_EMBED_TEMPLATE.format(video_id=video_id),
            is_embed_code=True,
        )
    return None


def _vimeo(url: str) -> Optional[EmbedResolution]:
    if "vimeo.com" not in url:
        return None
    video_id = extract_vimeo_id(url)
    if video_id:
        return EmbedResolution(
            embed_url=VIMEO_EMBED_TEMPLATE.format(video_id=video_id),
            is_embed_code=True,
        )
    return None


def _video_file(url: str) -> Optional[EmbedResolution]:
    if any(extension in url for extension in VIDEO_FILE_EXTENSIONS):
        return EmbedResolution(embed_url=url, is_embed_code=False)
    return None


def _generic_iframe(url: str) -> Optional[EmbedResolution]:
    return EmbedResolution(embed_url=url, is_embed_code=True)


URL_RULES: Sequence[Rule] = (_youtube, _vimeo, _video_file, _generic_iframe)


def _http_url(raw: str) -> Optional[EmbedResolution]:
    if not raw.startswith("http"):
        return None
    for rule in URL_RULES:
        resolution = rule(raw)
        if resolution is not None:
            return resolution
    return None


RULES: Sequence[Rule] = (_empty_input, _iframe_snippet, _http_url)


def resolve_embed(raw: Optional[str]) -> EmbedResolution:
    """
    Classify a media source and rewrite known providers to their player URL.

    Rules are tried in order and the first match wins:

    1. Empty input → ``("", False)``
    2. ``<iframe ... src="...">`` snippet → the quoted src, iframe
    3. ``http...`` URL:
       - YouTube (youtu.be/ID, youtube.com/watch?v=ID) → canonical embed URL;
         youtube.com/embed/ URLs pass through unchanged
       - Vimeo → player.vimeo.com/video/ID
       - .mp4 / .webm / .ogg → unchanged, native video element
       - anything else → unchanged, iframe
    4. Anything else → ``("", False)``

    Args:
        raw: URL or HTML snippet as stored on the content record

    Returns:
        EmbedResolution with the URL to load and whether it is iframe content
    """
    raw = raw or ""
    for rule in RULES:
        resolution = rule(raw)
        if resolution is not None:
            return resolution

    logger.debug("Unrecognized embed source (%d chars), leaving player blank", len(raw))
    return UNRESOLVED
