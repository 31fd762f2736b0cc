import logging
from typing import Optional

from blogsite.settings import Settings, settings

logger = logging.getLogger(__name__)

ABSOLUTE_URL_PREFIX = "http"


def resolve_cover_url(cover: str, images_path: Optional[str] = None) -> str:
    """
    Resolve a frontmatter cover to the URL it is served from.
    Absolute URLs and root-relative paths pass through; bare filenames
    live under the blog images directory.
    """
    if images_path is None:
        images_path = settings.BLOG_IMAGES_PATH

    if cover.startswith(ABSOLUTE_URL_PREFIX):
        return cover
    if cover.startswith("/"):
        return cover
    return f"{images_path.rstrip('/')}/{cover}"


def cover_src(cover: str, current_settings: Optional[Settings] = None) -> str:
    """
    Final ``src`` for a cover image, with the asset prefix applied to local paths.
    """
    current_settings = current_settings or settings
    url = resolve_cover_url(cover, current_settings.BLOG_IMAGES_PATH)
    if url.startswith(ABSOLUTE_URL_PREFIX):
        return url
    src = current_settings.asset_url(url)
    logger.debug(f"Resolved cover image: {cover} -> {src}")
    return src
