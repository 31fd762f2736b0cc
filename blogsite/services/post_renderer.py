import datetime
import logging
import math
import re
from pathlib import Path
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from blogsite.schemas.blog import Post, PostSummary, ReadingStats
from blogsite.services.image_service import cover_src
from blogsite.settings import Settings, settings
from blogsite.theme import Theme, theme

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
TAG_PATTERN = re.compile(r"<[^>]*>")
WORDS_PER_MINUTE = 200
DEFAULT_TITLE = "Blog Post"


def compute_reading_stats(
    content_html: Optional[str], words_per_minute: int = WORDS_PER_MINUTE
) -> ReadingStats:
    if not content_html:
        return ReadingStats(wordCount=0, readingTimeMinutes=0)
    words = TAG_PATTERN.sub("", content_html).split()
    return ReadingStats(
        wordCount=len(words),
        readingTimeMinutes=math.ceil(len(words) / words_per_minute),
    )


def format_date(value: Optional[str]) -> str:
    """Format an ISO date as ``Jan 5, 2024``; unparseable values are shown as-is."""
    if not value:
        return ""
    try:
        # fromisoformat only accepts a "Z" suffix from Python 3.11 on
        normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
        parsed = datetime.datetime.fromisoformat(normalized)
    except ValueError:
        logger.warning(f"Unparseable post date: {value!r}")
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def build_environment(
    current_settings: Settings, current_theme: Theme
) -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_date"] = format_date
    env.globals.update(
        site_name=current_settings.SITE_NAME,
        site_url=current_settings.site_url,
        asset_url=current_settings.asset_url,
        cover_src=lambda cover: cover_src(cover, current_settings),
        theme_css=Markup(current_theme.to_css(current_settings.asset_url)),
    )
    return env


class PostRenderer:
    def __init__(
        self,
        current_settings: Optional[Settings] = None,
        current_theme: Optional[Theme] = None,
    ):
        self.settings = current_settings or settings
        self.env = build_environment(self.settings, current_theme or theme)

    def render(self, post: Post, related_posts: Sequence[PostSummary] = ()) -> str:
        stats = compute_reading_stats(post.contentHtml, self.settings.WORDS_PER_MINUTE)
        template = self.env.get_template("blog/post.html")
        return template.render(
            post=post,
            title=post.title or DEFAULT_TITLE,
            # converted by the markdown library; emitted verbatim
            content_html=Markup(post.contentHtml) if post.contentHtml else None,
            stats=stats,
            related_posts=list(related_posts)[: self.settings.RELATED_POSTS_LIMIT],
        )

    def render_index(self, summaries: List[PostSummary]) -> str:
        return self.env.get_template("blog/index.html").render(posts=summaries)

    def render_not_found(self) -> str:
        return self.env.get_template("404.html").render()
