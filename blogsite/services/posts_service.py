import datetime
import logging
from typing import Iterable, List, Optional, Set

import frontmatter
import markdown

from blogsite.repos.posts_repo import FilePostsRepo
from blogsite.schemas.blog import Post, PostSummary

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]
RELATED_POSTS_LIMIT = 3


class PostsService:
    def __init__(self, repo: FilePostsRepo):
        self.repo = repo

    def list_slugs(self) -> Set[str]:
        return self.repo.list_slugs()

    def list_summaries(self) -> List[PostSummary]:
        summaries = []
        for slug in self.repo.list_ordered_slugs():
            text = self.repo.read_post_file(slug)
            summaries.append(
                PostSummary(**parse_post_data(text, slug, include_content=False))
            )
        return summaries

    def load_post(self, slug: str) -> Post:
        text = self.repo.read_post_file(slug)
        return Post(**parse_post_data(text, slug, include_content=True))


def related_to(
    slug: str, summaries: Iterable[PostSummary], limit: int = RELATED_POSTS_LIMIT
) -> List[PostSummary]:
    """First ``limit`` summaries other than ``slug``, in enumeration order."""
    others = [summary for summary in summaries if summary.slug != slug]
    return others[:limit]


def parse_post_data(text: str, slug: str, include_content: bool = False) -> dict:
    """Parse frontmatter and return standardized post data"""
    parsed = frontmatter.loads(text)
    metadata = parsed.metadata or {}
    logger.debug(f"Parsed frontmatter for {slug}: {sorted(metadata)}")

    post_data = {
        "slug": slug,
        "title": _text_or_empty(metadata.get("title")),
        "date": _text_or_empty(metadata.get("date")),
        "excerpt": _text_or_empty(metadata.get("excerpt")),
        "category": _text_or_none(metadata.get("category")),
        "cover": _text_or_none(metadata.get("cover")),
    }

    if include_content:
        post_data["content"] = parsed.content
        post_data["contentHtml"] = render_markdown(parsed.content)

    return post_data


def render_markdown(content: str) -> str:
    return markdown.markdown(content, extensions=MARKDOWN_EXTENSIONS)


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


def _text_or_empty(value) -> str:
    if not value:
        return ""
    return str(_convert_date(value))


def _text_or_none(value) -> Optional[str]:
    if not value:
        return None
    return str(value)
