import textwrap
from pathlib import Path

import pytest

from blogsite.schemas.blog import Post, PostSummary
from blogsite.settings import Settings


def write_post(posts_dir: Path, slug: str, raw: str) -> Path:
    """
    Write a markdown post, dedenting the raw text so tests can inline it.
    """
    posts_dir.mkdir(parents=True, exist_ok=True)
    path = posts_dir / f"{slug}.md"
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "POSTS_DIR": str(tmp_path / "blog"),
        "PUBLIC_DIR": str(tmp_path / "public"),
        "OUTPUT_DIR": str(tmp_path / "out"),
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def posts_dir(tmp_path) -> Path:
    path = tmp_path / "blog"
    path.mkdir()
    return path


@pytest.fixture
def site_settings(tmp_path, posts_dir) -> Settings:
    return make_settings(tmp_path)


def make_summary(slug: str, **fields) -> PostSummary:
    return PostSummary(slug=slug, **fields)


def make_post(slug: str = "hello", **fields) -> Post:
    defaults = {
        "title": "Hello World",
        "date": "2024-01-05",
        "excerpt": "First post",
        "content": "Hello there",
        "contentHtml": "<p>Hello there</p>",
    }
    defaults.update(fields)
    return Post(slug=slug, **defaults)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, posts=None, summaries=None, error=None):
        self.posts = {post.slug: post for post in (posts or [])}
        self.summaries = summaries if summaries is not None else []
        self.error = error

    def list_slugs(self):
        return set(self.posts)

    def list_summaries(self):
        if self.error:
            raise self.error
        return self.summaries

    def load_post(self, slug: str):
        from blogsite.repos.posts_repo import PostNotFound

        if self.error:
            raise self.error
        if slug not in self.posts:
            raise PostNotFound(slug)
        return self.posts[slug]


class FakeRepo:
    """
    In-memory posts repo stand-in; records every slug read.
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads = []

    def list_ordered_slugs(self):
        return list(self.files)

    def list_slugs(self):
        return set(self.files)

    def read_post_file(self, slug: str) -> str:
        from blogsite.repos.posts_repo import PostNotFound

        self.reads.append(slug)
        if slug not in self.files:
            raise PostNotFound(slug)
        return self.files[slug]
