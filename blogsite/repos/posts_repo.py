import logging
from pathlib import Path
from typing import List, Set

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class PostNotFound(LookupError):
    """No markdown file exists for the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"Post not found: {slug}")
        self.slug = slug


class FilePostsRepo:
    def __init__(self, posts_dir: Path):
        self.posts_dir = Path(posts_dir)

    def list_post_files(self) -> List[Path]:
        # iterdir() raises when the directory is missing; that fails the build
        files = sorted(
            path
            for path in self.posts_dir.iterdir()
            if path.is_file() and is_post_filename(path.name)
        )
        logger.debug(f"Found {len(files)} posts in {self.posts_dir}")
        return files

    def list_ordered_slugs(self) -> List[str]:
        return [self.slug_for(path) for path in self.list_post_files()]

    def list_slugs(self) -> Set[str]:
        return set(self.list_ordered_slugs())

    def read_post_file(self, slug: str) -> str:
        path = self.path_for(slug)
        if not path.is_file():
            raise PostNotFound(slug)
        return path.read_text(encoding="utf-8")

    def path_for(self, slug: str) -> Path:
        filename = f"{slug}{POST_SUFFIX}"
        if "/" in slug or "\\" in slug or not is_post_filename(filename):
            raise PostNotFound(slug)
        return self.posts_dir / filename

    @staticmethod
    def slug_for(path: Path) -> str:
        return path.name.removesuffix(POST_SUFFIX)


def is_post_filename(name: str) -> bool:
    """Markdown files count as posts; hidden files (``.draft.md``) never do."""
    return (
        name.endswith(POST_SUFFIX)
        and len(name) > len(POST_SUFFIX)
        and not name.startswith(".")
    )
