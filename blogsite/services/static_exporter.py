"""Static export: pre-render every blog route to plain HTML files.

Each route is requested through the FastAPI app, so the exported pages go
through the same dependencies, renderer and error handling as the routing
layer. Output follows the trailing-slash convention, ``/blog/hello/`` is
written to ``<output>/blog/hello/index.html``.
"""

import logging
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, Tuple
from urllib.parse import unquote

from fastapi import FastAPI
from fastapi.testclient import TestClient

from blogsite import dependencies as deps
from blogsite.repos.posts_repo import FilePostsRepo
from blogsite.services.post_renderer import PostRenderer
from blogsite.services.posts_service import PostsService
from blogsite.settings import Settings

logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    """A route could not be pre-rendered."""


@dataclass(frozen=True)
class ExportedFile:
    source_path: str
    output_path: Path
    source_type: Literal["page", "asset", "error_page"]
    size_bytes: int


@dataclass(frozen=True)
class ExportResult:
    files: Tuple[ExportedFile, ...]
    total_pages: int
    total_assets: int
    duration_ms: float
    output_dir: Path


class StaticExporter:
    def __init__(self, app: FastAPI, current_settings: Settings):
        self.app = app
        self.settings = current_settings

    def export(self) -> ExportResult:
        """Clean the output directory, render every page, copy assets.

        Raises:
            ExportError: If any enumerated route does not render.
        """
        start = time.perf_counter()
        output_dir = self.settings.output_path

        self._clean_output(output_dir)

        files: List[ExportedFile] = []
        files.extend(self._render_pages(output_dir))
        files.extend(self._copy_assets(output_dir))
        files.append(self._render_not_found(output_dir))

        elapsed = (time.perf_counter() - start) * 1000
        result = ExportResult(
            files=tuple(files),
            total_pages=sum(1 for f in files if f.source_type == "page"),
            total_assets=sum(1 for f in files if f.source_type == "asset"),
            duration_ms=elapsed,
            output_dir=output_dir,
        )
        logger.info(
            f"Exported {result.total_pages} pages and {result.total_assets} assets "
            f"to {output_dir} in {elapsed:.0f}ms"
        )
        return result

    def routes(self) -> List[str]:
        service = PostsService(FilePostsRepo(self.settings.posts_path))
        slugs = sorted(service.list_slugs())
        return [self.settings.route("/blog")] + [
            self.settings.route(f"/blog/{slug}") for slug in slugs
        ]

    def _clean_output(self, output_dir: Path) -> None:
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    def _render_pages(self, output_dir: Path) -> List[ExportedFile]:
        results = []
        original_overrides = dict(self.app.dependency_overrides)
        self.app.dependency_overrides[deps.get_settings] = lambda: self.settings
        try:
            with TestClient(self.app) as client:
                for route in self.routes():
                    res = client.get(route)
                    if res.status_code != 200:
                        raise ExportError(
                            f"Failed to render {route!r}: HTTP {res.status_code}"
                        )
                    filepath = route_to_filepath(route, output_dir)
                    size = write_html(filepath, res.text)
                    logger.debug(f"Wrote {route} -> {filepath}")
                    results.append(ExportedFile(route, filepath, "page", size))
        finally:
            self.app.dependency_overrides = original_overrides
        return results

    def _copy_assets(self, output_dir: Path) -> List[ExportedFile]:
        public_dir = self.settings.public_path
        if not public_dir.is_dir():
            logger.info(f"No public directory at {public_dir}, skipping assets")
            return []

        results = []
        for source in sorted(p for p in public_dir.rglob("*") if p.is_file()):
            relative = source.relative_to(public_dir)
            target = output_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
            results.append(
                ExportedFile(
                    "/" + relative.as_posix(), target, "asset", target.stat().st_size
                )
            )
        return results

    def _render_not_found(self, output_dir: Path) -> ExportedFile:
        html = PostRenderer(self.settings).render_not_found()
        filepath = output_dir / "404.html"
        size = write_html(filepath, html)
        return ExportedFile("/404", filepath, "error_page", size)


def route_to_filepath(route: str, output_dir: Path) -> Path:
    """
    ``/`` -> ``output/index.html``, ``/blog/hello/`` -> ``output/blog/hello/index.html``

    Percent-encoded routes are written under the raw slug, ``/blog/c%23-tips/``
    -> ``output/blog/c#-tips/index.html``.
    """
    clean = unquote(route).strip("/")
    if not clean:
        return output_dir / "index.html"
    return output_dir / clean / "index.html"


def write_html(filepath: Path, html: str) -> int:
    filepath.parent.mkdir(parents=True, exist_ok=True)
    data = html.encode("utf-8")
    filepath.write_bytes(data)
    return len(data)

