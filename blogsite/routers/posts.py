import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from blogsite import dependencies as deps
from blogsite.repos.posts_repo import PostNotFound
from blogsite.services.post_renderer import PostRenderer
from blogsite.services.posts_service import PostsService, related_to
from blogsite.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/blog/", response_class=HTMLResponse)
def list_posts(
    service: PostsService = Depends(deps.get_posts_service),
    renderer: PostRenderer = Depends(deps.get_post_renderer),
):
    """Blog index page."""
    try:
        return renderer.render_index(service.list_summaries())
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/blog/{slug}/", response_class=HTMLResponse)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: PostRenderer = Depends(deps.get_post_renderer),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Article page for a single post."""
    try:
        post = service.load_post(slug)
        related = related_to(
            slug, service.list_summaries(), current_settings.RELATED_POSTS_LIMIT
        )
        return renderer.render(post, related)
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")
