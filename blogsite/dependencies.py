from fastapi import Depends

from blogsite.repos.posts_repo import FilePostsRepo
from blogsite.services.post_renderer import PostRenderer
from blogsite.services.posts_service import PostsService
from blogsite.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.posts_path)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_post_renderer(current_settings: Settings = Depends(get_settings)):
    return PostRenderer(current_settings)
