import logging

from fastapi import FastAPI

from blogsite.routers import posts
from blogsite.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Blogsite",
    description="Build-time renderer for the statically exported blog",
)

app.include_router(posts.router)
