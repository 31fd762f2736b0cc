from typing import Optional

from pydantic import BaseModel


class PostSummary(BaseModel):
    slug: str
    title: str = ""
    date: str = ""
    excerpt: str = ""
    category: Optional[str] = None
    cover: Optional[str] = None


class Post(PostSummary):
    content: str = ""
    contentHtml: str = ""


class ReadingStats(BaseModel):
    wordCount: int = 0
    readingTimeMinutes: int = 0
