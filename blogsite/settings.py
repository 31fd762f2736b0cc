from pathlib import Path
from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    POSTS_DIR: str = "blog"
    PUBLIC_DIR: str = "public"

    # Static export
    OUTPUT_DIR: str = "out"
    BASE_PATH: str = "/test-repo123"
    ASSET_PREFIX: str = "/test-repo123/"
    TRAILING_SLASH: bool = True

    # Blog
    BLOG_IMAGES_PATH: str = "/images/blog/"
    WORDS_PER_MINUTE: int = 200
    RELATED_POSTS_LIMIT: int = 3
    SITE_NAME: str = "Blog"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def public_path(self) -> Path:
        return Path(self.PUBLIC_DIR)

    @property
    def output_path(self) -> Path:
        return Path(self.OUTPUT_DIR)

    def route(self, path: str) -> str:
        """Normalize an internal route, adding the trailing slash when enabled.

        Segments are percent-encoded, so slugs such as ``c#-tips`` stay in the path.
        """
        path = "/" + quote(path.strip("/"), safe="/")
        if self.TRAILING_SLASH and path != "/":
            path += "/"
        return path

    def site_url(self, path: str) -> str:
        """Internal link with the deployment base path applied."""
        return f"{self.BASE_PATH.rstrip('/')}{self.route(path)}"

    def asset_url(self, path: str) -> str:
        """Asset reference with the asset prefix applied.

        Absolute URLs are returned unchanged.
        """
        if path.startswith(("http://", "https://", "//")):
            return path
        return f"{self.ASSET_PREFIX.rstrip('/')}/{path.lstrip('/')}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
