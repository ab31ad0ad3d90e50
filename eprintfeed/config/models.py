"""Configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

LEGACY_FEED_URL = "https://eprint.iacr.org/rss/rss.xml"
ATOM_FEED_URL = "https://eprint.iacr.org/rss/atom.xml"


class FeedConfig(BaseModel):
    """Upstream feed configuration."""

    url: str = Field(ATOM_FEED_URL, description="Upstream feed URL")
    format: Literal["legacy", "generic"] = Field(
        "generic", description="any feed feedparser understands, or the legacy line layout"
    )
    timeout: float = Field(30.0, description="HTTP timeout in seconds", gt=0)
    user_agent: str = Field("eprintfeed/0.1 (+https://eprint.fans)", description="HTTP User-Agent")


class RefreshConfig(BaseModel):
    """Refresh schedule."""

    interval_hours: float = Field(2.0, description="Hours between refreshes", gt=0)
    run_on_start: bool = Field(True, description="Refresh once before serving")

    @property
    def interval_seconds(self) -> float:
        return self.interval_hours * 3600


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(8080, description="Bind port", ge=1, le=65535)
    public_url: str = Field("https://eprint.fans", description="Public base URL for self links")


class ConfigModel(BaseModel):
    """Main configuration model."""

    feed: FeedConfig = Field(default_factory=FeedConfig)
    refresh: RefreshConfig = Field(default_factory=RefreshConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
