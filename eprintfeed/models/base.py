"""Base model class for feed values."""

from pydantic import BaseModel, ConfigDict


class FeedModel(BaseModel):
    """Base model for immutable feed values."""

    model_config = ConfigDict(frozen=True)
