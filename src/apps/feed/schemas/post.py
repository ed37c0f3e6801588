"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictStr, field_serializer
from pydantic.alias_generators import to_camel

from src.core.config import settings
from src.apps.feed.schemas.profile import PublicUserProfile


class PostCreate(BaseModel):
    """Schema for creating a post.

    Only the type is checked here, length and emoji rules are applied by
    the service so the error payload is the same for every rule.
    """
    content: StrictStr


class PostRead(BaseModel):
    """A stored post as sent to clients."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    author_id: str
    content: str
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> datetime:
        return settings.to_local(value)


class FeedItem(BaseModel):
    """A post paired with its author's public profile."""
    post: PostRead
    author: PublicUserProfile
