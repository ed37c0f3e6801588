"""Public profile schema and the projection that builds it."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.core.identity import IdentityUser


class PublicUserProfile(BaseModel):
    """The only user data ever exposed to clients."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    username: Optional[str] = None
    profile_picture: str


def to_public_profile(user: IdentityUser) -> PublicUserProfile:
    return PublicUserProfile(
        id=user.id,
        username=user.first_name,
        profile_picture=user.image_url,
    )
