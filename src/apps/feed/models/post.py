"""Post model."""

from sqlmodel import Field
from src.core.database import BaseModel
from src.core.validators import MAX_POST_LENGTH


class Post(BaseModel, table=True):
    """Post model class.

    ``author_id`` is a user id of the identity provider, not a local key.
    """

    __tablename__ = "posts"  # type: ignore
    author_id: str = Field(index=True, max_length=64)
    content: str = Field(max_length=MAX_POST_LENGTH)

