"""Import every table model so ``SQLModel.metadata`` knows about it."""

from src.apps.feed.models.post import Post

__all__ = ["Post"]
