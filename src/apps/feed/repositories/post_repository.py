"""Post repository."""

from typing import List

from src.core.bases.base_repository import BaseRepository
from src.apps.feed.models.post import Post


class PostRepository(BaseRepository[Post]):
    """Post repository class."""

    model = Post

    async def find_recent(self, limit: int) -> List[Post]:
        """Newest posts first."""
        return await self.get_many(limit=limit, order_by=[Post.created_at.desc()])  # type: ignore

    async def insert(self, author_id: str, content: str) -> Post:
        return await self.create({"author_id": author_id, "content": content})
