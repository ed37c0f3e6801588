"""Post service."""

import logging
from typing import Any, Dict, List

from src.core.bases.base_service import BaseService
from src.core.exceptions import ConsistencyException, ValidationException
from src.core.identity import IdentityGateway
from src.core.response.schemas import ErrorDetail
from src.core.validators import (
    MAX_POST_LENGTH,
    MIN_POST_LENGTH,
    content_length,
    is_emoji,
)
from src.apps.feed.models.post import Post
from src.apps.feed.repositories.post_repository import PostRepository
from src.apps.feed.schemas.post import FeedItem, PostCreate, PostRead
from src.apps.feed.schemas.profile import PublicUserProfile, to_public_profile

logger = logging.getLogger(__name__)

RECENT_POSTS_LIMIT = 100
USER_LOOKUP_LIMIT = 100


class PostService(BaseService[Post]):
    """Post service class."""

    def __init__(self, repository: PostRepository, identity_gateway: IdentityGateway):
        super().__init__(repository)
        self.identity_gateway = identity_gateway

    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        """Reject content outside 1..280 code points or with non-emoji characters."""
        content = create_data.get("content")
        errors: List[ErrorDetail] = []

        if not isinstance(content, str):
            errors.append(
                ErrorDetail(field="content", code="INVALID_TYPE", message="Content must be a string")
            )
        else:
            length = content_length(content)
            if length < MIN_POST_LENGTH:
                errors.append(
                    ErrorDetail(
                        field="content",
                        code="TOO_SMALL",
                        message=f"Content must contain at least {MIN_POST_LENGTH} character(s)",
                    )
                )
            elif length > MAX_POST_LENGTH:
                errors.append(
                    ErrorDetail(
                        field="content",
                        code="TOO_BIG",
                        message=f"Content must contain at most {MAX_POST_LENGTH} characters",
                    )
                )
            if length and not is_emoji(content):
                errors.append(
                    ErrorDetail(field="content", code="INVALID_EMOJI", message="Only emojis are allowed")
                )

        if errors:
            raise ValidationException("Invalid post content", error_details=errors)

    async def create_post(self, payload: PostCreate, author_id: str) -> Dict[str, Any]:
        """Store a new post for ``author_id``. The author profile is not joined."""
        result = await self.create({"author_id": author_id, "content": payload.content})
        post = result["data"]
        logger.info("Post %s created by %s", post.id, author_id)
        return {"data": PostRead.model_validate(post), "message": result["message"]}

    async def list_recent(self) -> Dict[str, Any]:
        """Most recent posts, each with its author's public profile.

        A post whose author is unknown to the identity provider fails the
        whole call.
        """
        posts = await self.repository.find_recent(limit=RECENT_POSTS_LIMIT)  # type: ignore
        if not posts:
            return {"data": [], "message": "No posts yet"}

        users = await self.identity_gateway.get_user_list(
            [post.author_id for post in posts], limit=USER_LOOKUP_LIMIT
        )
        profiles: Dict[str, PublicUserProfile] = {}
        for user in users:
            profiles[user.id] = to_public_profile(user)

        items: List[FeedItem] = []
        for post in posts:
            author = profiles.get(post.author_id)
            if author is None:
                logger.error("Author %s for post %s not found", post.author_id, post.id)
                raise ConsistencyException("Author for post not found")
            items.append(FeedItem(post=PostRead.model_validate(post), author=author))

        return {"data": items, "message": f"{len(items)} posts retrieved successfully"}
