"""Post router."""

from typing import Any, List

from fastapi import Depends, status

from src.core.database import get_session
from src.core.bases.base_router import BaseRouter
from src.core.exceptions import ServiceException, ValidationException
from src.core.identity import IdentityGateway, get_identity_gateway
from src.core.response.handlers import error_response, success_response
from src.core.response.schemas import BaseResponse, ErrorResponse
from src.core.security import require_current_user
from src.apps.feed.services.post_service import PostService
from src.apps.feed.repositories.post_repository import PostRepository
from src.apps.feed.schemas.post import FeedItem, PostCreate, PostRead


def get_post_repository():
    """Get post repository instance."""
    return PostRepository(get_session) #type:ignore


def get_post_service(gateway: IdentityGateway = Depends(get_identity_gateway)):
    """Get post service instance."""
    repository = get_post_repository()
    return PostService(repository, gateway)


class PostRouter(BaseRouter):
    """Post router class."""

    def __init__(self):
        super().__init__(
            service_dependency=get_post_service,
            create_schema=PostCreate,
            prefix="/posts",
            tags=["Posts"]
        )

    def _register_list(self) -> None:
        """Register GET / route. Public."""
        @self.router.get(
            "",
            summary="List the latest posts with their authors",
            response_model=BaseResponse[List[FeedItem]],
            response_model_by_alias=True,
            responses={
                200: {"description": "Posts retrieved successfully"},
                500: {"model": ErrorResponse, "description": "Author lookup or store failure"},
                502: {"model": ErrorResponse, "description": "Identity provider failure"},
            }
        )
        async def list_posts(service: PostService = Depends(self.service_dependency)) -> Any:
            try:
                result = await service.list_recent()
                return success_response(data=result["data"], message=result["message"])
            except ServiceException as e:
                return error_response(
                    error_code=e.error_code,
                    message=str(e.detail),
                    status_code=e.status_code
                )

    def _register_create(self) -> None:
        """Register POST / route. Requires a signed-in user."""
        @self.router.post(
            "",
            status_code=status.HTTP_201_CREATED,
            summary="Create a post",
            response_model=BaseResponse[PostRead],
            response_model_by_alias=True,
            responses={
                201: {"description": "Post created successfully"},
                401: {"model": ErrorResponse, "description": "Not authenticated"},
                422: {"model": ErrorResponse, "description": "Validation error"},
                500: {"model": ErrorResponse, "description": "Internal server error"}
            }
        )
        async def create_post(
            item_data: PostCreate,
            author_id: str = Depends(require_current_user),
            service: PostService = Depends(self.service_dependency),
        ) -> Any:
            try:
                result = await service.create_post(item_data, author_id)
                return success_response(
                    data=result["data"],
                    message=result["message"],
                    status_code=status.HTTP_201_CREATED
                )
            except ValidationException as e:
                return error_response(
                    error_code=e.error_code,
                    message=str(e.detail),
                    status_code=e.status_code,
                    details=[detail.model_dump() for detail in e.error_details]
                )
            except ServiceException as e:
                return error_response(
                    error_code=e.error_code,
                    message=str(e.detail),
                    status_code=e.status_code
                )


# Router instance
router = PostRouter().get_router()
