from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Type
from fastapi import APIRouter
from pydantic import BaseModel


class BaseRouter(ABC):
    """Base router class.

    Subclasses register their endpoints in the ``_register_*`` hooks.  The
    service is resolved per request through ``service_dependency`` so tests
    can swap it with ``app.dependency_overrides``.
    """

    def __init__(
        self,
        service_dependency: Callable[..., Any],
        tags: Optional[List[str]] = None,
        prefix: str = "",
        create_schema: Optional[Type[BaseModel]] = None,
        dependencies: Optional[List[Any]] = None
    ):
        self.service_dependency = service_dependency
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix
        self.create_schema = create_schema

        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags, #type:ignore
            dependencies=dependencies or [] #type:ignore
        )

        self._register_routes()

    def _register_routes(self) -> None:
        """Register all routes."""
        self._register_list()
        if self.create_schema:
            self._register_create()

    @abstractmethod
    def _register_list(self) -> None:
        """Register GET / route."""

    @abstractmethod
    def _register_create(self) -> None:
        """Register POST / route."""

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
