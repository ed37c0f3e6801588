from typing import Any, Dict, Generic, TypeVar, Union

from pydantic import BaseModel
from sqlmodel import SQLModel

from src.core.bases.base_repository import BaseRepository

T = TypeVar("T", bound=SQLModel)


class BaseService(Generic[T]):
    """Business rules around a repository.

    Subclasses override the ``_validate_*`` hooks; repository and
    collaborator errors are not caught here.
    """

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    @property
    def model_name(self) -> str:
        return self.repository.model.__name__

    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        """Validate data before creation."""
        pass

    async def create(self, obj_in: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        if isinstance(obj_in, BaseModel):
            create_data = obj_in.model_dump(exclude_unset=True)
        else:
            create_data = dict(obj_in)

        await self._validate_create(create_data)
        item = await self.repository.create(create_data)
        return {"data": item, "message": f"{self.model_name} created successfully"}
