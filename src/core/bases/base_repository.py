from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from pydantic import BaseModel

T = TypeVar("T", bound=SQLModel)


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class BaseRepository(Generic[T]):
    model: Type[T]

    def __init__(self, get_session: Callable[..., AsyncSession]):
        self.get_session = get_session

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> None:
        """Handle database errors and raise appropriate exceptions."""
        if isinstance(error, IntegrityError):
            raise RepositoryError(
                f"Database integrity error during {operation}: {error}"
            ) from error
        else:
            raise RepositoryError(
                f"Database error during {operation}: {error}"
            ) from error

    def _build_select_stmt(self, **filters) -> Any:
        """Build select statement with optional equality filters."""
        stmt = select(self.model)

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        return stmt

    # ----------------- READ ----------------- #
    async def get(self, item_id: Any) -> Optional[T]:
        """Get a single item by ID."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt().where(self.model.id == item_id)  # type: ignore
                result = await db.exec(stmt)
                return result.first()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get")

    async def get_many(
        self,
        *,
        skip: int = 0,
        limit: int = 100,
        order_by: Optional[List[Any]] = None,
        **filters,
    ) -> List[T]:  # type:ignore
        """Get multiple items with filtering, ordering and a row cap."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters)
                if order_by:
                    stmt = stmt.order_by(*order_by)
                stmt = stmt.offset(skip).limit(limit)

                result = await db.exec(stmt)
                return list(result.all())
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_many")

    async def count(self, **filters) -> int:  # type:ignore
        """Count items matching optional filters."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters)
                count_stmt = select(func.count()).select_from(stmt.subquery())
                result = await db.exec(count_stmt)
                return result.one()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "count")

    # ----------------- WRITE ----------------- #
    async def create(
        self, obj_in: Union[Dict[str, Any], BaseModel]
    ) -> T:  # type:ignore
        """Create a new item."""
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump(exclude_unset=True)

        async with self.get_session() as db:
            try:
                obj = self.model(**obj_in)  # type: ignore
                db.add(obj)
                await db.commit()
                await db.refresh(obj)
                return obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "create")

    async def create_many(
        self, objects_in: List[Union[Dict[str, Any], BaseModel]]
    ) -> List[T]:  # type:ignore
        """Create multiple items in one transaction."""
        objects_data = [
            obj.model_dump(exclude_unset=True) if isinstance(obj, BaseModel) else obj
            for obj in objects_in
        ]

        async with self.get_session() as db:
            try:
                objects = [self.model(**data) for data in objects_data]  # type: ignore
                db.add_all(objects)
                await db.commit()

                for obj in objects:
                    await db.refresh(obj)

                return objects
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "create_many")
