from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator
from uuid import uuid4

from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import Column, DateTime, Field, SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.core.config import settings

engine = create_async_engine(
    settings.ASYNC_DATABASE_URL,
    #  echo=True,
)


@asynccontextmanager
async def get_session():
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


class Database:
    def __init__(self, db_url: str, echo: bool = False, **engine_kwargs: Any):
        self.engine = create_async_engine(db_url, echo=echo, **engine_kwargs)

    async def disconnect(self):
        await self.engine.dispose()

    async def create_all(self) -> None:
        """Create every table registered on the SQLModel metadata."""
        import src.shared.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, Any]:
        async with AsyncSession(self.engine, expire_on_commit=False) as session:
            yield session


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid4().hex


class BaseModel(SQLModel):
    """Base model with common fields.

    Rows are append-only, so there is no ``updated_at`` or soft delete flag.
    ``created_at`` is stored in UTC.
    """

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
