from typing import Dict, List, Optional, Sequence

import httpx
import pytest
from sqlalchemy.pool import NullPool

from src.core.database import Database
from src.core.identity import IdentityGateway, IdentityUser
from src.apps.feed.repositories.post_repository import PostRepository
from src.apps.feed.services.post_service import PostService


class FakeIdentityGateway(IdentityGateway):
    """In-memory user directory recording every lookup."""

    def __init__(self):
        self.users: Dict[str, IdentityUser] = {}
        self.sessions: Dict[str, str] = {}
        self.user_list_calls: List[List[str]] = []
        self.error: Optional[Exception] = None

    def add_user(self, user_id: str, first_name: Optional[str] = None, session: Optional[str] = None):
        self.users[user_id] = IdentityUser(
            id=user_id,
            first_name=first_name,
            last_name="Secret",
            image_url=f"https://img.example.com/{user_id}.png",
            email_addresses=[{"email_address": f"{user_id}@example.com"}],
        )
        if session:
            self.sessions[session] = user_id

    async def get_user_list(self, user_ids: Sequence[str], limit: int) -> List[IdentityUser]:
        self.user_list_calls.append(list(user_ids))
        if self.error is not None:
            raise self.error
        wanted = set(user_ids)
        return [user for user in self.users.values() if user.id in wanted][:limit]

    async def resolve_current_user(self, session_token: str) -> Optional[str]:
        return self.sessions.get(session_token)


def database_urls(tmp_path):
    path = tmp_path / "test.db"
    return f"sqlite+aiosqlite:///{path}", f"sqlite:///{path}"


@pytest.fixture
def gateway():
    return FakeIdentityGateway()


@pytest.fixture
async def database(tmp_path):
    async_url, _ = database_urls(tmp_path)
    db = Database(async_url, poolclass=NullPool)
    await db.create_all()
    yield db
    await db.disconnect()


@pytest.fixture
def repository(database):
    return PostRepository(database.get_session)  # type: ignore


@pytest.fixture
def service(repository, gateway):
    return PostService(repository, gateway)


@pytest.fixture
def connect_error():
    return httpx.ConnectError("identity provider unreachable")
