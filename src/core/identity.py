"""
Identity provider access.

Users live in an external directory (a Clerk-style backend API).  The
service only needs two things from it, captured by ``IdentityGateway``:
a bulk lookup of user records by id, and resolving a session token to the
id of the signed-in user.  ``HttpIdentityGateway`` implements both over
HTTP; tests substitute an in-memory implementation.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import List, Optional, Sequence
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict

from src.core.config import settings

logger = logging.getLogger(__name__)


class IdentityUser(BaseModel):
    """User record as returned by the identity provider."""

    model_config = ConfigDict(extra="ignore")

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    image_url: str = ""
    email_addresses: List[dict] = []


class IdentityGateway(ABC):
    @abstractmethod
    async def get_user_list(self, user_ids: Sequence[str], limit: int) -> List[IdentityUser]:
        """Return the users whose id is in ``user_ids``, at most ``limit`` of them."""

    @abstractmethod
    async def resolve_current_user(self, session_token: str) -> Optional[str]:
        """Return the user id bound to an active session, or None."""


class HttpIdentityGateway(IdentityGateway):
    def __init__(
        self,
        base_url: str,
        secret_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.secret_key = secret_key
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {self.secret_key}"},
            timeout=self.timeout,
            transport=self.transport,
        )

    async def get_user_list(self, user_ids: Sequence[str], limit: int) -> List[IdentityUser]:
        params = [("user_id", user_id) for user_id in user_ids]
        params.append(("limit", str(limit)))
        async with self._client() as client:
            response = await client.get("/v1/users", params=params)
            response.raise_for_status()
            payload = response.json()

        # Some API versions wrap the list in {"data": [...]}
        if isinstance(payload, dict):
            payload = payload.get("data", [])
        users = [IdentityUser.model_validate(item) for item in payload]
        logger.debug("Fetched %d of %d requested users", len(users), len(user_ids))
        return users

    async def resolve_current_user(self, session_token: str) -> Optional[str]:
        session_id = quote(session_token, safe="")
        async with self._client() as client:
            response = await client.get(f"/v1/sessions/{session_id}")
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
            session = response.json()

        if not isinstance(session, dict) or session.get("status") != "active":
            logger.info("Rejected session token that is not an active session")
            return None
        return session.get("user_id")


@lru_cache
def get_identity_gateway() -> IdentityGateway:
    """FastAPI dependency returning the configured gateway."""
    return HttpIdentityGateway(
        base_url=settings.IDENTITY_API_URL,
        secret_key=settings.IDENTITY_SECRET_KEY,
        timeout=settings.IDENTITY_TIMEOUT,
    )
