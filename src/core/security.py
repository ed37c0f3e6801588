"""Authentication gate for private endpoints."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.exceptions import AuthenticationException
from src.core.identity import IdentityGateway, get_identity_gateway

security = HTTPBearer(auto_error=False)


async def require_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    gateway: IdentityGateway = Depends(get_identity_gateway),
) -> str:
    """Dependency resolving the caller's user id from the bearer session token.

    Raises ``AuthenticationException`` when the header is missing or the
    session does not resolve to a user.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Not authenticated")

    user_id = await gateway.resolve_current_user(credentials.credentials)
    if not user_id:
        raise AuthenticationException("Invalid or expired session")
    return user_id
