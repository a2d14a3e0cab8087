"""Bearer/cookie token verification for protected routes."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from calorie_api.core.config import Settings, get_settings
from calorie_api.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(
    user_id: str,
    settings: Settings,
    expires_in: timedelta = timedelta(days=1),
) -> str:
    """
    Mint a signed token carrying the user id.

    The login flow lives in the user service; this is used by tooling and tests.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Verify signature and expiry of a token.

    Raises:
        UnauthorizedError: If the token cannot be verified
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        logger.warning(f"Rejected auth token: {e}")
        raise UnauthorizedError("Invalid token") from e


async def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Resolve the authenticated user id from the Authorization header or auth cookie.

    Raises:
        UnauthorizedError: If no token is present or it is invalid
    """
    token = credentials.credentials if credentials else request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise UnauthorizedError()

    payload = decode_token(token, settings)
    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        raise UnauthorizedError("Invalid token")
    return str(user_id)
