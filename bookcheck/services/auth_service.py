import logging

import httpx
from pydantic import ValidationError

from bookcheck.config import settings
from bookcheck.errors import AuthenticationError
from bookcheck.schemas.auth_schema import LoginRequest, Token

logger = logging.getLogger(__name__)


async def authenticate(client: httpx.AsyncClient, email: str | None = None, password: str | None = None) -> str:
    """Log in with the given credentials and return the bearer token.

    Falls back to the configured fixture credentials. Raises
    AuthenticationError when the login call fails or yields no token.
    """
    credentials = LoginRequest(
        email=email or settings.auth_email,
        password=password or settings.auth_password,
    )
    logger.info("Authenticating as %s", credentials.email)
    resp = await client.post(settings.login_path, json=credentials.model_dump())
    if resp.status_code != httpx.codes.OK:
        raise AuthenticationError(f"login returned {resp.status_code}", status_code=resp.status_code)
    try:
        token = Token.model_validate(resp.json())
    except (ValueError, ValidationError):
        raise AuthenticationError("login response carries no token", status_code=resp.status_code)
    if not token.access_token.strip():
        raise AuthenticationError("token is empty", status_code=resp.status_code)
    return token.access_token
