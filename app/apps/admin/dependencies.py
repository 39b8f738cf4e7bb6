"""
Admin session dependencies for FastAPI
"""
from typing import Optional
from fastapi import Cookie, Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import logging

from app.config import ADMIN_TOKEN_COOKIE
from app.apps.admin.entities import EntityConfig, get_entity_config

logger = logging.getLogger(__name__)

# Security scheme for Swagger UI
security = HTTPBearer(auto_error=False)


class AdminSessionRequired(Exception):
    """No admin token on the request; the shell redirects to the login page."""


async def require_admin_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    admin_token: Optional[str] = Cookie(None, alias=ADMIN_TOKEN_COOKIE),
) -> str:
    """
    Bearer token for admin calls, from the Authorization header or the
    admin token cookie. The token is passed through to the backend unchecked.
    """
    if credentials and credentials.credentials:
        return credentials.credentials
    if admin_token:
        return admin_token

    logger.info("Admin request without a session token")
    raise AdminSessionRequired()


def get_entity(entity: str) -> EntityConfig:
    config = get_entity_config(entity)
    if config is None:
        raise HTTPException(status_code=404, detail=f"Unknown entity: {entity}")
    return config
