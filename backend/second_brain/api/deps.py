"""Shared route dependencies: the access guard"""
import logging
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..database import get_db
from ..exceptions import InvalidTokenError, UnauthorizedError
from ..services import CredentialStore, ContentStore, ShareRegistry
from ..utils.security import TokenService

logger = logging.getLogger(__name__)


def get_token_service(request: Request) -> TokenService:
    """Token service built once at startup"""
    return request.app.state.token_service


async def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service),
) -> str:
    """Resolve the acting user from the raw ``authorization`` header.

    The header value is the token itself. Every verification failure is
    reported as the same 401.
    """
    if authorization is None or not authorization.strip():
        raise UnauthorizedError("Missing token", reason="no authorization header")

    try:
        user_id = token_service.verify(authorization.strip())
    except InvalidTokenError as e:
        raise UnauthorizedError(e.message, reason=e.reason)

    request.state.user_id = user_id
    return user_id


def get_credential_store(db: AsyncSession = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_content_store(db: AsyncSession = Depends(get_db)) -> ContentStore:
    return ContentStore(db)


def get_share_registry(db: AsyncSession = Depends(get_db)) -> ShareRegistry:
    return ShareRegistry(
        db,
        hash_length=settings.SHARE_HASH_LENGTH,
        max_attempts=settings.SHARE_HASH_MAX_ATTEMPTS,
    )
