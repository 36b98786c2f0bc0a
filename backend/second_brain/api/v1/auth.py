"""Auth routes"""
import logging

from fastapi import APIRouter, Depends, status

from ...schemas import UserCredentials, UserLogin, MessageResponse, TokenResponse
from ...services import CredentialStore
from ...utils.security import TokenService
from ..deps import get_credential_store, get_token_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signin", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signin(
    user_in: UserCredentials,
    credentials: CredentialStore = Depends(get_credential_store),
):
    """Sign up"""
    await credentials.register(user_in.username, user_in.password)
    return MessageResponse(message="User created successfully")


@router.post("/login", response_model=TokenResponse)
async def login(
    user_in: UserLogin,
    credentials: CredentialStore = Depends(get_credential_store),
    token_service: TokenService = Depends(get_token_service),
):
    """Log in and receive a bearer token"""
    user_id = await credentials.verify(user_in.username, user_in.password)
    logger.info(f"[Auth] user {user_id} logged in")
    return TokenResponse(token=token_service.issue(user_id))
