"""Pydantic Schemas"""
from .user import UserCredentials, UserLogin, MessageResponse, TokenResponse
from .content import (
    ContentCreate, ContentDelete, ContentResponse, ContentWithOwner,
    ContentCreated, ContentList, TagResponse, OwnerResponse,
)
from .share import ShareRequest, ShareStatusResponse, SharedBrainResponse

__all__ = [
    "UserCredentials", "UserLogin", "MessageResponse", "TokenResponse",
    "ContentCreate", "ContentDelete", "ContentResponse", "ContentWithOwner",
    "ContentCreated", "ContentList", "TagResponse", "OwnerResponse",
    "ShareRequest", "ShareStatusResponse", "SharedBrainResponse",
]
