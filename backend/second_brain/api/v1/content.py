"""Content routes"""
from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from ...exceptions import ValidationFailedError
from ...schemas import ContentCreate, ContentDelete, ContentCreated, ContentList, MessageResponse
from ...services import ContentStore
from ..deps import get_current_user_id, get_content_store

router = APIRouter()


@router.post("", response_model=ContentCreated, status_code=status.HTTP_201_CREATED)
async def create_content(
    content_in: ContentCreate,
    user_id: str = Depends(get_current_user_id),
    contents: ContentStore = Depends(get_content_store),
):
    """Add content"""
    content = await contents.create(user_id, content_in.title, content_in.link)
    return {"data": content}


@router.get("", response_model=ContentList)
async def list_content(
    user_id: str = Depends(get_current_user_id),
    contents: ContentStore = Depends(get_content_store),
):
    """List the caller's content"""
    return {"data": await contents.list_for(user_id)}


@router.delete("", response_model=MessageResponse)
async def delete_content(
    content_in: Optional[ContentDelete] = Body(None),
    user_id: str = Depends(get_current_user_id),
    contents: ContentStore = Depends(get_content_store),
):
    """Delete one of the caller's content items"""
    if content_in is None or not content_in.content_id:
        raise ValidationFailedError("Content ID is required", reason="missing contentId")

    await contents.delete_owned(user_id, content_in.content_id)
    return MessageResponse(message="Content deleted successfully")
