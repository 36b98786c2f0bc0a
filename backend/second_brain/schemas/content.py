"""Content schemas"""
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import List, Optional

from ..models.content import DEFAULT_TAG_COLOR


class ContentCreate(BaseModel):
    """Create content"""
    title: str = Field(..., min_length=1, max_length=200)
    link: str = Field(..., min_length=1, max_length=2000)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v


class ContentDelete(BaseModel):
    """Delete content"""
    content_id: Optional[str] = Field(None, alias="contentId")

    class Config:
        populate_by_name = True


class TagResponse(BaseModel):
    """Tag details"""
    id: str
    name: str
    color: Optional[str] = DEFAULT_TAG_COLOR

    @field_validator("color", mode="before")
    @classmethod
    def default_color(cls, v):
        return DEFAULT_TAG_COLOR if v is None else v

    class Config:
        from_attributes = True


class OwnerResponse(BaseModel):
    """Content owner, username only"""
    id: str
    username: str

    class Config:
        from_attributes = True


class ContentResponse(BaseModel):
    """Content"""
    id: str
    title: str
    link: str
    tags: List[TagResponse] = []
    user_id: str = Field(..., alias="userId")
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class ContentWithOwner(ContentResponse):
    """Content with its owner populated"""
    user: OwnerResponse


class ContentCreated(BaseModel):
    status: str = "success"
    message: str = "Content added successfully"
    data: ContentResponse


class ContentList(BaseModel):
    status: str = "success"
    data: List[ContentWithOwner]
