"""Data models"""
from .user import User
from .content import Content, Tag, content_tags, DEFAULT_TAG_COLOR
from .share import ShareLink

__all__ = [
    "User",
    "Content", "Tag", "content_tags", "DEFAULT_TAG_COLOR",
    "ShareLink",
]
