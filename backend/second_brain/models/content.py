"""Content (bookmark) and tag models"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from ..database import Base

DEFAULT_TAG_COLOR = "#007bff"


# Content <-> tag association
content_tags = Table(
    "content_tags",
    Base.metadata,
    Column("content_id", String(36), ForeignKey("contents.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", String(36), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Tag(Base):
    """Tags table, pre-seeded lookup data"""
    __tablename__ = "tags"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(50), unique=True, nullable=False)
    color = Column(String(20), nullable=False, default=DEFAULT_TAG_COLOR, server_default=DEFAULT_TAG_COLOR)
    created_at = Column(DateTime, default=datetime.utcnow)


class Content(Base):
    """Contents table"""
    __tablename__ = "contents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    link = Column(String(2000), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="contents")
    tags = relationship("Tag", secondary=content_tags, lazy="selectin")
