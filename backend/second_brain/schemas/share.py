"""Share link schemas"""
from pydantic import BaseModel, Field, StrictBool
from datetime import datetime
from typing import List, Optional

from .content import ContentResponse


class ShareRequest(BaseModel):
    """Enable or disable sharing"""
    share: StrictBool


class ShareStatusResponse(BaseModel):
    """Sharing state; ``hash`` only while sharing is on"""
    message: str
    hash: Optional[str] = None


class SharedBrainResponse(BaseModel):
    """Public view of one user's content"""
    username: str
    content: List[ContentResponse]
    shared_at: datetime = Field(..., alias="sharedAt")

    class Config:
        populate_by_name = True
