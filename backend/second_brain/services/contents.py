"""Content store: owner-scoped bookmarks"""
import logging
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..exceptions import NotFoundOrForbiddenError
from ..models import Content

logger = logging.getLogger(__name__)


class ContentStore:
    """Bookmarks, each owned by exactly one user.

    Tags are read-only here: no operation attaches a tag to content.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, owner_id: str, title: str, link: str) -> Content:
        content = Content(user_id=owner_id, title=title, link=link, tags=[])
        self.db.add(content)
        await self.db.flush()
        logger.info(f"[Content] user {owner_id} created {content.id}")
        return content

    async def list_for(self, owner_id: str) -> List[Content]:
        """All content owned by ``owner_id`` with tags and owner loaded."""
        result = await self.db.execute(
            select(Content)
            .where(Content.user_id == owner_id)
            .options(selectinload(Content.tags), selectinload(Content.user))
            .order_by(Content.created_at, Content.id)
        )
        return list(result.scalars().all())

    async def delete_owned(self, owner_id: str, content_id: str) -> None:
        """Delete ``content_id`` if and only if ``owner_id`` owns it."""
        result = await self.db.execute(
            delete(Content).where(
                Content.id == content_id,
                Content.user_id == owner_id,
            )
        )
        if result.rowcount == 0:
            raise NotFoundOrForbiddenError(reason=f"user {owner_id} cannot delete {content_id}")
        logger.info(f"[Content] user {owner_id} deleted {content_id}")
