"""Share registry: public read-only access to one owner's content"""
import logging
import secrets
import string
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import AppError, NotFoundError
from ..models import Content, ShareLink
from .contents import ContentStore
from .credentials import CredentialStore

logger = logging.getLogger(__name__)

SHARE_HASH_ALPHABET = string.ascii_letters + string.digits


def generate_share_hash(length: int) -> str:
    """Random alphanumeric share hash"""
    return "".join(secrets.choice(SHARE_HASH_ALPHABET) for _ in range(length))


@dataclass
class SharedBrain:
    """What a share hash exposes: a username and content, never credentials."""
    username: str
    contents: List[Content]
    shared_at: datetime


class ShareRegistry:
    """Maps share hashes to owners, at most one live mapping per owner.

    Both ``user_id`` and ``hash`` are unique in the store, so inserting a
    mapping is an atomic insert-if-absent keyed by owner.
    """

    def __init__(self, db: AsyncSession, hash_length: int = 16, max_attempts: int = 3):
        self.db = db
        self.hash_length = hash_length
        self.max_attempts = max_attempts

    async def get_for_owner(self, owner_id: str) -> Optional[ShareLink]:
        result = await self.db.execute(select(ShareLink).where(ShareLink.user_id == owner_id))
        return result.scalar_one_or_none()

    async def enable(self, owner_id: str) -> str:
        """Return the owner's share hash, creating the mapping if needed."""
        existing = await self.get_for_owner(owner_id)
        if existing is not None:
            return existing.hash

        for attempt in range(1, self.max_attempts + 1):
            share_hash = generate_share_hash(self.hash_length)
            self.db.add(ShareLink(user_id=owner_id, hash=share_hash))
            try:
                await self.db.flush()
            except IntegrityError as e:
                await self.db.rollback()
                existing = await self.get_for_owner(owner_id)
                if existing is not None:
                    # A concurrent enable for the same owner got there first
                    return existing.hash
                logger.warning(
                    f"[Share] insert rejected for user {owner_id}, attempt {attempt}: {e.orig!r}"
                )
                continue

            logger.info(f"[Share] sharing enabled for user {owner_id}")
            return share_hash

        raise AppError(reason=f"no unique share hash after {self.max_attempts} attempts")

    async def disable(self, owner_id: str) -> None:
        """Remove the owner's mapping, if any."""
        result = await self.db.execute(delete(ShareLink).where(ShareLink.user_id == owner_id))
        if result.rowcount:
            logger.info(f"[Share] sharing disabled for user {owner_id}")

    async def resolve_public(self, share_hash: str) -> SharedBrain:
        """Resolve a share hash without authentication."""
        result = await self.db.execute(select(ShareLink).where(ShareLink.hash == share_hash))
        link = result.scalar_one_or_none()
        if link is None:
            raise NotFoundError("Share link not found", reason="unknown hash")

        owner = await CredentialStore(self.db).get_user(link.user_id)
        if owner is None:
            raise NotFoundError("User not found", reason=f"share {link.id} has no owner")

        contents = await ContentStore(self.db).list_for(owner.id)
        return SharedBrain(username=owner.username, contents=contents, shared_at=link.created_at)
