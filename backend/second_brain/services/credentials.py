"""Credential store: sign-up and password verification"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from ..exceptions import ConflictError, UnauthorizedError
from ..models import User
from ..utils.security import hash_password, verify_password, dummy_verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
USERNAME_TAKEN = "Username already exists"


class CredentialStore:
    """Users and their password hashes.

    Hashing is deliberately slow, so it runs in the threadpool instead of on
    the event loop.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, user_id: str) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def register(self, username: str, password: str) -> str:
        """Create a user, returning its id. Usernames match case-sensitively."""
        result = await self.db.execute(select(User.id).where(User.username == username))
        if result.scalar_one_or_none() is not None:
            raise ConflictError(USERNAME_TAKEN, reason=f"username {username!r} exists")

        password_hash = await run_in_threadpool(hash_password, password)
        user = User(username=username, password_hash=password_hash)
        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError:
            # Lost a race with a concurrent sign-up for the same name
            await self.db.rollback()
            raise ConflictError(USERNAME_TAKEN, reason=f"username {username!r} unique constraint")

        logger.info(f"[Auth] registered user {user.id}")
        return user.id

    async def verify(self, username: str, password: str) -> str:
        """Return the user id for valid credentials.

        Unknown users and wrong passwords raise the same error.
        """
        result = await self.db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()

        if user is None:
            await run_in_threadpool(dummy_verify_password)
            raise UnauthorizedError(INVALID_CREDENTIALS, reason="unknown username")

        if not await run_in_threadpool(verify_password, password, user.password_hash):
            raise UnauthorizedError(INVALID_CREDENTIALS, reason=f"bad password for user {user.id}")

        return user.id
