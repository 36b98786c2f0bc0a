"""Security helpers: password hashing and bearer tokens"""
import logging
from datetime import datetime, timedelta
from typing import Optional
from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext

from ..config import Settings, settings
from ..exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__default_rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password"""
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify_password() -> None:
    """Spend the cost of one verification without a stored hash"""
    pwd_context.dummy_verify()


class TokenService:
    """Issues and verifies signed, stateless access tokens.

    The signing secret is fixed at construction and never changes for the
    lifetime of the instance. There is no revocation: a token stays valid
    until its ``exp`` claim.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, config: Settings) -> "TokenService":
        return cls(
            secret_key=config.JWT_SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            expire_minutes=config.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    @property
    def lifetime(self) -> timedelta:
        return self._expire

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """Create an access token for ``user_id``"""
        issued_at = now or datetime.utcnow()
        payload = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self._expire,
            "type": ACCESS_TOKEN_TYPE,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """Return the user id embedded in ``token``.

        Raises InvalidTokenError for every failure; the specific cause is
        only recorded in ``reason``.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise InvalidTokenError(reason="expired")
        except JWTError as e:
            raise InvalidTokenError(reason=f"undecodable: {e}")

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise InvalidTokenError(reason="wrong token type")

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError(reason="missing subject")
        return user_id
