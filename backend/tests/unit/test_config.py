# tests/unit/test_config.py
# Required configuration must be present before serving traffic

import pytest
from pydantic import ValidationError

from second_brain.config import Settings


def test_missing_database_url_is_fatal(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_missing_secret_is_fatal(monkeypatch):
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_secret_is_fatal(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "   ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)
    settings = Settings(_env_file=None)

    assert settings.JWT_ALGORITHM == "HS256"
    assert settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES == 24 * 60
    assert settings.BCRYPT_ROUNDS == 10
    assert settings.SHARE_HASH_LENGTH >= 10
