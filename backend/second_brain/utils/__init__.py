"""Utilities"""
from .security import hash_password, verify_password, dummy_verify_password, TokenService

__all__ = [
    "hash_password", "verify_password", "dummy_verify_password", "TokenService",
]
