"""Domain services"""
from .credentials import CredentialStore
from .contents import ContentStore
from .shares import ShareRegistry, SharedBrain, generate_share_hash

__all__ = [
    "CredentialStore",
    "ContentStore",
    "ShareRegistry", "SharedBrain", "generate_share_hash",
]
