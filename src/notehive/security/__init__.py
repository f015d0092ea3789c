"""Security utilities."""

from .jwt import (
    blacklist_token,
    create_access_token,
    decode_access_token,
    get_user_id_from_token,
)
from .password import hash_password, needs_update, verify_and_upgrade, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
    "needs_update",
    "create_access_token",
    "decode_access_token",
    "get_user_id_from_token",
    "blacklist_token",
]
