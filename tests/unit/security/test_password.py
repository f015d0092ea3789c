"""Unit tests for security/password.py"""

from passlib.hash import bcrypt

from notehive.security.password import (
    hash_password,
    needs_update,
    verify_and_upgrade,
    verify_password,
)


def test_hash_and_verify():
    h = hash_password("StrongPassw0rd!")
    assert h != "StrongPassw0rd!"
    assert verify_password("StrongPassw0rd!", h) is True
    assert verify_password("wrong", h) is False


def test_long_passwords_are_not_truncated():
    base = "x" * 72
    h = hash_password(base + "a")
    assert verify_password(base + "b", h) is False


def test_legacy_bcrypt_hash_is_upgraded():
    legacy = bcrypt.hash("secret123")
    assert needs_update(legacy) is True

    valid, new_hash = verify_and_upgrade("secret123", legacy)
    assert valid is True
    assert new_hash is not None
    assert verify_password("secret123", new_hash)
