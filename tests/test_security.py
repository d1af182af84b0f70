# /tests/test_security.py

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core import security
from app.core.config import get_settings


# --- Password Hashing ---

def test_hash_password_uses_bcrypt_cost_12():
    """Stored hashes are salted bcrypt hashes with the fixed cost factor."""
    hashed = security.hash_password("pass123")
    assert hashed.startswith("$2b$12$")
    assert "pass123" not in hashed


def test_same_password_hashes_differently(fast_bcrypt):
    assert security.hash_password("pass123") != security.hash_password("pass123")


def test_verify_password_matches_only_the_original(fast_bcrypt):
    hashed = security.hash_password("pass123")
    assert security.verify_password("pass123", hashed) is True
    assert security.verify_password("pass124", hashed) is False
    assert security.verify_password("", hashed) is False


def test_verify_password_treats_corrupt_hash_as_mismatch():
    assert security.verify_password("pass123", "not-a-bcrypt-hash") is False
    assert security.verify_password("pass123", None) is False


def test_hash_password_rejects_passwords_longer_than_72_bytes():
    with pytest.raises(ValueError):
        security.hash_password("x" * 73)


# --- Access Tokens ---

def test_access_token_round_trip():
    token = security.create_access_token("acc_123")
    payload = security.decode_access_token(token)

    assert payload["sub"] == "acc_123"
    assert payload["exp"] > payload["iat"]


def test_default_expiry_comes_from_settings():
    token = security.create_access_token("acc_123")
    payload = security.decode_access_token(token)
    assert payload["exp"] - payload["iat"] == get_settings().jwt_expires_minutes * 60


def test_expired_token_is_rejected():
    token = security.create_access_token("acc_123", expires_delta=timedelta(seconds=-5))
    with pytest.raises(jwt.ExpiredSignatureError):
        security.decode_access_token(token)


def test_token_signed_with_another_secret_is_rejected():
    now = datetime.now(timezone.utc)
    forged = jwt.encode(
        {"sub": "acc_123", "iat": now, "exp": now + timedelta(hours=1)},
        "some-other-secret",
        algorithm="HS256",
    )
    with pytest.raises(jwt.InvalidSignatureError):
        security.decode_access_token(forged)


def test_token_without_subject_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"iat": now, "exp": now + timedelta(hours=1)},
        get_settings().jwt_secret,
        algorithm="HS256",
    )
    with pytest.raises(jwt.MissingRequiredClaimError):
        security.decode_access_token(token)


def test_tampered_token_is_rejected():
    token = security.create_access_token("acc_123")
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[:-2] + ("AA" if signature[-2:] != "AA" else "BB")])
    with pytest.raises(jwt.InvalidTokenError):
        security.decode_access_token(tampered)
