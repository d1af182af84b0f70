# /app/core/security.py

"""
Cryptographic primitives for the identity layer.

- Password hashing with bcrypt (fixed cost factor of 12 rounds).
- Constant-time password verification that never raises on a mismatch.
- HS256-signed JWT access tokens carrying the account id (`sub`), the issue
  time (`iat`) and the expiry (`exp`).

Nothing in this module touches the database; see `auth_service` for the flows
that combine these helpers with account lookups.
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

import bcrypt
import jwt

from .config import get_settings

# --- Constants ---
BCRYPT_ROUNDS = 12
BCRYPT_MAX_PASSWORD_BYTES = 72
ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "iat", "exp"]


# --- Password Hashing ---

def hash_password(plain_password: str) -> str:
    """Returns a salted bcrypt hash of `plain_password` as a text string."""
    encoded = plain_password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Checks a candidate password against a stored bcrypt hash.

    bcrypt.checkpw compares in constant time. A missing or corrupt stored hash,
    or a candidate that bcrypt refuses to process, counts as a mismatch.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    # Verified against when the username is unknown so both login failures cost the same.
    return hash_password("not-a-real-password")


# --- Access Tokens ---

def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Signs a token for `subject` (an account id) that expires after `expires_delta`."""
    settings = get_settings()
    issued_at = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expires_minutes)

    payload = {
        "sub": str(subject),
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verifies the signature, expiry and required claims of `token`.

    Raises `jwt.InvalidTokenError` (or one of its subclasses, such as
    `jwt.ExpiredSignatureError`) when the token cannot be trusted.
    """
    settings = get_settings()
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )
