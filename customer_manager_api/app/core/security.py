"""
Security helpers for password hashing and JWT access tokens.

Tokens are compact JWTs (``header.claims.signature``, each part
base64url encoded) signed with HMAC-SHA256 through PyJWT.  The signing
secret is passed in by the caller, which reads it from the injected
``Settings``.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random 16-byte salt.
The stored format is ``"<salt hex>$<hash hex>"``.
"""

import hashlib
import hmac
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

PBKDF2_ITERATIONS = 100_000
DEFAULT_ALGORITHM = "HS256"


def create_access_token(
    claims: Dict[str, Any],
    secret: str,
    expires_delta: timedelta,
    algorithm: str = DEFAULT_ALGORITHM,
    now: Optional[datetime] = None,
) -> str:
    """Create a signed JWT with the given claims.

    The claims are extended with ``iat`` and ``exp`` (UNIX timestamps,
    UTC).  ``exp`` is ``now + expires_delta``.

    Parameters
    ----------
    claims : dict
        Claims to embed in the token (e.g. ``{"id": "<user id>"}``).
    secret : str
        Symmetric signing key.
    expires_delta : timedelta
        Token lifetime.
    algorithm : str
        JWS algorithm, ``HS256`` by default.
    now : Optional[datetime]
        Issue time; defaults to the current UTC time.

    Returns
    -------
    str
        The encoded token.
    """
    issued_at = now or datetime.now(timezone.utc)
    to_encode = dict(claims)
    to_encode["iat"] = int(issued_at.timestamp())
    to_encode["exp"] = int((issued_at + expires_delta).timestamp())
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT.

    Returns the claims when the signature and ``exp`` are valid,
    otherwise ``None``.
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.InvalidTokenError:
        return None


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    A fresh random salt is generated for each call, so hashing the same
    password twice yields different strings.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a plain password against a stored ``salt$hash`` string.

    Malformed or missing stored values never match.
    """
    if not hashed_password or "$" not in hashed_password:
        return False
    salt_hex, hash_hex = hashed_password.split("$", 1)
    try:
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
