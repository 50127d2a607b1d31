"""Encoding and decoding of caller identity tokens.

Tokens are issued elsewhere; this service only needs to read the
``user_id`` and ``role`` claims. ``create_token`` exists for local tooling
and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from snip.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by an identity token."""

    user_id: str
    role: str = "USER"
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded into a TokenPayload."""


def create_token(user_id: str, role: str, settings: AuthSettings) -> str:
    """Sign a token for a user.

    Args:
        user_id: User ID
        role: USER, MODERATOR or ADMIN
        settings: Signing secret, algorithm and lifetime

    Returns:
        Encoded token
    """
    claims = {
        "user_id": user_id,
        "role": role,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is expired, tampered with or missing claims
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token is missing required claims") from e
