"""Access and refresh tokens (HS256 JWTs)."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import jwt

from chirpy.models.common import TokenIssuer

ALGORITHM = "HS256"


class InvalidToken(Exception):
    """Token is malformed, expired, badly signed or from the wrong issuer."""


def create_token(user_id: int, issuer: TokenIssuer, secret: str, ttl_seconds: int) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "iss": issuer.value,
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=ttl_seconds),
        # two tokens minted in the same second must still differ
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def decode_token(token: str, issuer: TokenIssuer, secret: str) -> int:
    """Validate ``token`` and return the user id in its subject."""

    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            issuer=issuer.value,
            options={"require": ["exp", "iss", "sub"]},
        )
    except jwt.PyJWTError as exc:
        raise InvalidToken(str(exc)) from exc

    try:
        return int(claims["sub"])
    except (TypeError, ValueError) as exc:
        raise InvalidToken("subject is not a user id") from exc


def bearer_token(authorization: str | None, scheme: str = "Bearer") -> str:
    """Strip ``<scheme> `` from an Authorization header value."""

    if not authorization:
        return ""
    prefix = f"{scheme} "
    if authorization.startswith(prefix):
        return authorization[len(prefix):].strip()
    return authorization.strip()
