from __future__ import annotations
from typing import Optional
from fastapi import Depends, Header, HTTPException, Request

from chirpy.core.config import Settings
from chirpy.core.security import InvalidToken, bearer_token, decode_token
from chirpy.models.common import TokenIssuer
from chirpy.services.database import ChirpyDB

def get_db(request: Request) -> ChirpyDB:
    return request.app.state.db

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def _require_token(authorization: Optional[str], issuer: TokenIssuer, cfg: Settings) -> tuple[str, int]:
    token = bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail="missing bearer token")
    try:
        return token, decode_token(token, issuer, cfg.jwt_secret)
    except InvalidToken:
        raise HTTPException(status_code=401, detail="invalid token")

def current_user_id(
    authorization: Optional[str] = Header(default=None),
    cfg: Settings = Depends(get_settings),
) -> int:
    """User id from a valid access token."""
    _, user_id = _require_token(authorization, TokenIssuer.access, cfg)
    return user_id

def refresh_token(
    authorization: Optional[str] = Header(default=None),
    cfg: Settings = Depends(get_settings),
) -> tuple[str, int]:
    """Raw refresh token plus its user id; revocation is checked by the caller."""
    return _require_token(authorization, TokenIssuer.refresh, cfg)
