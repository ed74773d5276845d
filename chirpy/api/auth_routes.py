from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from chirpy.api.deps import get_db, get_settings, refresh_token
from chirpy.api.user_routes import Credentials
from chirpy.core.config import Settings
from chirpy.core.security import create_token
from chirpy.models.common import TokenIssuer
from chirpy.services.database import ChirpyDB

router = APIRouter()

class LoginResponse(BaseModel):
    id: int
    email: str
    is_chirpy_red: bool
    token: str
    refresh_token: str

class TokenResponse(BaseModel):
    token: str

def _access_token(user_id: int, cfg: Settings) -> str:
    return create_token(user_id, TokenIssuer.access, cfg.jwt_secret, cfg.access_token_ttl_seconds)

@router.post("/login", response_model=LoginResponse)
def login(req: Credentials, db: ChirpyDB = Depends(get_db), cfg: Settings = Depends(get_settings)):
    user = db.verify_password(req.email, req.password)
    return LoginResponse(
        id=user.id,
        email=user.email,
        is_chirpy_red=user.is_upgraded,
        token=_access_token(user.id, cfg),
        refresh_token=create_token(user.id, TokenIssuer.refresh, cfg.jwt_secret, cfg.refresh_token_ttl_seconds),
    )

@router.post("/refresh", response_model=TokenResponse)
def refresh(
    token: tuple = Depends(refresh_token),
    db: ChirpyDB = Depends(get_db),
    cfg: Settings = Depends(get_settings),
):
    raw, user_id = token
    if db.is_token_revoked(raw):
        raise HTTPException(status_code=401, detail="refresh token has been revoked")
    return TokenResponse(token=_access_token(user_id, cfg))

@router.post("/revoke")
def revoke(token: tuple = Depends(refresh_token), db: ChirpyDB = Depends(get_db)):
    raw, _ = token
    # AlreadyRevoked surfaces as 409
    db.revoke_token(raw)
    return {"revoked": True}
