from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel
from typing import Optional
import logging
import secrets

from chirpy.api.deps import get_db, get_settings
from chirpy.core.config import Settings
from chirpy.core.security import bearer_token
from chirpy.models.common import WebhookEvent
from chirpy.services.database import ChirpyDB

router = APIRouter()
logger = logging.getLogger(__name__)

class WebhookData(BaseModel):
    user_id: int

class WebhookRequest(BaseModel):
    event: str
    data: WebhookData

@router.post("/polka/webhooks")
def polka_webhook(
    req: WebhookRequest,
    authorization: Optional[str] = Header(default=None),
    db: ChirpyDB = Depends(get_db),
    cfg: Settings = Depends(get_settings),
):
    api_key = bearer_token(authorization, scheme="ApiKey")
    if not cfg.polka_api_key or not secrets.compare_digest(api_key.encode(), cfg.polka_api_key.encode()):
        raise HTTPException(status_code=401, detail="invalid api key")
    if req.event != WebhookEvent.user_upgraded.value:
        logger.debug("Ignoring webhook event %s", req.event)
        return {"ok": True}
    db.upgrade_user(req.data.user_id)
    return {"ok": True}
