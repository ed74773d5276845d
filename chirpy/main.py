from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chirpy.api.auth_routes import router as auth_router
from chirpy.api.chirp_routes import router as chirp_router
from chirpy.api.health_routes import router as health_router
from chirpy.api.user_routes import router as user_router
from chirpy.api.webhook_routes import router as webhook_router
from chirpy.core.config import Settings, settings as default_settings
from chirpy.core.logging import setup_logging
from chirpy.services.database import ChirpyDB
from chirpy.services.errors import (
    AlreadyExists,
    AlreadyRevoked,
    AuthFailed,
    Forbidden,
    NotFound,
    StoreError,
)
from chirpy.services.passwords import BcryptHasher

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    NotFound: 404,
    Forbidden: 403,
    AlreadyExists: 409,
    AlreadyRevoked: 409,
    AuthFailed: 401,
}

async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    status = STATUS_BY_ERROR.get(type(exc), 500)
    if status == 500:
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Something went wrong"})
    return JSONResponse(status_code=status, content={"detail": str(exc)})

def create_app(cfg: Optional[Settings] = None, db: Optional[ChirpyDB] = None) -> FastAPI:
    cfg = cfg or default_settings
    app = FastAPI(title="Chirpy", version="1.0.0")
    app.state.settings = cfg
    app.state.db = db or ChirpyDB(cfg.db_path, hasher=BcryptHasher(rounds=cfg.bcrypt_rounds))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, _store_error_handler)

    app.include_router(health_router, prefix="/api")
    app.include_router(chirp_router, prefix="/api")
    app.include_router(user_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")
    app.include_router(webhook_router, prefix="/api")
    return app

def run() -> None:
    import uvicorn

    setup_logging()
    uvicorn.run(create_app(), host="0.0.0.0", port=8080, log_config=None)

if __name__ == "__main__":
    run()
