from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import Optional, List

from chirpy.api.deps import current_user_id, get_db, get_settings
from chirpy.core.config import Settings
from chirpy.models.common import SortOrder
from chirpy.models.records import Chirp
from chirpy.services.database import ChirpyDB
from chirpy.services.profanity import clean_chirp

router = APIRouter()

class ChirpRequest(BaseModel):
    body: str = Field(..., examples=["Hello, world!"])

class ChirpResponse(BaseModel):
    id: int
    author_id: int
    body: str

    @classmethod
    def of(cls, chirp: Chirp) -> "ChirpResponse":
        return cls(id=chirp.id, author_id=chirp.author_id, body=chirp.body)

@router.post("/chirps", status_code=201, response_model=ChirpResponse)
def create_chirp(
    req: ChirpRequest,
    user_id: int = Depends(current_user_id),
    db: ChirpyDB = Depends(get_db),
    cfg: Settings = Depends(get_settings),
):
    if len(req.body) > cfg.max_chirp_length:
        raise HTTPException(status_code=400, detail="Chirp is too long")
    return ChirpResponse.of(db.create_chirp(user_id, clean_chirp(req.body)))

@router.get("/chirps", response_model=List[ChirpResponse])
def list_chirps(
    author_id: Optional[int] = None,
    sort: SortOrder = SortOrder.asc,
    db: ChirpyDB = Depends(get_db),
):
    return [ChirpResponse.of(c) for c in db.list_chirps(author_id=author_id, sort=sort)]

@router.get("/chirps/{chirp_id}", response_model=ChirpResponse)
def get_chirp(chirp_id: int, db: ChirpyDB = Depends(get_db)):
    return ChirpResponse.of(db.get_chirp(chirp_id))

@router.delete("/chirps/{chirp_id}")
def delete_chirp(
    chirp_id: int,
    user_id: int = Depends(current_user_id),
    db: ChirpyDB = Depends(get_db),
):
    db.delete_chirp(chirp_id, user_id)
    return {"deleted": chirp_id}
