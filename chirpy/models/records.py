from __future__ import annotations
import base64
from pydantic import BaseModel, Field, field_serializer, field_validator
from typing import Dict, Any
from datetime import datetime

class Chirp(BaseModel):
    id: int
    author_id: int = Field(..., description="Id of the posting user; not checked against users")
    body: str

class User(BaseModel):
    id: int
    email: str = Field(..., description="Normalized: trimmed and lower-cased")
    password_hash: bytes = Field(..., repr=False)
    is_upgraded: bool = False

    # Hashes are opaque bytes; JSON carries them as base64 text.
    @field_serializer("password_hash", when_used="json")
    def encode_hash(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")

    @field_validator("password_hash", mode="before")
    @classmethod
    def decode_hash(cls, value: Any) -> Any:
        if isinstance(value, str):
            return base64.b64decode(value, validate=True)
        return value

class Snapshot(BaseModel):
    """
    Everything the store persists, as one value.
    Counters are required on disk; a map left out decodes as empty, a null one is rejected.
    """
    next_chirp_id: int = Field(..., ge=1)
    next_user_id: int = Field(..., ge=1)
    chirps: Dict[int, Chirp] = Field(default_factory=dict)
    users: Dict[int, User] = Field(default_factory=dict)
    revoked_tokens: Dict[str, datetime] = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls(next_chirp_id=1, next_user_id=1)
