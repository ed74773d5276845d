from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from chirpy.api.deps import current_user_id, get_db
from chirpy.models.records import User
from chirpy.services.database import ChirpyDB

router = APIRouter()

class Credentials(BaseModel):
    email: str = Field(..., min_length=1, examples=["alice@example.com"])
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only looks at the first 72 bytes and rejects longer input
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return value

class UserResponse(BaseModel):
    """Public view of a user; never carries the password hash."""
    id: int
    email: str
    is_chirpy_red: bool

    @classmethod
    def of(cls, user: User) -> "UserResponse":
        return cls(id=user.id, email=user.email, is_chirpy_red=user.is_upgraded)

class UpdatedUserResponse(BaseModel):
    id: int
    email: str

@router.post("/users", status_code=201, response_model=UserResponse)
def create_user(req: Credentials, db: ChirpyDB = Depends(get_db)):
    return UserResponse.of(db.create_user(req.email, req.password))

@router.put("/users", response_model=UpdatedUserResponse)
def update_user(
    req: Credentials,
    user_id: int = Depends(current_user_id),
    db: ChirpyDB = Depends(get_db),
):
    user = db.update_user_credentials(user_id, req.email, req.password)
    return UpdatedUserResponse(id=user.id, email=user.email)
