from __future__ import annotations
from typing import Protocol
import bcrypt

class PasswordHasher(Protocol):
    def hash(self, password: str) -> bytes: ...

    def verify(self, password: str, hashed: bytes) -> bool: ...

class BcryptHasher:
    """Salted bcrypt hashes; checkpw compares in constant time."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> bytes:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds))

    def verify(self, password: str, hashed: bytes) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed)
        except ValueError:
            # stored value is not a bcrypt hash
            return False
