from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import List, Optional, Union

from chirpy.core.locks import RWLock
from chirpy.models.common import SortOrder
from chirpy.models.records import Chirp, Snapshot, User
from chirpy.services.errors import (
    AlreadyExists,
    AlreadyRevoked,
    AuthFailed,
    Forbidden,
    NotFound,
)
from chirpy.services.passwords import BcryptHasher, PasswordHasher
from chirpy.services.storage import SnapshotFile

logger = logging.getLogger(__name__)

def normalize_email(email: str) -> str:
    return email.strip().lower()

class ChirpyDB:
    """
    File-backed store for chirps, users and revoked refresh tokens.

    Every operation reloads the whole snapshot from disk and, if it mutates,
    writes the whole snapshot back. Nothing is cached between calls.
    - Reads hold the shared lock while loading.
    - Mutations hold the exclusive lock across load -> mutate -> store, so
      concurrent writers cannot allocate the same id or lose each other's changes.
    """

    def __init__(self, path: str, hasher: Optional[PasswordHasher] = None):
        self.path = path
        self.hasher: PasswordHasher = hasher or BcryptHasher()
        self._file = SnapshotFile(path)
        self._lock = RWLock()
        with self._lock.write():
            self._file.initialize()

    # ---------- Snapshot I/O ----------
    def load(self) -> Snapshot:
        with self._lock.read():
            return self._file.read()

    def store(self, snapshot: Snapshot) -> None:
        with self._lock.write():
            self._file.write(snapshot)

    # ---------- Chirps ----------
    def create_chirp(self, author_id: int, body: str) -> Chirp:
        with self._lock.write():
            snap = self._file.read()
            chirp = Chirp(id=snap.next_chirp_id, author_id=author_id, body=body)
            snap.chirps[chirp.id] = chirp
            snap.next_chirp_id += 1
            self._file.write(snap)
        logger.info("Created chirp %d by user %d", chirp.id, author_id)
        return chirp

    def get_chirp(self, chirp_id: int) -> Chirp:
        chirp = self.load().chirps.get(chirp_id)
        if chirp is None:
            raise NotFound(f"chirp {chirp_id} not found")
        return chirp

    def list_chirps(
        self,
        author_id: Optional[int] = None,
        sort: Union[SortOrder, str] = SortOrder.asc,
    ) -> List[Chirp]:
        order = SortOrder(sort)
        chirps = self.load().chirps.values()
        if author_id is not None:
            chirps = [c for c in chirps if c.author_id == author_id]
        return sorted(chirps, key=lambda c: c.id, reverse=order is SortOrder.desc)

    def delete_chirp(self, chirp_id: int, requesting_user_id: int) -> None:
        with self._lock.write():
            snap = self._file.read()
            chirp = snap.chirps.get(chirp_id)
            if chirp is None:
                raise NotFound(f"chirp {chirp_id} not found")
            if chirp.author_id != requesting_user_id:
                raise Forbidden(f"user {requesting_user_id} is not the author of chirp {chirp_id}")
            del snap.chirps[chirp_id]
            self._file.write(snap)
        logger.info("Deleted chirp %d", chirp_id)

    # ---------- Users ----------
    def create_user(self, email: str, password: str) -> User:
        normalized = normalize_email(email)
        # bcrypt is slow; keep it outside the exclusive section
        password_hash = self.hasher.hash(password)
        with self._lock.write():
            snap = self._file.read()
            if _find_by_email(snap, normalized) is not None:
                raise AlreadyExists(f"a user with email {normalized} already exists")
            user = User(id=snap.next_user_id, email=normalized, password_hash=password_hash)
            snap.users[user.id] = user
            snap.next_user_id += 1
            self._file.write(snap)
        logger.info("Created user %d", user.id)
        return user

    def get_user(self, user_id: int) -> User:
        user = self.load().users.get(user_id)
        if user is None:
            raise NotFound(f"user {user_id} not found")
        return user

    def get_user_by_email(self, email: str) -> User:
        normalized = normalize_email(email)
        user = _find_by_email(self.load(), normalized)
        if user is None:
            raise NotFound(f"no user with email {normalized}")
        return user

    def update_user_credentials(self, user_id: int, new_email: str, new_password: str) -> User:
        normalized = normalize_email(new_email)
        password_hash = self.hasher.hash(new_password)
        with self._lock.write():
            snap = self._file.read()
            user = snap.users.get(user_id)
            if user is None:
                raise NotFound(f"user {user_id} not found")
            owner = _find_by_email(snap, normalized)
            if owner is not None and owner.id != user_id:
                raise AlreadyExists(f"a user with email {normalized} already exists")
            updated = user.model_copy(update={"email": normalized, "password_hash": password_hash})
            snap.users[user_id] = updated
            self._file.write(snap)
        logger.info("Updated credentials for user %d", user_id)
        return updated

    def verify_password(self, email: str, candidate: str) -> User:
        user = self.get_user_by_email(email)
        if not self.hasher.verify(candidate, user.password_hash):
            raise AuthFailed("password does not match")
        return user

    def upgrade_user(self, user_id: int) -> None:
        with self._lock.write():
            snap = self._file.read()
            user = snap.users.get(user_id)
            if user is None:
                raise NotFound(f"user {user_id} not found")
            if user.is_upgraded:
                return
            user.is_upgraded = True
            self._file.write(snap)
        logger.info("Upgraded user %d", user_id)

    # ---------- Refresh tokens ----------
    def is_token_revoked(self, token: str) -> bool:
        return token in self.load().revoked_tokens

    def revoke_token(self, token: str) -> None:
        with self._lock.write():
            snap = self._file.read()
            if token in snap.revoked_tokens:
                raise AlreadyRevoked("token is already revoked")
            snap.revoked_tokens[token] = datetime.now(timezone.utc)
            self._file.write(snap)
        logger.info("Revoked a refresh token (%d revoked in total)", len(snap.revoked_tokens))

def _find_by_email(snap: Snapshot, normalized: str) -> Optional[User]:
    for user in snap.users.values():
        if user.email == normalized:
            return user
    return None
