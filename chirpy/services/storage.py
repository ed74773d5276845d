from __future__ import annotations
import logging
import os
from pydantic import ValidationError
from chirpy.models.records import Snapshot
from chirpy.services.errors import CorruptState, StorageUnavailable

logger = logging.getLogger(__name__)

def exists(path: str) -> bool:
    return os.path.exists(path)

class SnapshotFile:
    """
    JSON persistence for the whole store: one file, one snapshot.
    Every write rewrites the entire file (truncate, then write).
    This class does no locking; ChirpyDB guards every call.
    """
    def __init__(self, path: str):
        self.path = path

    def initialize(self) -> bool:
        """
        Create the file with an empty snapshot if it is missing.
        Returns True when a new file was written. An existing file is never reset.
        The parent directory must already exist.
        """
        if exists(self.path):
            return False
        self.write(Snapshot.empty())
        logger.info("Created snapshot file at %s", self.path)
        return True

    def read(self) -> Snapshot:
        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except OSError as exc:
            logger.error("Cannot open snapshot file %s: %s", self.path, exc)
            raise StorageUnavailable(f"cannot read {self.path}: {exc}") from exc
        try:
            return Snapshot.model_validate_json(raw)
        except ValidationError as exc:
            logger.error("Snapshot file %s does not decode: %s", self.path, exc)
            raise CorruptState(f"{self.path} is not a valid snapshot") from exc

    def write(self, snapshot: Snapshot) -> None:
        payload = snapshot.model_dump_json(indent=2)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as exc:
            logger.error("Cannot write snapshot file %s: %s", self.path, exc)
            raise StorageUnavailable(f"cannot write {self.path}: {exc}") from exc
