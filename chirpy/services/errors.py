"""Errors raised by the snapshot store.

Every store operation either returns its value or raises exactly one of these.
Callers decide how to report them; the store never retries.
"""

class StoreError(Exception):
    """Base class for store failures."""

class StorageUnavailable(StoreError):
    """The snapshot file could not be created, opened or written."""

class CorruptState(StoreError):
    """The snapshot file exists but does not decode into a valid snapshot."""

class NotFound(StoreError):
    """The referenced chirp or user does not exist."""

class AlreadyExists(StoreError):
    """Another user already owns this normalized e-mail."""

class Forbidden(StoreError):
    """The requesting user may not perform this action."""

class AlreadyRevoked(StoreError):
    """The token is already on the revocation list."""

class AuthFailed(StoreError):
    """The password does not match the stored hash."""
