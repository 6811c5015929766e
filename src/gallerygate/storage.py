"""
Object store capability used by the upload and listing paths.

Kept small and framework-agnostic so tests can supply simple fakes; the
production implementation is ``gallerygate.s3_service.AsyncS3Client``.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class StoredObjectRecord:
    """Snapshot of one object as returned by a listing call."""

    key: str
    size_bytes: int
    last_modified: datetime


class ObjectStore(Protocol):
    async def get(self, key: str) -> bytes:
        """Return the object's content or raise ObjectNotFoundError / StoreError."""
        ...

    async def exists(self, key: str) -> bool: ...

    async def put(self, key: str, content: bytes, content_type: str | None = None) -> None: ...

    async def put_if_absent(self, key: str, content: bytes, content_type: str | None = None) -> bool:
        """Write only if no object exists; return False when one already does."""
        ...

    async def list(self, prefix: str) -> list[StoredObjectRecord]: ...


__all__ = ["ObjectStore", "StoredObjectRecord"]
