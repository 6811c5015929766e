"""
Conflict-aware upload workflow.

Without conditional writes the resolver runs a check-then-act sequence: an
existence check followed by a separate write. The two calls are not atomic, so
two concurrent uploads of the same key without force can both see the key as
free and both write; the last write wins. Enable ``conditional_writes`` on
stores that support ``If-None-Match`` to close that window.
"""

import enum
import logging
import mimetypes

from gallerygate import key_codec
from gallerygate.errors import ConflictError
from gallerygate.intent import UploadIntent
from gallerygate.logger import logger as event_logger
from gallerygate.storage import ObjectStore

logger = logging.getLogger(__name__)


class UploadStatus(enum.Enum):
    WRITTEN = "written"


def guess_content_type(image_name: str) -> str:
    mime_type, _ = mimetypes.guess_type(image_name)
    return mime_type or "application/octet-stream"


class ConflictResolver:
    def __init__(self, store: ObjectStore, key_prefix: str = key_codec.DEFAULT_PREFIX, conditional_writes: bool = False):
        self.store = store
        self.key_prefix = key_prefix
        self.conditional_writes = conditional_writes

    async def resolve_upload(self, owner_id: str, image_name: str, content: bytes, intent: UploadIntent) -> UploadStatus:
        """Store ``content`` under the owner's namespace according to ``intent``.

        Returns:
            UploadStatus.WRITTEN once the object is stored

        Raises:
            ValidationError: if the owner or image name cannot form a key
            ConflictError: if the object exists and force was not requested
            StoreError: if the store check or write fails; nothing is retried
        """
        key = key_codec.encode(owner_id, image_name, self.key_prefix)
        content_type = guess_content_type(image_name)

        if intent is UploadIntent.FORCE:
            await self.store.put(key, content, content_type)
            event_logger.log_event("image_uploaded", key=key, size=len(content), overwrite=True)
            return UploadStatus.WRITTEN

        if self.conditional_writes:
            written = await self.store.put_if_absent(key, content, content_type)
            if not written:
                self._reject(owner_id, image_name, key)
        else:
            if await self.store.exists(key):
                self._reject(owner_id, image_name, key)
            await self.store.put(key, content, content_type)

        event_logger.log_event("image_uploaded", key=key, size=len(content), overwrite=False)
        return UploadStatus.WRITTEN

    def _reject(self, owner_id: str, image_name: str, key: str) -> None:
        logger.info("Image %s of user %s already exists", image_name, owner_id)
        event_logger.log_event("image_upload_conflict", key=key)
        raise ConflictError(key)
