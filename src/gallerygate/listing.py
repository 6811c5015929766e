import logging
from collections.abc import Sequence

from gallerygate import key_codec
from gallerygate.errors import KeyDecodeError
from gallerygate.schemas.image import GalleryEntry, ProjectionFailure
from gallerygate.storage import StoredObjectRecord
from gallerygate.time_utils import format_timestamp

logger = logging.getLogger(__name__)


def project(
    records: Sequence[StoredObjectRecord],
    key_prefix: str = key_codec.DEFAULT_PREFIX,
    time_zone: str = "+09:00",
) -> list[GalleryEntry | ProjectionFailure]:
    """Turn listed store records into caller-facing gallery entries.

    One output per input, in input order. A record whose key does not decode
    is reported in place as a ProjectionFailure rather than dropped.
    """
    projected: list[GalleryEntry | ProjectionFailure] = []
    for record in records:
        try:
            uploader, image_name = key_codec.decode(record.key, key_prefix)
        except KeyDecodeError as e:
            logger.error("Listing projection failed for key %s: %s", record.key, e.reason)
            projected.append(ProjectionFailure(path=record.key, error=e.reason))
            continue
        projected.append(
            GalleryEntry(
                image_name=image_name,
                size=record.size_bytes,
                path=record.key,
                uploader=uploader,
                last_modified=format_timestamp(record.last_modified, time_zone),
            )
        )
    return projected
