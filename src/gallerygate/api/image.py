import base64
import binascii

from fastapi import APIRouter, Depends

from gallerygate import key_codec
from gallerygate.auth_utils import get_current_owner
from gallerygate.config import GallerySettings, get_gallery_settings
from gallerygate.conflict_resolver import ConflictResolver
from gallerygate.dependencies import get_conflict_resolver, get_object_store
from gallerygate.errors import ValidationError
from gallerygate.intent import parse_force
from gallerygate.listing import project
from gallerygate.schemas.common import OK, StatusResponse
from gallerygate.schemas.image import GalleryEntry, ImageUploadRequest, ProjectionFailure
from gallerygate.storage import ObjectStore

router = APIRouter(tags=["images"])


def decode_image_content(encoded: str, max_bytes: int) -> bytes:
    try:
        content = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("imageContent is not valid base64") from None
    if len(content) > max_bytes:
        raise ValidationError(f"Image too large (max {max_bytes} bytes), got {len(content)} bytes")
    return content


@router.post("/image", response_model=StatusResponse)
async def upload_image(
    request: ImageUploadRequest,
    owner: str = Depends(get_current_owner),
    resolver: ConflictResolver = Depends(get_conflict_resolver),
    settings: GallerySettings = Depends(get_gallery_settings),
):
    """Upload an image under the caller's namespace.

    Without force an existing image is left untouched and 409 is returned.
    """
    # Validate everything before the store is touched
    intent = parse_force(request.force)
    content = decode_image_content(request.image_content, settings.max_upload_bytes)

    await resolver.resolve_upload(owner, request.image_name, content, intent)
    return OK


@router.get("/images", response_model=list[GalleryEntry | ProjectionFailure])
async def list_images(
    _owner: str = Depends(get_current_owner),
    store: ObjectStore = Depends(get_object_store),
    settings: GallerySettings = Depends(get_gallery_settings),
):
    """List every user's images."""
    records = await store.list(key_codec.listing_prefix(settings.key_prefix))
    return project(records, key_prefix=settings.key_prefix, time_zone=settings.time_zone)
