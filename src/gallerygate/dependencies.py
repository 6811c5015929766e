"""
Dependency Injection for the object store and the upload workflow.

The store client is created once during application startup and attached to
``app.state``; route handlers receive it, and the resolver built on top of it,
through FastAPI's Depends(). Tests replace ``get_object_store`` with a fake via
``app.dependency_overrides``.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from gallerygate.config import GallerySettings, get_gallery_settings
from gallerygate.conflict_resolver import ConflictResolver
from gallerygate.db import get_db
from gallerygate.repositories.sign_history_repository import SignHistoryRepository
from gallerygate.storage import ObjectStore


def get_object_store(request: Request) -> ObjectStore:
    """Return the store client created in the application lifespan.

    Raises:
        RuntimeError: If the lifespan did not run
    """
    store = getattr(request.app.state, "object_store", None)
    if store is None:
        raise RuntimeError("Object store not initialized. Make sure the application lifespan is properly configured.")
    return store


def get_conflict_resolver(
    store: ObjectStore = Depends(get_object_store),
    settings: GallerySettings = Depends(get_gallery_settings),
) -> ConflictResolver:
    return ConflictResolver(store, key_prefix=settings.key_prefix, conditional_writes=settings.conditional_writes)


def get_sign_history_repository(db: Session = Depends(get_db)) -> SignHistoryRepository:
    return SignHistoryRepository(db)
