"""Mapping between (owner, image name) pairs and object store keys.

Keys have the shape ``{prefix}/{owner_id}/{image_name}``. Neither component may
contain the separator, otherwise a key could decode to a different pair than
the one that produced it.
"""

from gallerygate.errors import KeyDecodeError, ValidationError

SEPARATOR = "/"
DEFAULT_PREFIX = "gallery"


def _check_component(value: str, label: str) -> None:
    if not value:
        raise ValidationError(f"{label} must not be empty")
    if SEPARATOR in value:
        raise ValidationError(f"{label} must not contain '{SEPARATOR}'")


def encode(owner_id: str, image_name: str, prefix: str = DEFAULT_PREFIX) -> str:
    _check_component(owner_id, "Owner")
    _check_component(image_name, "Image name")
    return f"{prefix}{SEPARATOR}{owner_id}{SEPARATOR}{image_name}"


def decode(key: str, prefix: str = DEFAULT_PREFIX) -> tuple[str, str]:
    """Split a store key back into ``(owner_id, image_name)``.

    Raises:
        KeyDecodeError: if the key was not produced by ``encode`` under ``prefix``
    """
    parts = key.split(SEPARATOR)
    if len(parts) != 3:
        raise KeyDecodeError(key, f"expected 3 segments, got {len(parts)}")
    head, owner_id, image_name = parts
    if head != prefix:
        raise KeyDecodeError(key, f"expected prefix {prefix!r}")
    if not owner_id or not image_name:
        raise KeyDecodeError(key, "empty owner or image name")
    return owner_id, image_name


def listing_prefix(prefix: str = DEFAULT_PREFIX) -> str:
    """Prefix used to list every key in the namespace."""
    return f"{prefix}{SEPARATOR}"
