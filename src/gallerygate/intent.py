import enum

from gallerygate.errors import ValidationError


class UploadIntent(enum.Enum):
    FORCE = "force"
    NO_FORCE = "no_force"


FORCE_TOKENS = frozenset({"yes", "y", "ok", "true"})
NO_FORCE_TOKENS = frozenset({"no", "n", "false"})


def parse_force(token: str | bool | None) -> UploadIntent:
    """Map the caller's ``force`` field onto an UploadIntent.

    Accepts booleans, ``None`` (field omitted) and a small case-insensitive
    string vocabulary. Anything else is rejected instead of defaulting, so an
    unrecognised token can never silently turn into an overwrite or a skip.
    """
    if token is None:
        return UploadIntent.NO_FORCE
    if isinstance(token, bool):
        return UploadIntent.FORCE if token else UploadIntent.NO_FORCE
    if isinstance(token, str):
        normalized = token.lower()
        if normalized in FORCE_TOKENS:
            return UploadIntent.FORCE
        if normalized in NO_FORCE_TOKENS:
            return UploadIntent.NO_FORCE
    raise ValidationError(f"Unsupported force value: {token!r}")
