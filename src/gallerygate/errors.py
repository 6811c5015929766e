"""Error taxonomy shared by the upload, listing and audit paths.

Every error that may reach a caller derives from ``GalleryError`` and carries
the HTTP status code and message rendered by the exception handler in
``gallerygate.main``.
"""


class GalleryError(Exception):
    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(GalleryError):
    """Request is well-formed JSON but its values are not acceptable."""

    status_code = 400
    message = "Bad Request"


class ConflictError(GalleryError):
    status_code = 409
    message = "Already exists"

    def __init__(self, key: str | None = None, message: str | None = None):
        self.key = key
        super().__init__(message)


class StoreError(GalleryError):
    """A call against the object store or the audit table failed."""

    status_code = 500

    def __init__(self, operation: str, key: str | None = None, cause: Exception | None = None):
        self.operation = operation
        self.key = key
        self.cause = cause
        super().__init__()

    def __str__(self) -> str:
        detail = f"{self.operation} failed"
        if self.key is not None:
            detail += f" for {self.key}"
        if self.cause is not None:
            detail += f": {self.cause}"
        return detail


class KeyDecodeError(GalleryError):
    status_code = 500

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__()

    def __str__(self) -> str:
        return f"Cannot decode store key {self.key!r}: {self.reason}"


class ObjectNotFoundError(Exception):
    """Raised by the store client when a key does not exist.

    Only the conflict resolver consumes it; it is not a ``GalleryError`` so it
    never maps to a caller-facing response.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Object not found: {key}")


__all__ = [
    "ConflictError",
    "GalleryError",
    "KeyDecodeError",
    "ObjectNotFoundError",
    "StoreError",
    "ValidationError",
]
