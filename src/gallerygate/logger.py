import json
import logging
from datetime import UTC, datetime

EVENTS_LOGGER = "gallerygate.events"


class StructuredLogger:
    """Writes gallery events as one JSON object per log line.

    Events emitted by the service:

    - ``image_uploaded``: key, size, overwrite
    - ``image_upload_conflict``: key
    - ``user_sign_action``: username, action, timestamp
    """

    def __init__(self, name: str = EVENTS_LOGGER):
        self._logger = logging.getLogger(name)

    def log_event(self, event: str, **fields) -> None:
        payload = {"timestamp": datetime.now(UTC).isoformat(), "event": event}
        # nested ``extra`` fields are flattened into the event
        extra = fields.pop("extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        payload.update(fields)

        try:
            message = json.dumps(payload, default=str)
        except (TypeError, ValueError):
            message = f"{event} {fields}"
        self._logger.info(message)


logger = StructuredLogger()

__all__ = ["EVENTS_LOGGER", "StructuredLogger", "logger"]
