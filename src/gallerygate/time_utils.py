"""Fixed-offset timestamp rendering shared by audit records and listings."""

import re
from datetime import UTC, datetime, timedelta, timezone

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def parse_utc_offset(offset: str) -> timezone:
    """Turn an offset such as ``+09:00`` or ``-0530`` into a tzinfo."""
    match = _OFFSET_RE.match(offset.strip())
    if not match:
        raise ValueError(f"Invalid UTC offset: {offset!r}")
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    if delta >= timedelta(hours=24):
        raise ValueError(f"UTC offset out of range: {offset!r}")
    return timezone(-delta if sign == "-" else delta)


def format_timestamp(moment: datetime, offset: str = "+09:00") -> str:
    """Render ``moment`` in the given fixed offset as ``YYYY-MM-DDTHH:mm:ss``.

    Naive datetimes are taken to be UTC, which is what botocore and
    ``datetime.now(UTC)`` callers hand us.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(parse_utc_offset(offset)).strftime(TIME_FORMAT)


def now_formatted(offset: str = "+09:00") -> str:
    return format_timestamp(datetime.now(UTC), offset)
