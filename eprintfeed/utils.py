"""Time helpers shared by the scheduler, CLI and web layer."""

from datetime import datetime
from typing import Optional

import pendulum

RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"


def format_rfc1123z(value: Optional[datetime]) -> str:
    """Format *value* in UTC as RFC 1123 with a numeric zone."""
    if value is None:
        return ""
    return pendulum.instance(value, tz="UTC").in_timezone("UTC").strftime(RFC1123Z)


def minutes_since(value: Optional[datetime]) -> int:
    """Whole minutes elapsed between *value* and now."""
    if value is None:
        return 0
    if value.tzinfo is None:
        value = pendulum.instance(value, tz="UTC")
    elapsed = pendulum.now("UTC") - value
    return int(elapsed.total_seconds() / 60)
