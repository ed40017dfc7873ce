"""
Clock arithmetic and reply formatting.

Times are computed by shifting the current UTC epoch by an offset and
reading the UTC clock fields of the result, so no local timezone database
is involved.
"""

import time
from datetime import datetime
from typing import Optional

import pytz

from ..models import Location, TimezoneInfo


def utc_now() -> int:
    """Current UTC epoch, rounded to the second."""
    return round(time.time())


def format_time(dt: datetime) -> str:
    return dt.strftime("%H:%M")


def get_offset_time(offset: int, now: Optional[int] = None) -> str:
    """
    Render the wall clock ``offset`` seconds away from UTC as ``HH:MM``.

    Args:
        offset: Seconds east of UTC (raw + DST, or a profile offset)
        now: UTC epoch seconds, defaults to the current time
    """
    if now is None:
        now = utc_now()
    shifted = datetime.fromtimestamp(now + offset, tz=pytz.utc)
    return format_time(shifted)


def render_current_time(tz: TimezoneInfo, now: Optional[int] = None) -> str:
    return get_offset_time(tz.total_offset, now)


def render_message(loc: Location, tz: TimezoneInfo, now: Optional[int] = None) -> str:
    """Example: "13:00 (Berlin, Germany)"."""
    text = render_current_time(tz, now)
    if loc.address:
        text += f" ({loc.address})"
    return text


def render_labelled(label: str, offset: int, now: Optional[int] = None) -> str:
    """Example: "Berlin: 13:00"."""
    return f"{label}: {get_offset_time(offset, now)}"
