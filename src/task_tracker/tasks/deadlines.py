# src/task_tracker/tasks/deadlines.py

"""
Deadline parsing and validation.

Accepted formats (full match only):
- YYYY-MM-DD   e.g. 2024-05-20
- D.M.YYYY     e.g. 5.3.2024
- DD.MM.YYYY   e.g. 05.03.2024

A parsed deadline is midnight (local, naive) of that calendar date.
"""

from __future__ import annotations

import re
from datetime import datetime

_ISO_RE = re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})")
# D.M.YYYY with optional zero padding also covers DD.MM.YYYY.
_DOTTED_RE = re.compile(r"(?P<day>[0-9]{1,2})\.(?P<month>[0-9]{1,2})\.(?P<year>[0-9]{4})")

DEADLINE_FORMATS_HELP = "YYYY-MM-DD, D.M.YYYY or DD.MM.YYYY"


def parse_deadline(text: str | None) -> datetime | None:
    """Return midnight of the date in `text`, or None if it is not a real date in an accepted format."""
    if not text:
        return None

    for pattern in (_ISO_RE, _DOTTED_RE):
        m = pattern.fullmatch(text)
        if m is None:
            continue
        try:
            return datetime(int(m["year"]), int(m["month"]), int(m["day"]))
        except ValueError:
            # month 13, 31.02, ...
            return None

    return None


def is_valid_deadline(text: str | None, *, now: datetime | None = None) -> bool:
    """
    True if `text` is a well-formed date strictly later than `now`.

    Since deadlines carry no time of day, today's date is already not in the future.
    """
    parsed = parse_deadline(text)
    if parsed is None:
        return False
    if now is None:
        now = datetime.now()
    return parsed > now
