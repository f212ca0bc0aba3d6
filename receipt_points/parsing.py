"""
Structured extraction of the day / hour / minute components of a receipt's
purchase date and time.

``purchaseDate`` is ``YYYY-MM-DD`` and ``purchaseTime`` is ``HH:MM``; the
components live at fixed positions in those strings.
"""
from __future__ import annotations

import re
from datetime import datetime

from receipt_points.errors import ParseError

DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)


def _to_int(text: str, what: str) -> int:
    if not text or not (text.isascii() and text.isdigit()):
        raise ParseError(f"{what} {text!r} is not a number")
    return int(text)


def parse_day(purchase_date: str) -> int:
    """Return the day of month held in characters 8-9 of ``purchase_date``."""
    d = purchase_date[8:10]
    if len(d) != 2:
        raise ParseError(f"purchase date {purchase_date!r} has no day component")
    if d[0] == "0":
        d = d[1]
    return _to_int(d, "day")


def parse_clock(purchase_time: str) -> tuple[int, int]:
    """Return ``(hour, minute)`` from an ``HH:MM`` string."""
    h, m = purchase_time[0:2], purchase_time[3:5]
    if len(h) != 2 or len(m) != 2:
        raise ParseError(f"purchase time {purchase_time!r} is not HH:MM")
    return _to_int(h, "hour"), _to_int(m, "minute")


def validate_purchase_date(value: str) -> str:
    """Reject anything that is not a real, zero-padded ``YYYY-MM-DD`` date."""
    if not DATE_RE.fullmatch(value):
        raise ParseError(f"purchaseDate {value!r} must be formatted YYYY-MM-DD")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError as exc:
        raise ParseError(f"purchaseDate {value!r} is not a calendar date") from exc
    return value


def validate_purchase_time(value: str) -> str:
    """Reject anything that is not a zero-padded 24h ``HH:MM`` time."""
    if not TIME_RE.fullmatch(value):
        raise ParseError(f"purchaseTime {value!r} must be formatted HH:MM")
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError as exc:
        raise ParseError(f"purchaseTime {value!r} is not a valid time") from exc
    return value
