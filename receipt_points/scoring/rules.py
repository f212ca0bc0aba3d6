"""
Rule-based receipt scoring.

Every rule is deterministic, independent of the others, and returns the
number of points it awards for one receipt.
"""
from __future__ import annotations

import math

from receipt_points.parsing import parse_clock, parse_day
from receipt_points.schemas import Receipt

TOLERANCE = 1e-9


def is_multiple(value: float, n: float) -> bool:
    if n == 0:
        return False
    return abs(math.fmod(value, n)) < TOLERANCE


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def retailer_points(receipt: Receipt) -> int:
    """+1 for every letter or decimal digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())


def round_dollar_points(receipt: Receipt) -> int:
    """+50 when the total has no cents."""
    return 50 if is_multiple(receipt.total, 1.00) else 0


def quarter_points(receipt: Receipt) -> int:
    """+25 when the total is a multiple of 0.25."""
    return 25 if is_multiple(receipt.total, 0.25) else 0


def item_pair_points(receipt: Receipt) -> int:
    """+5 for every two items."""
    return 5 * (len(receipt.items) // 2)


def description_points(receipt: Receipt) -> int:
    """ceil(price * 0.2) for each item whose trimmed description length is a
    multiple of 3.

    Only the space character is trimmed, and the length is the UTF-8 byte
    length. An empty description has length 0 and therefore qualifies.
    """
    points = 0
    for item in receipt.items:
        trimmed = item.short_description.strip(" ")
        if len(trimmed.encode("utf-8")) % 3 == 0:
            points += math.ceil(item.price * 0.2)
    return points


def odd_day_points(receipt: Receipt) -> int:
    """+6 when the purchase day is odd. Raises ParseError on a bad date."""
    day = parse_day(receipt.purchase_date)
    return 6 if day % 2 == 1 else 0


def afternoon_points(receipt: Receipt) -> int:
    """+10 for purchases after 14:00 and before 16:00 (14:00 itself excluded).

    Raises ParseError on a bad time.
    """
    hour, minute = parse_clock(receipt.purchase_time)
    if hour == 15 or (hour == 14 and minute > 0):
        return 10
    return 0


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SCORING_RULES = [
    retailer_points,
    round_dollar_points,
    quarter_points,
    item_pair_points,
    description_points,
    odd_day_points,
    afternoon_points,
]
