"""
Receipt scoring engine.

Runs every registered rule against a receipt and sums the points.
"""
import logging

from receipt_points.errors import ParseError
from receipt_points.schemas import Receipt, RuleScore, ScoreBreakdown
from receipt_points.scoring.rules import SCORING_RULES

logger = logging.getLogger(__name__)


def score_breakdown(receipt: Receipt) -> ScoreBreakdown:
    """Score ``receipt`` rule by rule.

    A rule that cannot parse the purchase date or time contributes 0 and
    its diagnostic is recorded in ``errors``; the other rules still count.
    """
    rules: list[RuleScore] = []
    errors: list[str] = []
    for fn in SCORING_RULES:
        try:
            points = fn(receipt)
        except ParseError as exc:
            logger.warning("Rule %s skipped for receipt %s: %s", fn.__name__, receipt.id, exc)
            errors.append(str(exc))
            points = 0
        rules.append(RuleScore(rule=fn.__name__, points=points))

    total = sum(r.points for r in rules)
    logger.info("Scored receipt %s: %d points", receipt.id, total)
    return ScoreBreakdown(total=total, rules=rules, errors=errors)


def score_receipt(receipt: Receipt) -> int:
    """Return the point total for ``receipt``."""
    return score_breakdown(receipt).total
