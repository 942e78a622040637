"""
Rule-based claim evaluation.

The rule table is checked top to bottom and the first matching rule wins.
Claims that match no rule are rejected as protected land.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .models.claim import Coordinate, Purpose
from .models.decision import Decision, Verdict

APPROVAL_MIN_LATITUDE = 15.0
APPROVAL_MIN_LONGITUDE = 75.0

REASON_COMMERCIAL_SUITABLE = "Land suitable for commercial use"
REASON_ENVIRONMENTAL_CLEARANCE = "Environmental clearance needed"
REASON_PROTECTED_AREA = "Land is protected area"


@dataclass(frozen=True)
class Rule:
    """One row of the rule table."""
    name: str
    purpose: Optional[Purpose]
    condition: Callable[[Coordinate], bool]
    verdict: Verdict
    reason: str

    def matches(self, coordinate: Coordinate, purpose: Purpose) -> bool:
        if self.purpose is not None and self.purpose is not purpose:
            return False
        return self.condition(coordinate)


def _in_commercial_region(coordinate: Coordinate) -> bool:
    return (
        coordinate.latitude > APPROVAL_MIN_LATITUDE
        and coordinate.longitude > APPROVAL_MIN_LONGITUDE
    )


RULES: Tuple[Rule, ...] = (
    Rule(
        name="commercial_region",
        purpose=Purpose.COMMERCIAL,
        condition=_in_commercial_region,
        verdict=Verdict.APPROVED,
        reason=REASON_COMMERCIAL_SUITABLE,
    ),
    Rule(
        name="industrial_review",
        purpose=Purpose.INDUSTRIAL,
        condition=lambda coordinate: True,
        verdict=Verdict.FURTHER_REVIEW_REQUIRED,
        reason=REASON_ENVIRONMENTAL_CLEARANCE,
    ),
)

DEFAULT_VERDICT = Verdict.REJECTED
DEFAULT_REASON = REASON_PROTECTED_AREA


def evaluate(coordinate: Coordinate, purpose: Purpose) -> Decision:
    """
    Decide a land claim.

    Total over its inputs: coordinates outside the geographic range are
    evaluated like any other and no exception is raised.

    Args:
        coordinate: Location of the claimed parcel
        purpose: Declared land use

    Returns:
        Decision snapshotting the coordinate and purpose
    """
    purpose = Purpose.parse(purpose)
    for rule in RULES:
        if rule.matches(coordinate, purpose):
            return Decision(
                verdict=rule.verdict,
                reason=rule.reason,
                coordinate=coordinate,
                purpose=purpose,
            )
    return Decision(
        verdict=DEFAULT_VERDICT,
        reason=DEFAULT_REASON,
        coordinate=coordinate,
        purpose=purpose,
    )
