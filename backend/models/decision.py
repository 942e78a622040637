"""Decision data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .claim import Coordinate, Purpose


class Verdict(Enum):
    """Outcome of a land claim evaluation."""
    APPROVED = "Approved"
    REJECTED = "Rejected"
    FURTHER_REVIEW_REQUIRED = "FurtherReviewRequired"

    @property
    def label(self) -> str:
        """Wording shown on the decision view and in the report."""
        return _VERDICT_LABELS[self]


_VERDICT_LABELS = {
    Verdict.APPROVED: "Claim Approved",
    Verdict.REJECTED: "Claim Rejected",
    Verdict.FURTHER_REVIEW_REQUIRED: "Further Review Required",
}


@dataclass(frozen=True)
class Decision:
    """
    Verdict for one submitted claim.

    A snapshot of the coordinate and purpose active when the claim was
    submitted; later selections never mutate it.

    Attributes:
        verdict: Approved, Rejected or FurtherReviewRequired
        reason: Explanation of the verdict
        coordinate: Location the claim was made for
        purpose: Declared land use at submission time
    """
    verdict: Verdict
    reason: str
    coordinate: Coordinate
    purpose: Purpose

    def to_dict(self) -> Dict[str, Any]:
        return {
            "verdict": self.verdict.value,
            "label": self.verdict.label,
            "reason": self.reason,
            "purpose": self.purpose.value,
            "coordinate": self.coordinate.to_dict(),
        }
