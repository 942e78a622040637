"""Workflow state data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .claim import Coordinate, Purpose, DEFAULT_PURPOSE
from .decision import Decision


class View(str, Enum):
    """Navigable views of the application."""
    MAP = "map"
    DECISION = "decision"
    APPEAL = "appeal"
    ABOUT = "about"

    @classmethod
    def parse(cls, value) -> "View":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown view {value!r}; expected one of "
                f"{', '.join(v.value for v in cls)}"
            ) from None


@dataclass(frozen=True)
class WorkflowState:
    """
    Complete state of one claim session.

    Together with ``active_view`` the flags fully determine what a view
    renders. Instances are immutable; transitions return new ones.

    Attributes:
        selected_coordinate: Location picked on the map, if any
        purpose: Declared land use for the next claim
        decision: Verdict of the last submitted claim, if any
        claimed: Whether a claim has been submitted for the current location
        appealed: Whether the user has appealed
        active_view: View currently shown
    """
    selected_coordinate: Optional[Coordinate] = None
    purpose: Purpose = DEFAULT_PURPOSE
    decision: Optional[Decision] = None
    claimed: bool = False
    appealed: bool = False
    active_view: View = View.MAP

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selected_coordinate": self.selected_coordinate.to_dict() if self.selected_coordinate else None,
            "purpose": self.purpose.value,
            "decision": self.decision.to_dict() if self.decision else None,
            "claimed": self.claimed,
            "appealed": self.appealed,
            "active_view": self.active_view.value,
        }
