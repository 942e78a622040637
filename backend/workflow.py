"""
Claim workflow state machine.

Transitions are pure functions taking a WorkflowState and returning a new
one. ``ClaimWorkflow`` holds the state for one session and applies the
transitions to it; the Streamlit app and the API server each keep one per
user session.
"""

from __future__ import annotations
import asyncio
import logging
from dataclasses import replace
from typing import Optional, Union

from .evaluator import evaluate
from .geocoding.resolver import GeocodeResolver
from .models.claim import Coordinate, Purpose
from .models.workflow import View, WorkflowState
from .utils.errors import LandClaimError, NoLocationSelectedError

logger = logging.getLogger(__name__)


def initial_state() -> WorkflowState:
    """State of a freshly loaded session."""
    return WorkflowState()


def select_location(state: WorkflowState, coordinate: Coordinate) -> WorkflowState:
    """Pick a location. Any prior verdict no longer applies and is cleared."""
    return replace(
        state,
        selected_coordinate=coordinate,
        decision=None,
        claimed=False,
        appealed=False,
    )


def set_purpose(state: WorkflowState, purpose: Union[Purpose, str]) -> WorkflowState:
    return replace(state, purpose=Purpose.parse(purpose))


def submit_claim(state: WorkflowState) -> WorkflowState:
    """
    Evaluate a claim for the selected location and purpose.

    Args:
        state: Current workflow state

    Returns:
        New state holding the decision, flagged as claimed, on the decision view

    Raises:
        NoLocationSelectedError: If no location has been selected
    """
    if state.selected_coordinate is None:
        raise NoLocationSelectedError.create()
    decision = evaluate(state.selected_coordinate, state.purpose)
    logger.info(
        f"Claim evaluated: purpose={decision.purpose.value}, "
        f"coordinate=({decision.coordinate}), verdict={decision.verdict.value}"
    )
    return replace(
        state,
        decision=decision,
        claimed=True,
        active_view=View.DECISION,
    )


def appeal(state: WorkflowState) -> WorkflowState:
    # No prior claim is required; an appeal without one is accepted as-is.
    return replace(state, appealed=True, active_view=View.APPEAL)


def switch_view(state: WorkflowState, view: Union[View, str]) -> WorkflowState:
    return replace(state, active_view=View.parse(view))


def resolve_search(
    state: WorkflowState,
    text: str,
    resolver: GeocodeResolver,
) -> WorkflowState:
    """
    Resolve search text and select the resulting location.

    Args:
        state: Current workflow state
        text: Coordinates as ``"lat, lon"`` or a place name
        resolver: Resolver used for place names

    Returns:
        New state with the resolved location selected

    Raises:
        NotFoundError: If no place matches the text
        ResolverError: If the lookup failed
    """
    coordinate = resolver.resolve(text)
    return select_location(state, coordinate)


async def resolve_search_async(
    state: WorkflowState,
    text: str,
    resolver: GeocodeResolver,
) -> WorkflowState:
    """Like ``resolve_search`` but runs the blocking lookup in a worker thread."""
    coordinate = await asyncio.to_thread(resolver.resolve, text)
    return select_location(state, coordinate)


class ClaimWorkflow:
    """
    Owns the WorkflowState of one session.

    Each method applies the matching transition and replaces ``state``.
    When a transition raises, ``state`` is left untouched.
    """

    def __init__(
        self,
        resolver: Optional[GeocodeResolver] = None,
        state: Optional[WorkflowState] = None,
    ):
        self.resolver = resolver
        self.state = state if state is not None else initial_state()

    def select_location(self, coordinate: Coordinate) -> WorkflowState:
        self.state = select_location(self.state, coordinate)
        return self.state

    def set_purpose(self, purpose: Union[Purpose, str]) -> WorkflowState:
        self.state = set_purpose(self.state, purpose)
        return self.state

    def submit_claim(self) -> WorkflowState:
        try:
            self.state = submit_claim(self.state)
        except LandClaimError as e:
            logger.warning(f"Claim not submitted: {e}")
            raise
        return self.state

    def appeal(self) -> WorkflowState:
        self.state = appeal(self.state)
        logger.info("Appeal submitted")
        return self.state

    def switch_view(self, view: Union[View, str]) -> WorkflowState:
        self.state = switch_view(self.state, view)
        return self.state

    def reset(self) -> WorkflowState:
        self.state = initial_state()
        return self.state

    def _require_resolver(self) -> GeocodeResolver:
        if self.resolver is None:
            raise RuntimeError("ClaimWorkflow was created without a GeocodeResolver")
        return self.resolver

    def resolve_search(self, text: str) -> WorkflowState:
        try:
            self.state = resolve_search(self.state, text, self._require_resolver())
        except LandClaimError as e:
            logger.warning(f"Search failed: {e}")
            raise
        return self.state

    async def resolve_search_async(self, text: str) -> WorkflowState:
        """
        Resolve search text without blocking the event loop.

        The result is applied to whatever the state is once the lookup
        completes, so a slower search finishing after a newer action still
        replaces the selected location. In-flight searches are not cancelled
        or ordered.
        """
        resolver = self._require_resolver()
        try:
            coordinate = await asyncio.to_thread(resolver.resolve, text)
        except LandClaimError as e:
            logger.warning(f"Search failed: {e}")
            raise
        self.state = select_location(self.state, coordinate)
        return self.state
