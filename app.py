"""Streamlit front end for the Mullai land claim demo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import streamlit as st

from backend import workflow
from backend.models.claim import Coordinate, Purpose
from backend.models.workflow import View, WorkflowState
from backend.services import get_config, get_renderer, get_resolver
from backend.utils.errors import LandClaimError
from backend.utils.logging import get_logger


APP_TITLE = "🌱 Mullai"


@dataclass(frozen=True)
class NavItem:
    """Header navigation entry."""

    view: View
    label: str


NAV_ITEMS: Tuple[NavItem, ...] = (
    NavItem(View.MAP, "🗺️ Map"),
    NavItem(View.ABOUT, "ℹ️ About"),
    NavItem(View.DECISION, "📄 Decision"),
    NavItem(View.APPEAL, "⚖️ Appeal"),
)

VERDICT_COLORS: Dict[str, str] = {
    "Approved": "#15803d",
    "Rejected": "#b91c1c",
    "FurtherReviewRequired": "#b45309",
}

logger = get_logger(__name__)


def init_state() -> None:
    st.session_state.setdefault("workflow_state", workflow.initial_state())
    st.session_state.setdefault("notice", "")
    st.session_state.setdefault("search_text", "")


def current_state() -> WorkflowState:
    return st.session_state.workflow_state


def apply(transition, *args) -> None:
    """Run a transition on the session state, turning errors into a notice."""

    try:
        st.session_state.workflow_state = transition(current_state(), *args)
    except LandClaimError as exc:
        logger.warning(f"Action rejected: {exc}")
        st.session_state.notice = exc.user_message
    else:
        st.session_state.notice = ""


def dismiss_notice() -> None:
    st.session_state.notice = ""


def on_search() -> None:
    apply(workflow.resolve_search, st.session_state.search_text, get_resolver())


def on_drop_pin() -> None:
    coordinate = Coordinate(
        latitude=float(st.session_state.pin_lat),
        longitude=float(st.session_state.pin_lon),
    )
    apply(workflow.select_location, coordinate)


def on_purpose_change() -> None:
    apply(workflow.set_purpose, st.session_state.purpose_choice)


def render_notice() -> None:
    notice = st.session_state.get("notice")
    if not notice:
        return
    st.error(notice)
    st.button("Dismiss", key="dismiss_notice", on_click=dismiss_notice)


def render_header(title: str) -> None:
    cols = st.columns([3] + [1] * len(NAV_ITEMS))
    cols[0].markdown(f"## {title}")
    active = current_state().active_view
    for col, item in zip(cols[1:], NAV_ITEMS):
        col.button(
            item.label,
            key=f"nav_{item.view.value}",
            type="primary" if item.view is active else "secondary",
            on_click=apply,
            args=(workflow.switch_view, item.view),
            width="stretch",
        )


def render_map_view() -> None:
    config = get_config()
    state = current_state()
    selected: Optional[Coordinate] = state.selected_coordinate

    map_col, form_col = st.columns([7, 3])

    with map_col:
        center = selected or Coordinate(*config.app.default_center)
        st.map(
            {"lat": [center.latitude], "lon": [center.longitude]},
            zoom=10 if selected else config.app.default_zoom,
        )
        if selected:
            st.caption(f"Selected location: {selected.latitude}, {selected.longitude}")
        else:
            st.caption("No location selected yet.")

    with form_col:
        st.subheader("Land Claim")
        with st.form("search_form"):
            st.text_input(
                "Search",
                key="search_text",
                placeholder="Enter coordinates (lat, lon) or place name",
                label_visibility="collapsed",
            )
            st.form_submit_button("🔍 Search", on_click=on_search, width="stretch")

        pin_lat, pin_lon = st.columns(2)
        pin_lat.number_input(
            "Latitude",
            min_value=-90.0,
            max_value=90.0,
            value=selected.latitude if selected else config.app.default_center[0],
            format="%.6f",
            key="pin_lat",
        )
        pin_lon.number_input(
            "Longitude",
            min_value=-180.0,
            max_value=180.0,
            value=selected.longitude if selected else config.app.default_center[1],
            format="%.6f",
            key="pin_lon",
        )
        st.button("📍 Drop pin", on_click=on_drop_pin, width="stretch")

        purposes = [p.value for p in Purpose]
        st.selectbox(
            "**Purpose of Land:**",
            purposes,
            index=purposes.index(state.purpose.value),
            key="purpose_choice",
            on_change=on_purpose_change,
        )
        st.button(
            "Claim Now",
            key="claim_now",
            type="primary",
            on_click=apply,
            args=(workflow.submit_claim,),
            width="stretch",
        )


def render_decision_view() -> None:
    state = current_state()
    st.subheader("📄 Decision")
    decision = state.decision
    if not (state.claimed and decision):
        st.write("No claim submitted yet.")
        return

    color = VERDICT_COLORS.get(decision.verdict.value, "#1a237e")
    st.markdown(
        f"**Decision:** <span style='color:{color}'>{decision.verdict.label}</span>",
        unsafe_allow_html=True,
    )
    st.markdown(f"**Reason:** {decision.reason}")
    st.markdown(f"**Purpose:** {decision.purpose.value}")
    st.markdown(
        f"**Coordinates:** {decision.coordinate.latitude}, {decision.coordinate.longitude}"
    )

    renderer = get_renderer()
    download_col, appeal_col = st.columns(2)
    download_col.download_button(
        "Download Report (PDF)",
        data=renderer.render(decision),
        file_name=renderer.filename,
        mime="application/pdf",
        width="stretch",
    )
    appeal_col.button(
        "Appeal Decision",
        on_click=apply,
        args=(workflow.appeal,),
        width="stretch",
    )


def render_appeal_view() -> None:
    st.subheader("⚖️ Appeal Claim")
    if current_state().appealed:
        st.write("Your appeal has been submitted for review.")
    else:
        st.write("No appeal made yet.")


def render_about_view() -> None:
    config = get_config()
    st.subheader(f"ℹ️ About {config.app.title}")
    st.write(config.app.about_text)


VIEW_RENDERERS = {
    View.MAP: render_map_view,
    View.DECISION: render_decision_view,
    View.APPEAL: render_appeal_view,
    View.ABOUT: render_about_view,
}


def main() -> None:
    st.set_page_config(page_title=get_config().app.title, page_icon="🌱", layout="wide")
    init_state()
    render_header(APP_TITLE)
    render_notice()
    VIEW_RENDERERS[current_state().active_view]()


if __name__ == "__main__":
    main()
