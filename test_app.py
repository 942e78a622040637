"""Tests for the Streamlit view layer."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import app
from backend.models.workflow import View

ROOT = Path(__file__).parent


@pytest.fixture
def app_test(monkeypatch):
    monkeypatch.setenv("MULLAI_CONFIG", str(ROOT / "config.yaml"))
    at = AppTest.from_file(str(ROOT / "app.py"), default_timeout=30)
    return at.run()


def test_every_view_has_one_nav_entry_and_renderer():
    assert sorted(item.view.value for item in app.NAV_ITEMS) == sorted(v.value for v in View)
    assert set(app.VIEW_RENDERERS) == set(View)


def test_starts_on_map_view(app_test):
    assert not app_test.exception
    assert app_test.session_state["workflow_state"].active_view is View.MAP


def test_header_navigation(app_test):
    app_test.button(key="nav_about").click().run()
    assert app_test.session_state["workflow_state"].active_view is View.ABOUT
    assert any("About Mullai" in header.value for header in app_test.subheader)


def test_claim_without_location_shows_notice(app_test):
    app_test.button(key="claim_now").click().run()
    assert [error.value for error in app_test.error] == ["Select a location on map first!"]
    assert app_test.session_state["workflow_state"].claimed is False
