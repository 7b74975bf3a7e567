from __future__ import annotations

import dash_bootstrap_components as dbc
import pytest

from airline_intel.core.dataset_registry import DatasetRegistry
from airline_intel.core.exceptions import NotFoundError
from airline_intel.core.renderer import ReportRenderer
from airline_intel.core.view_router import ReportView
from airline_intel.data import build_dataset_registry
from airline_intel.ui.callbacks.callbacks_navigation import resolve_navigation, restore_view
from airline_intel.ui.callbacks.callbacks_render import render_content
from airline_intel.ui.config import AppConfig


def _make_ctx(registry=None) -> AppConfig:
    return AppConfig(
        registry=registry if registry is not None else build_dataset_registry(),
        renderer=ReportRenderer(),
    )


def test_restore_view_falls_back_to_default():
    assert restore_view(None, ReportView.DASHBOARD) is ReportView.DASHBOARD
    assert restore_view("bogus", ReportView.MODEL_ANALYSIS) is ReportView.MODEL_ANALYSIS
    assert restore_view("eda", ReportView.DASHBOARD) is ReportView.EXPLORATORY_ANALYSIS


def test_resolve_navigation_changes_view():
    assert resolve_navigation("dashboard", "model", ReportView.DASHBOARD) == "model"
    assert resolve_navigation(None, "eda", ReportView.DASHBOARD) == "eda"


def test_resolve_navigation_self_transition_is_no_change():
    assert resolve_navigation("eda", "eda", ReportView.DASHBOARD) is None
    assert resolve_navigation(None, "dashboard", ReportView.DASHBOARD) is None


def test_resolve_navigation_unknown_target():
    with pytest.raises(NotFoundError):
        resolve_navigation("eda", "settings", ReportView.DASHBOARD)


@pytest.mark.parametrize("view", list(ReportView))
def test_render_content_marks_active_nav(view):
    content, active, outline = render_content(_make_ctx(), view.value)

    assert active == [v is view for v in ReportView]
    assert outline == [v is not view for v in ReportView]
    assert not isinstance(content, dbc.Alert)


def test_render_content_shows_alert_on_missing_data():
    content, active, _ = render_content(_make_ctx(DatasetRegistry()), "model")

    assert isinstance(content, dbc.Alert)
    assert active == [False, False, True]
