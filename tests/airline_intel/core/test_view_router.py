from __future__ import annotations

import pytest

from airline_intel.core.exceptions import NotFoundError
from airline_intel.core.view_router import ReportView, ViewRouter


def test_initial_state_is_dashboard():
    assert ViewRouter().current is ReportView.DASHBOARD


@pytest.mark.parametrize("view", list(ReportView))
def test_select_then_read(view):
    router = ViewRouter()
    router.select(view)
    assert router.current is view


@pytest.mark.parametrize("start", list(ReportView))
@pytest.mark.parametrize("target", list(ReportView))
def test_every_transition_allowed(start, target):
    router = ViewRouter(start)
    changed = router.select(target)

    assert router.current is target
    assert changed is (start is not target)


def test_self_transition_emits_no_event():
    events = []
    router = ViewRouter()
    router.subscribe(lambda old, new: events.append((old, new)))

    assert router.select(ReportView.DASHBOARD) is False
    assert router.select(ReportView.DASHBOARD) is False
    assert router.current is ReportView.DASHBOARD
    assert events == []

    assert router.select(ReportView.MODEL_ANALYSIS) is True
    assert events == [(ReportView.DASHBOARD, ReportView.MODEL_ANALYSIS)]


def test_select_rejects_non_views():
    with pytest.raises(TypeError):
        ViewRouter().select("eda")


def test_labels_match_navigation():
    assert [v.label for v in ReportView] == ["Dashboard", "Exploratory Analysis", "Model & SHAP"]


def test_from_value():
    assert ReportView.from_value("eda") is ReportView.EXPLORATORY_ANALYSIS

    with pytest.raises(NotFoundError):
        ReportView.from_value("settings")
