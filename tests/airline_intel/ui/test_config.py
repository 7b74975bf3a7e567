from __future__ import annotations

import pytest

from airline_intel.core.exceptions import ConfigError
from airline_intel.core.view_router import ReportView
from airline_intel.ui.config import AppConfig


def test_from_env_defaults():
    cfg = AppConfig.from_env({})

    assert cfg.ui_title == "Airline Intel"
    assert cfg.emphasis_rank == 3
    assert cfg.default_view is ReportView.DASHBOARD


def test_from_env_overrides():
    cfg = AppConfig.from_env(
        {
            "AIRLINE_INTEL_TITLE": "Ops",
            "AIRLINE_INTEL_EMPHASIS_RANK": "5",
            "AIRLINE_INTEL_DEFAULT_VIEW": "MODEL",
        }
    )

    assert cfg.ui_title == "Ops"
    assert cfg.emphasis_rank == 5
    assert cfg.default_view is ReportView.MODEL_ANALYSIS


@pytest.mark.parametrize(
    "env",
    [
        {"AIRLINE_INTEL_EMPHASIS_RANK": "three"},
        {"AIRLINE_INTEL_EMPHASIS_RANK": "-1"},
        {"AIRLINE_INTEL_DEFAULT_VIEW": "settings"},
    ],
)
def test_from_env_invalid(env):
    with pytest.raises(ConfigError):
        AppConfig.from_env(env)


def test_validate_requires_services():
    with pytest.raises(RuntimeError):
        AppConfig().validate()
