from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from airline_intel.core.chart_adapter import DEFAULT_EMPHASIS_RANK
from airline_intel.core.dataset_registry import DatasetRegistry
from airline_intel.core.exceptions import ConfigError, NotFoundError
from airline_intel.core.renderer import ReportRenderer
from airline_intel.core.view_router import ReportView


@dataclass
class AppConfig:
    """
    Settings and shared services for the Dash app. Passed into layout and
    callback registration instead of using module-level globals.

    Env overrides (see {@link from_env}):
    - AIRLINE_INTEL_TITLE
    - AIRLINE_INTEL_EMPHASIS_RANK
    - AIRLINE_INTEL_DEFAULT_VIEW  (dashboard | eda | model)
    """
    ui_title: str = "Airline Intel"
    subtitle: str = "Passenger Satisfaction Analytics"
    emphasis_rank: int = DEFAULT_EMPHASIS_RANK
    default_view: ReportView = ReportView.DASHBOARD

    registry: Optional[DatasetRegistry] = None
    renderer: Optional[ReportRenderer] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
        env = os.environ if environ is None else environ
        cfg = cls()

        title = env.get("AIRLINE_INTEL_TITLE")
        if title:
            cfg.ui_title = title

        raw_rank = env.get("AIRLINE_INTEL_EMPHASIS_RANK")
        if raw_rank is not None:
            try:
                cfg.emphasis_rank = int(raw_rank)
            except ValueError:
                raise ConfigError(f"AIRLINE_INTEL_EMPHASIS_RANK must be an integer, got {raw_rank!r}") from None

        raw_view = env.get("AIRLINE_INTEL_DEFAULT_VIEW")
        if raw_view:
            try:
                cfg.default_view = ReportView.from_value(raw_view.lower())
            except NotFoundError:
                raise ConfigError(f"Unknown AIRLINE_INTEL_DEFAULT_VIEW {raw_view!r}") from None

        cfg.validate_settings()
        return cfg

    def validate_settings(self) -> None:
        if self.emphasis_rank < 0:
            raise ConfigError(f"emphasis_rank must be >= 0, got {self.emphasis_rank}")
        if not isinstance(self.default_view, ReportView):
            raise ConfigError(f"default_view must be a ReportView, got {self.default_view!r}")

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        self.validate_settings()
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.renderer is None:
            raise RuntimeError("AppConfig.renderer must be initialized.")
