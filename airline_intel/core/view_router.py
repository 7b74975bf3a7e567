from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List

from .exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ReportView(str, Enum):
    DASHBOARD = "dashboard"
    EXPLORATORY_ANALYSIS = "eda"
    MODEL_ANALYSIS = "model"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_value(cls, value: str) -> ReportView:
        """
        Coerce a stored navigation value (e.g. from a dcc.Store) back into a ReportView.

        Raises:
            NotFoundError: if the value is not one of the enumerated views
        """
        try:
            return cls(value)
        except ValueError:
            raise NotFoundError(f"Report view '{value}' not found") from None


_LABELS = {
    ReportView.DASHBOARD: "Dashboard",
    ReportView.EXPLORATORY_ANALYSIS: "Exploratory Analysis",
    ReportView.MODEL_ANALYSIS: "Model & SHAP",
}

ChangeListener = Callable[[ReportView, ReportView], None]


class ViewRouter:
    """
    Holds which report page is active.

    Every view can be selected from every other view. Selecting the view that is
    already active changes nothing and notifies no one.
    """

    def __init__(self, initial: ReportView = ReportView.DASHBOARD):
        if not isinstance(initial, ReportView):
            raise TypeError(f"Initial view must be a ReportView, got {initial!r}")
        self._current = initial
        self._listeners: List[ChangeListener] = []

    @property
    def current(self) -> ReportView:
        return self._current

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def select(self, view: ReportView) -> bool:
        """
        Make `view` the active page.

        :return: True if the active page changed, False on a self-transition
        """
        if not isinstance(view, ReportView):
            raise TypeError(f"Expected a ReportView, got {view!r}")

        if view is self._current:
            return False

        previous, self._current = self._current, view
        logger.info("view_changed", extra={"from_view": previous.value, "to_view": view.value})

        for listener in self._listeners:
            listener(previous, view)
        return True
