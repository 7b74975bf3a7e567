"""
Top-level package for the Airline Intel report viewer.

This package exposes the core architecture (bundles, charts, routing, UI).
Most code should import from submodules such as:
    airline_intel.core
    airline_intel.data
    airline_intel.ui
"""

__all__: list[str] = []
