from __future__ import annotations

__all__ = ["IDs", "nav_link_id"]


class IDs:
    class Store:
        ACTIVE_VIEW = "active-view"

    class Control:
        PAGE_CONTENT = "page-content"
        SIDEBAR = "sidebar"

    class Pattern:
        # pattern-matching "type" strings
        NAV_LINK = "nav-link"


def nav_link_id(view_value: str) -> dict:
    return {"type": IDs.Pattern.NAV_LINK, "index": view_value}
