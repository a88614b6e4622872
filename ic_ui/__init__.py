"""Interactive search-and-select engine and the ichoose/iforgor front-ends."""

from ic_ui.api import Entry, SessionOptions, choose

__all__ = ["Entry", "SessionOptions", "choose"]
