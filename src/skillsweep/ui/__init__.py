"""Interactive terminal UI: searchable selectors and the browse-and-delete flow."""

from __future__ import annotations

from skillsweep.ui.flow import HierarchicalSelector
from skillsweep.ui.terminal import Key, KeyKind, Terminal

__all__ = [
    "HierarchicalSelector",
    "Key",
    "KeyKind",
    "Terminal",
]
