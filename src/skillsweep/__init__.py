"""skillsweep: Find, browse, and remove AI agent skills installed on this machine."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
