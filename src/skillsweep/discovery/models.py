"""Data models for the discovery module.

Contains the records produced by ``DiscoveryEngine``: resolved scan roots
and the discovered skills themselves. Both are immutable; every discovery
pass builds a fresh list and callers replace theirs wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillsweep.discovery.catalog import Origin
from skillsweep.discovery.descriptor import read_description

# Tool label given to operator-supplied directories.
CUSTOM_LABEL = "Custom"


@dataclass(frozen=True)
class ResolvedRoot:
    """A catalog entry joined onto a concrete base directory that exists.

    Attributes:
        label: Tool label of the catalog entry (or ``CUSTOM_LABEL``).
        path: Absolute path of the directory to scan.
        origin: Origin class the root came from; ``None`` for custom paths.
    """

    label: str
    path: Path
    origin: Origin | None = None


@dataclass(frozen=True)
class Skill:
    """A single skill bundle found on disk.

    Attributes:
        name: Directory name of the skill.
        tool: Label of the root the skill was found under.
        path: Path to the skill directory.
        description: Description extracted from ``SKILL.md``, if any.
    """

    name: str
    tool: str
    path: Path
    description: str | None = None

    @classmethod
    def from_path(cls, path: Path, tool: str) -> Skill:
        """Build a skill record for the directory at *path*."""
        return cls(
            name=path.name or str(path),
            tool=tool,
            path=path,
            description=read_description(path),
        )

    @property
    def display_description(self) -> str:
        """Description for display, with a placeholder when absent."""
        return self.description or "No description"
