"""Static catalog of known AI tools and where they keep their skills.

Each ``CatalogEntry`` names a tool and the relative path segments of its
skills directory. Entries are partitioned by origin class, which decides the
base directory they are joined onto:

- ``home``: the user's home directory.
- ``config``: the platform's per-user configuration directory.
- ``workspace``: every directory from the working directory up to the
  nearest version-control root.
- ``system``: the filesystem root (fixed administrator-scope paths).

The list is intentionally generous -- checking for a non-existent directory
is one syscall, and finding an unexpected skills folder is exactly what the
operator wants.

Platform Notes:
    The ``config`` class resolves to ``~/.config`` (or ``$XDG_CONFIG_HOME``)
    on Linux, ``~/Library/Application Support`` on macOS and ``%APPDATA%``
    on Windows. System paths are POSIX-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from skillsweep.exceptions import CatalogError

PLATFORMS: frozenset[str] = frozenset({"all", "posix", "linux", "macos", "windows"})


class Origin(str, Enum):
    """Origin class of a catalog entry, in resolution order."""

    HOME = "home"
    CONFIG = "config"
    WORKSPACE = "workspace"
    SYSTEM = "system"


@dataclass(frozen=True)
class CatalogEntry:
    """Where one tool conventionally stores its skills.

    Attributes:
        label: Human-readable tool name shown to the operator.
        segments: Relative path segments joined onto the origin's base dir.
        platform: Target platform. "all" means cross-platform, "posix"
            means anything but Windows.
    """

    label: str
    segments: tuple[str, ...]
    platform: str = "all"

    def __post_init__(self) -> None:
        if not self.segments:
            raise CatalogError(f"catalog entry {self.label!r} has no path segments")
        if self.platform not in PLATFORMS:
            raise CatalogError(
                f"catalog entry {self.label!r} has unknown platform {self.platform!r}"
            )

    def join(self, base: Path) -> Path:
        """Join this entry's segments onto *base*."""
        return base.joinpath(*self.segments)

    def matches_platform(self, platform_name: str) -> bool:
        """Check if this entry applies to *platform_name*."""
        if self.platform == "all":
            return True
        if self.platform == "posix":
            return platform_name != "windows"
        return self.platform == platform_name


@dataclass(frozen=True)
class PathCatalog:
    """Immutable table of catalog entries, one tuple per origin class."""

    home: tuple[CatalogEntry, ...] = ()
    config: tuple[CatalogEntry, ...] = ()
    workspace: tuple[CatalogEntry, ...] = ()
    system: tuple[CatalogEntry, ...] = ()

    def for_origin(self, origin: Origin) -> tuple[CatalogEntry, ...]:
        """Return the entries of one origin class."""
        return getattr(self, origin.value)

    def entries(self) -> list[tuple[Origin, CatalogEntry]]:
        """Enumerate every entry in resolution order."""
        return [
            (origin, entry)
            for origin in Origin
            for entry in self.for_origin(origin)
        ]

    def __len__(self) -> int:
        return len(self.home) + len(self.config) + len(self.workspace) + len(self.system)


def _entry(label: str, path: str, platform: str = "all") -> CatalogEntry:
    return CatalogEntry(label=label, segments=tuple(path.split("/")), platform=platform)


def _build_catalog() -> PathCatalog:
    """Build the complete catalog of known skill locations.

    Returns:
        The default ``PathCatalog``.
    """
    home = (
        _entry("Claude Code", ".claude/skills"),
        _entry("OpenAI Codex", ".agents/skills"),
        _entry("OpenAI Codex (Legacy)", ".codex/skills"),
        _entry("Gemini CLI", ".gemini/skills"),
        _entry("Windsurf", ".codeium/windsurf/skills"),
        _entry("GitHub Copilot", ".copilot/skills"),
        _entry("Cursor", ".cursor/skills"),
        _entry("Cline", ".cline/skills"),
        # -- Legacy locations --
        _entry("Gemini Antigravity (Legacy)", ".gemini/antigravity/skills"),
        _entry("Windsurf (Legacy)", ".windsurf/skills"),
        _entry("Codeium (Legacy)", ".codeium/skills"),
        _entry("Continue (Legacy)", ".continue/skills"),
        _entry("Roo Code (Legacy)", ".roo-code/skills"),
    )
    config = (
        _entry("OpenCode", "opencode/skills"),
    )
    workspace = (
        # -- Official project-level locations --
        _entry("Claude Code (Project)", ".claude/skills"),
        _entry("OpenAI Codex (Project)", ".agents/skills"),
        _entry("GitHub Copilot (Project)", ".github/skills"),
        _entry("Gemini CLI (Project)", ".gemini/skills"),
        _entry("Windsurf (Project)", ".windsurf/skills"),
        _entry("Cursor (Project)", ".cursor/skills"),
        _entry("Cline (Project)", ".cline/skills"),
        _entry("Cline Compatibility (Project)", ".clinerules/skills"),
        _entry("OpenCode (Project)", ".opencode/skills"),
        # -- Agent Skills ecosystem --
        _entry("Antigravity (Project)", ".agent/skills"),
        _entry("Augment (Project)", ".augment/skills"),
        _entry("Codebuddy (Project)", ".codebuddy/skills"),
        _entry("CommandCode (Project)", ".commandcode/skills"),
        _entry("Continue (Project)", ".continue/skills"),
        _entry("Crush (Project)", ".crush/skills"),
        _entry("Factory (Project)", ".factory/skills"),
        _entry("Goose (Project)", ".goose/skills"),
        _entry("iFlow (Project)", ".iflow/skills"),
        _entry("Junie (Project)", ".junie/skills"),
        _entry("KiloCode (Project)", ".kilocode/skills"),
        _entry("Kiro (Project)", ".kiro/skills"),
        _entry("Kode (Project)", ".kode/skills"),
        _entry("MCP Jam (Project)", ".mcpjam/skills"),
        _entry("Mux (Project)", ".mux/skills"),
        _entry("Neovate (Project)", ".neovate/skills"),
        _entry("OpenHands (Project)", ".openhands/skills"),
        _entry("Pi (Project)", ".pi/skills"),
        _entry("Pochi (Project)", ".pochi/skills"),
        _entry("Qoder (Project)", ".qoder/skills"),
        _entry("Qwen (Project)", ".qwen/skills"),
        _entry("Roo (Project)", ".roo/skills"),
        _entry("Trae (Project)", ".trae/skills"),
        _entry("Vibe (Project)", ".vibe/skills"),
        _entry("Zencoder (Project)", ".zencoder/skills"),
        _entry("Adal (Project)", ".adal/skills"),
        # -- Legacy locations --
        _entry("OpenAI Codex (Legacy Project)", ".codex/skills"),
        _entry("Roo Code (Legacy Project)", ".roo-code/skills"),
    )
    system = (
        _entry("OpenAI Codex (Admin)", "etc/codex/skills", platform="posix"),
    )
    return PathCatalog(home=home, config=config, workspace=workspace, system=system)


# Module-level constant: the canonical catalog of known skill locations.
DEFAULT_CATALOG: PathCatalog = _build_catalog()
