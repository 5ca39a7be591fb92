"""Discovery engine: resolve catalog entries and collect skills.

Discovery Algorithm:
    1. Resolve roots: join every ``CatalogEntry`` onto its origin's base
       directory (home, config dir, each workspace ancestor, filesystem
       root) and keep the existing directories. Roots are deduplicated by
       canonical path; the first label in resolution order wins.
    2. Append operator-supplied custom paths, deduplicated by exact path
       equality only.
    3. Scan each root: the root itself is a skill if it holds ``SKILL.md``;
       each immediate child directory holding ``SKILL.md`` is a skill.
       Nothing deeper is visited.

Discovery is best-effort. Missing, unreadable, or broken-link candidates
are skipped without surfacing an error.
"""

from __future__ import annotations

import logging
import os
import platform
from collections.abc import Iterable
from pathlib import Path

from skillsweep.discovery.catalog import DEFAULT_CATALOG, Origin, PathCatalog
from skillsweep.discovery.descriptor import has_descriptor
from skillsweep.discovery.models import CUSTOM_LABEL, ResolvedRoot, Skill

logger = logging.getLogger(__name__)

# Directory names marking a version-control root.
VCS_MARKERS: tuple[str, ...] = (".git",)

DEFAULT_MAX_WORKSPACE_DEPTH = 64


def current_platform() -> str:
    """Return the current platform identifier."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    return "windows" if system == "windows" else "linux"


def user_config_dir(platform_name: str, home: Path) -> Path:
    """Return the platform's standard per-user configuration directory."""
    if platform_name == "windows":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else home / "AppData" / "Roaming"
    if platform_name == "macos":
        return home / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return home / ".config"


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def _canonical(path: Path) -> Path:
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path.absolute()


class DiscoveryEngine:
    """Resolves the path catalog against the filesystem and scans for skills.

    Every override defaults to the real environment and is re-read on each
    call, so a long-lived engine picks up a changed working directory.

    Usage::

        engine = DiscoveryEngine()
        for skill in engine.discover():
            print(f"{skill.tool} > {skill.name}")
    """

    def __init__(
        self,
        catalog: PathCatalog = DEFAULT_CATALOG,
        *,
        home: Path | None = None,
        config_dir: Path | None = None,
        cwd: Path | None = None,
        system_root: Path | None = None,
        platform_name: str | None = None,
        max_workspace_depth: int = DEFAULT_MAX_WORKSPACE_DEPTH,
    ) -> None:
        if max_workspace_depth < 1:
            raise ValueError("max_workspace_depth must be at least 1")
        self.catalog = catalog
        self._home = home
        self._config_dir = config_dir
        self._cwd = cwd
        self._system_root = system_root
        self._platform_name = platform_name
        self.max_workspace_depth = max_workspace_depth

    # -- Environment ------------------------------------------------------

    @property
    def platform_name(self) -> str:
        return self._platform_name or current_platform()

    def _get_home(self) -> Path | None:
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except RuntimeError:
            logger.debug("Home directory cannot be determined")
            return None

    def _get_config_dir(self) -> Path | None:
        if self._config_dir is not None:
            return self._config_dir
        home = self._get_home()
        return user_config_dir(self.platform_name, home) if home is not None else None

    def _get_cwd(self) -> Path | None:
        if self._cwd is not None:
            return self._cwd
        try:
            return Path.cwd()
        except OSError:
            logger.debug("Working directory is not accessible")
            return None

    def _get_system_root(self) -> Path:
        return self._system_root if self._system_root is not None else Path(os.sep)

    def workspace_chain(self) -> list[Path]:
        """Return the working directory and its ancestors up to the VCS root.

        The chain includes the first ancestor holding a version-control
        marker. Without one it stops after ``max_workspace_depth`` entries
        rather than walking all the way to the filesystem root.
        """
        cwd = self._get_cwd()
        if cwd is None:
            return []
        chain: list[Path] = []
        for ancestor in (cwd, *cwd.parents):
            chain.append(ancestor)
            if any(_exists(ancestor / marker) for marker in VCS_MARKERS):
                break
            if len(chain) >= self.max_workspace_depth:
                logger.debug(
                    "No repository root within %d levels of %s",
                    self.max_workspace_depth, cwd,
                )
                break
        return chain

    # -- Resolution -------------------------------------------------------

    def _bases_for(self, origin: Origin) -> list[Path]:
        if origin is Origin.HOME:
            home = self._get_home()
            return [home] if home is not None else []
        if origin is Origin.CONFIG:
            config_dir = self._get_config_dir()
            return [config_dir] if config_dir is not None else []
        if origin is Origin.WORKSPACE:
            return self.workspace_chain()
        return [self._get_system_root()]

    def resolve_roots(self) -> list[ResolvedRoot]:
        """Resolve every catalog entry to existing, unique directories.

        Returns:
            Roots in resolution order: home, config, workspace, system.
        """
        roots: list[ResolvedRoot] = []
        seen: set[Path] = set()
        for origin in Origin:
            entries = [
                entry for entry in self.catalog.for_origin(origin)
                if entry.matches_platform(self.platform_name)
            ]
            if not entries:
                continue
            # Workspace: every entry is tried at each ancestor, nearest first.
            for base in self._bases_for(origin):
                for entry in entries:
                    candidate = entry.join(base)
                    if not _is_dir(candidate):
                        continue
                    key = _canonical(candidate)
                    if key in seen:
                        logger.debug("Already resolved: %s (%s)", candidate, entry.label)
                        continue
                    seen.add(key)
                    roots.append(ResolvedRoot(label=entry.label, path=candidate, origin=origin))
        return roots

    @staticmethod
    def add_custom_paths(
        roots: Iterable[ResolvedRoot],
        custom_paths: Iterable[Path | str],
    ) -> list[ResolvedRoot]:
        """Append operator-supplied directories to *roots*.

        A custom path is kept when it is an existing directory and no root
        has the exact same path. Custom paths are not canonicalized, so a
        symlinked alias of a catalog root is scanned twice.

        Args:
            roots: Already resolved roots.
            custom_paths: Directories given by the operator.

        Returns:
            A new list with the accepted custom roots appended.
        """
        merged = list(roots)
        for raw in custom_paths:
            path = Path(raw).expanduser().absolute()
            if not _is_dir(path):
                logger.debug("Custom path is not a directory: %s", path)
                continue
            if any(root.path == path for root in merged):
                continue
            merged.append(ResolvedRoot(label=CUSTOM_LABEL, path=path))
        return merged

    # -- Scanning ---------------------------------------------------------

    def scan(
        self,
        roots: Iterable[ResolvedRoot],
        custom_paths: Iterable[Path | str] = (),
    ) -> list[Skill]:
        """Collect skills from *roots* plus any *custom_paths*.

        Args:
            roots: Roots from ``resolve_roots``.
            custom_paths: Extra operator-supplied directories.

        Returns:
            Skills in root order; within a root, the root itself first and
            then its children by name.
        """
        skills: list[Skill] = []
        for root in self.add_custom_paths(roots, custom_paths):
            skills.extend(self._scan_root(root))
        logger.debug("Discovered %d skills", len(skills))
        return skills

    def _scan_root(self, root: ResolvedRoot) -> list[Skill]:
        """Collect skills at *root* and in its immediate subdirectories."""
        skills: list[Skill] = []
        if has_descriptor(root.path):
            skills.append(Skill.from_path(root.path, root.label))
        try:
            children = sorted(root.path.iterdir())
        except OSError:
            logger.debug("Cannot list %s", root.path)
            return skills
        for child in children:
            if _is_dir(child) and has_descriptor(child):
                skills.append(Skill.from_path(child, root.label))
        return skills

    def discover(self, custom_paths: Iterable[Path | str] = ()) -> list[Skill]:
        """Full discovery pass from scratch: resolve roots, then scan."""
        return self.scan(self.resolve_roots(), custom_paths)
