"""skillsweep CLI -- find and remove AI agent skills installed on this machine.

Entry point for the ``skillsweep`` command-line tool.

Discovery covers every known tool location under the home directory, the
platform config directory, the current workspace (up to its git root) and
fixed system paths, plus any ``--path`` directories. Without ``--list`` an
interactive browser lets you search, select and delete skills.

Usage::

    skillsweep                          # Interactive browse and delete
    skillsweep --list                   # Print every skill and exit
    skillsweep -p ./skills -p ~/shared  # Also scan custom directories
    SKILLSWEEP_PATHS=./a:./b skillsweep --list

Exit Codes:
    0 -- Normal exit.
    1 -- Aborted (Ctrl-C).
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from skillsweep import __version__
from skillsweep.cli.output import console, print_scanning_message, print_skill_list
from skillsweep.discovery import DiscoveryEngine
from skillsweep.discovery.engine import DEFAULT_MAX_WORKSPACE_DEPTH
from skillsweep.ui import HierarchicalSelector, Terminal

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _configure_logging(verbosity: int) -> None:
    """Send log records to stderr when ``-v`` is given."""
    if verbosity <= 0:
        return
    level = _LOG_LEVELS[min(verbosity, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command("skillsweep")
@click.version_option(version=__version__)
@click.option(
    "-p", "--path", "paths",
    type=click.Path(path_type=Path),
    multiple=True,
    envvar="SKILLSWEEP_PATHS",
    help="Extra directory to scan (repeatable). Missing directories are ignored.",
)
@click.option(
    "-l", "--list", "list_only",
    is_flag=True,
    default=False,
    help="Only list discovered skills, do not start the interactive browser.",
)
@click.option(
    "--workspace-depth",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_WORKSPACE_DEPTH,
    show_default=True,
    help="Maximum number of parent directories searched when no git root is found.",
)
@click.option(
    "-v", "--verbose",
    count=True,
    help="Log discovery details to stderr (-v info, -vv debug).",
)
def cli(
    paths: tuple[Path, ...],
    list_only: bool,
    workspace_depth: int,
    verbose: int,
) -> None:
    """Scan and manage AI tool skills on this machine.

    Looks for skill directories (folders holding a SKILL.md) used by
    Claude Code, Codex, Gemini CLI, Cursor, Windsurf, Copilot, OpenCode and
    many more, then lists them or lets you delete selected ones.
    """
    _configure_logging(verbose)

    engine = DiscoveryEngine(max_workspace_depth=workspace_depth)
    roots = engine.add_custom_paths(engine.resolve_roots(), paths)
    print_scanning_message(len(roots))
    skills = engine.scan(roots)

    if list_only:
        print_skill_list(skills)
        return

    selector = HierarchicalSelector(Terminal(console), lambda: engine.discover(paths))
    selector.run(skills)
