"""Rich output formatting helpers for the skillsweep CLI.

Provides the discovery banner and the non-interactive ``--list`` output.
Status lines shown inside the interactive selector are built in
``skillsweep.report``.

Color Mapping:
    tool labels = cyan, skill names = bold, descriptions and paths = dim,
    counts = green, notices = yellow.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from skillsweep.discovery.models import Skill

console = Console()


def _console(target: Console | None) -> Console:
    return target if target is not None else console


def print_scanning_message(path_count: int, target: Console | None = None) -> None:
    """Print the banner shown before a discovery pass."""
    _console(target).print(f"\n[cyan]Scanning[/cyan] [green]{path_count}[/green] directories...\n")


def print_skill_list(skills: Sequence[Skill], target: Console | None = None) -> None:
    """Print every skill with its tool, name, description and path.

    Args:
        skills: Skills from a discovery pass.
    """
    out = _console(target)
    if not skills:
        out.print("[yellow]No skills found.[/yellow]")
        return

    out.print(f"\nFound [bold green]{len(skills)}[/bold green] skills:\n")
    for skill in skills:
        out.print(Text.assemble(
            ("  ", ""), (skill.tool, "bold cyan"), ("  >  ", "dim"), (skill.name, "bold"),
        ))
        if skill.description:
            out.print(Text(f"     {skill.description}", style="dim"))
        out.print(Text(f"     {skill.path}", style="dim italic"))
        out.print()
