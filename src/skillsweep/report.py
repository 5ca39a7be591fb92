"""Styled status lines shared by the CLI and the interactive selector.

Each builder returns a list of rich ``Text`` lines instead of printing, so
the selector can carry them into the header of its next full-screen
redraw and the CLI can print them directly.

Color Mapping:
    tool labels = cyan, skill names = bold, paths = dim,
    success = green, failure = red, notices = yellow.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text

from skillsweep.deletion import DeletionOutcome
from skillsweep.discovery.models import Skill


def skill_count_lines(skill_count: int) -> list[Text]:
    return [
        Text(""),
        Text.assemble((str(skill_count), "bold green"), (" skills found", "")),
        Text(""),
    ]


def notice_lines(message: str) -> list[Text]:
    """A short status message such as "Nothing selected."."""
    return [Text(""), Text(message, style="yellow"), Text("")]


def error_lines(message: str) -> list[Text]:
    return [Text.assemble(("Error:", "bold red"), (f" {message}", ""))]


def confirmation_lines(skills: Sequence[Skill]) -> list[Text]:
    """List the skills about to be deleted, with their paths."""
    lines = [
        Text(""),
        Text.assemble(
            ("About to delete", "yellow"), (" ", ""),
            (str(len(skills)), "bold red"), (" skills:", ""),
        ),
        Text(""),
    ]
    for skill in skills:
        lines.append(Text.assemble(
            ("   • ", "red"), (skill.tool, "cyan"), (" > ", ""), (skill.name, "bold"),
        ))
        lines.append(Text(f"     {skill.path}", style="dim"))
    lines.append(Text(""))
    return lines


def deletion_result_lines(outcomes: Sequence[DeletionOutcome]) -> list[Text]:
    """One line per deletion attempt followed by a summary line.

    Args:
        outcomes: Results from ``delete_skills``.
    """
    lines: list[Text] = []
    for outcome in outcomes:
        skill = outcome.skill
        if outcome.ok:
            lines.append(Text.assemble(
                ("✓ Deleted: ", "green"), (skill.tool, "cyan"), (" > ", ""), (skill.name, ""),
            ))
        else:
            lines.append(Text.assemble(
                ("✗ Failed: ", "red"), (skill.tool, "cyan"), (" > ", ""), (skill.name, ""),
                (" - ", ""), (outcome.error or "unknown error", "red"),
            ))

    failed = sum(1 for o in outcomes if not o.ok)
    summary = Text.assemble((f"{len(outcomes) - failed} deleted", "green"))
    if failed:
        summary.append(" | ")
        summary.append(f"{failed} failed", style="red")
    lines.extend([Text(""), summary, Text("")])
    return lines
