"""Grouping of skills by name and the row labels shown for them.

Several tools often carry a skill with the same name (the same skill
installed for Claude Code and Cursor, say). The selector shows one row per
name and asks which sources to act on only when a name has more than one.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from rich.cells import cell_len, set_cell_size
from rich.text import Text

from skillsweep.discovery.models import Skill

DESCRIPTION_WIDTH = 40
ELLIPSIS = "…"


@dataclass(frozen=True)
class SkillGroup:
    """Skills sharing one name.

    Attributes:
        name: The shared skill name.
        indices: Indices into the skill list, in discovery order.
    """

    name: str
    indices: tuple[int, ...]

    @property
    def is_multi_source(self) -> bool:
        return len(self.indices) > 1

    def tools(self, skills: Sequence[Skill]) -> list[str]:
        return [skills[i].tool for i in self.indices]


def group_skills(skills: Sequence[Skill], indices: Iterable[int] | None = None) -> list[SkillGroup]:
    """Group *skills* by name.

    Members of a group keep discovery order (catalog resolution order), so
    the first source listed is the first one found. Groups are sorted by
    name.

    Args:
        skills: All discovered skills.
        indices: Subset of indices to group; all skills when omitted.

    Returns:
        Groups sorted by name.
    """
    if indices is None:
        indices = range(len(skills))
    by_name: dict[str, list[int]] = {}
    for idx in indices:
        by_name.setdefault(skills[idx].name, []).append(idx)
    return [SkillGroup(name=name, indices=tuple(by_name[name])) for name in sorted(by_name)]


def truncate_description(text: str, width: int = DESCRIPTION_WIDTH) -> str:
    """Flatten *text* to one line and shorten it to *width* terminal cells."""
    text = " ".join(text.split())
    if cell_len(text) <= width:
        return text
    return set_cell_size(text, width - 1).rstrip() + ELLIPSIS


def skill_label(skill: Skill) -> Text:
    """Row label for one skill: tool, name, and short description."""
    return Text.assemble(
        (f"{skill.tool:<12} > {skill.name:<20} ", ""),
        (truncate_description(skill.display_description), "dim"),
    )


def group_label(group: SkillGroup, skills: Sequence[Skill]) -> Text:
    """Row label for a group.

    A single-source group reads like its skill; a multi-source group shows
    the name and where it came from.
    """
    if not group.is_multi_source:
        return skill_label(skills[group.indices[0]])
    tools = group.tools(skills)
    return Text.assemble(
        (f"{group.name:<35} ", ""),
        (f"{len(tools)} sources: {', '.join(tools)}", "dim"),
    )
