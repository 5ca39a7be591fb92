"""Interactive browse-and-delete flow.

State machine::

    MainMenu --browse--> GroupSelect --> DisambiguateGroup (per multi-source
        ^                                  group) --> ConfirmDelete --> delete
        |                                                                |
        +------------------- rescan <-------------------------------------+

Every dead end (no skills, nothing selected, cancelled confirmation)
returns to the main menu. A terminal failure while browsing ends that
interaction with a message and also returns to the main menu.

Every redraw clears the screen, so notices and deletion results are
queued and drawn as the header of the next main menu, above the skill
count.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from rich.console import Console, RenderableType
from rich.text import Text

from skillsweep import report
from skillsweep.deletion import delete_skills
from skillsweep.discovery.models import Skill
from skillsweep.exceptions import TerminalError
from skillsweep.ui.grouping import SkillGroup, group_label, group_skills, skill_label
from skillsweep.ui.select import Menu, MultiSelect
from skillsweep.ui.terminal import Terminal

logger = logging.getLogger(__name__)

EXIT = 1
MAIN_MENU_ITEMS = ("Browse all skills", "Exit")
SELECT_ALL_LABEL = "★ Select all sources"

_RULE = Text("━" * 60, style="dim")


class HierarchicalSelector:
    """Two-level skill selector ending in a confirmed bulk delete.

    Args:
        terminal: Where to draw and read keys.
        discover: Callable running a fresh discovery pass; used after a
            deletion to refresh the list.
    """

    def __init__(self, terminal: Terminal, discover: Callable[[], list[Skill]]) -> None:
        self.terminal = terminal
        self.discover = discover
        self.pending: list[RenderableType] = []

    @property
    def _console(self) -> Console:
        return self.terminal.console

    def _show(self, lines: Iterable[RenderableType]) -> None:
        for line in lines:
            self._console.print(line, highlight=False)

    def _queue(self, lines: Iterable[RenderableType]) -> None:
        """Keep *lines* for the header of the next main menu."""
        self.pending.extend(lines)

    def run(self, skills: list[Skill]) -> None:
        """Main menu loop. Returns when the operator exits."""
        while True:
            header = [*self.pending, *report.skill_count_lines(len(skills))]
            self.pending = []
            try:
                menu = Menu(
                    list(MAIN_MENU_ITEMS), prompt="What would you like to do?", header=header,
                )
                choice = menu.run(self.terminal)
            except TerminalError as exc:
                self._show(report.error_lines(f"menu failed: {exc}"))
                return
            if choice is None or choice == EXIT:
                self._console.print("\n[green]Goodbye![/green]\n")
                return

            try:
                deleted = self.browse(skills)
            except TerminalError as exc:
                self._queue(report.error_lines(f"interaction failed: {exc}"))
                continue
            if deleted:
                self._console.print("\n[cyan]Rescanning...[/cyan]\n")
                skills = self.discover()

    def browse(self, skills: Sequence[Skill]) -> bool:
        """Select, disambiguate, confirm and delete.

        Returns:
            True when a deletion batch ran and the caller should rescan.
        """
        if not skills:
            self._queue(report.notice_lines("No skills found."))
            return False

        groups = group_skills(skills)
        selected_groups = self.select_groups(groups, skills)
        if not selected_groups:
            self._queue(report.notice_lines("Nothing selected."))
            return False

        final: list[int] = []
        for group in selected_groups:
            if group.is_multi_source:
                final.extend(self.disambiguate(group, skills))
            else:
                final.append(group.indices[0])
        final = list(dict.fromkeys(final))
        if not final:
            self._queue(report.notice_lines("Nothing selected."))
            return False

        chosen = [skills[i] for i in final]
        if not self.confirm(chosen):
            self._queue(report.notice_lines("Deletion cancelled."))
            return False

        logger.info("Deleting %d skills", len(chosen))
        outcomes = delete_skills(chosen)
        self._queue(report.deletion_result_lines(outcomes))
        return True

    def select_groups(self, groups: Sequence[SkillGroup], skills: Sequence[Skill]) -> list[SkillGroup]:
        """First level: searchable multi-select over skill groups."""
        header = [
            Text(""),
            Text.assemble(
                ("Found ", ""), (str(len(skills)), "bold green"), (" skills (", ""),
                (str(len(groups)), "green"), (" groups):", ""),
            ),
            Text(""),
            _RULE,
            Text.assemble(
                ("  Space", "bold cyan"), (" select  ", ""), ("↑↓", "bold cyan"), (" move  ", ""),
                ("Enter", "bold cyan"), (" confirm  ", ""), ("Type", "bold cyan"), (" to search", ""),
            ),
            Text.assemble(
                ("  Tip:", "yellow"),
                (" single-source skills are deleted directly, "
                 "multi-source skills let you pick sources next", ""),
            ),
            _RULE,
            Text(""),
        ]
        picker = MultiSelect(
            [group_label(group, skills) for group in groups],
            [group.name for group in groups],
            prompt="Select skills to delete",
            header=header,
        )
        return [groups[i] for i in picker.run(self.terminal)]

    def disambiguate(self, group: SkillGroup, skills: Sequence[Skill]) -> list[int]:
        """Second level: choose which sources of a multi-source group to delete.

        Returns:
            Skill indices chosen; all members when "select all" is picked.
        """
        header = [
            Text(""),
            Text.assemble(
                ("▶ ", "cyan"), (group.name, "bold"), (" has ", ""),
                (str(len(group.indices)), "green"), (" sources, choose which to delete:", ""),
            ),
            Text(""),
        ]
        items: list[Text] = [Text(SELECT_ALL_LABEL, style="bold red")]
        items.extend(skill_label(skills[i]) for i in group.indices)
        picker = MultiSelect(
            items,
            prompt=f"{group.name} - select sources",
            header=header,
            searchable=False,
        )
        picked = picker.run(self.terminal)
        if 0 in picked:
            return list(group.indices)
        return [group.indices[i - 1] for i in picked]

    def confirm(self, skills: Sequence[Skill]) -> bool:
        """List *skills* and ask for a yes/no answer, defaulting to no."""
        if not skills:
            return False
        self._show(report.confirmation_lines(skills))
        return self.terminal.confirm("Confirm deletion?", default=False)
