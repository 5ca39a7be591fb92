"""Keystroke-driven list selectors.

``MultiSelect`` is a multi-choice list with optional live substring search;
``Menu`` picks one item. Both redraw the whole frame after every key and
keep the cursor hidden while they run.

Search model:
    The selection is a set of item indices and survives filtering; the
    filter only changes which items are visible. The cursor indexes the
    filtered view and is clamped into it after every edit. Each typed
    character remembers the cursor it replaced, so deleting that
    character puts the cursor back where it was.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto

from rich.console import RenderableType
from rich.text import Text

from skillsweep.ui.terminal import Key, KeyKind, Terminal

MIN_PAGE_SIZE = 5
MAX_PAGE_SIZE = 20

# Lines drawn around the list besides the header: search bar, blank,
# prompt, two overflow indicators, blank, footer, input line.
_FRAME_CHROME = 8


class Outcome(Enum):
    CONFIRM = auto()
    ABORT = auto()


def page_size_for(height: int, header_lines: int = 0) -> int:
    """Rows of items that fit the terminal, clamped to [5, 20]."""
    return max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, height - header_lines - _FRAME_CHROME))


def visible_window(cursor: int, total: int, page_size: int) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of the filtered list to draw.

    The window scrolls just enough to keep *cursor* on screen.
    """
    start = cursor - page_size + 1 if cursor >= page_size else 0
    return start, min(start + page_size, total)


class SelectionState:
    """Search string, cursor, selection and filtered view of a list.

    Args:
        keys: Search key of each item (matched case-insensitively).
    """

    def __init__(self, keys: Sequence[str]) -> None:
        self.keys = list(keys)
        self.search = ""
        self.cursor = 0
        self.selected: set[int] = set()
        self.filtered: list[int] = list(range(len(self.keys)))
        self._cursor_history: list[int] = []

    @property
    def current(self) -> int | None:
        """Item index under the cursor, or ``None`` when nothing is visible."""
        return self.filtered[self.cursor] if self.filtered else None

    def _apply_filter(self) -> None:
        needle = self.search.lower()
        if needle:
            self.filtered = [i for i, key in enumerate(self.keys) if needle in key.lower()]
        else:
            self.filtered = list(range(len(self.keys)))
        self._clamp_cursor()

    def _clamp_cursor(self) -> None:
        if not self.filtered:
            self.cursor = 0
        elif self.cursor >= len(self.filtered):
            self.cursor = len(self.filtered) - 1

    def type_text(self, text: str) -> None:
        for char in text:
            self._cursor_history.append(self.cursor)
            self.search += char
            self._apply_filter()

    def backspace(self) -> None:
        if not self.search:
            return
        self.search = self.search[:-1]
        if self._cursor_history:
            self.cursor = self._cursor_history.pop()
        self._apply_filter()

    def clear_search(self) -> None:
        if self._cursor_history:
            self.cursor = self._cursor_history[0]
        self._cursor_history.clear()
        self.search = ""
        self._apply_filter()

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        if self.cursor < len(self.filtered) - 1:
            self.cursor += 1

    def toggle(self) -> None:
        idx = self.current
        if idx is None:
            return
        if idx in self.selected:
            self.selected.remove(idx)
        else:
            self.selected.add(idx)

    def result(self) -> list[int]:
        """Selected item indices, ascending, regardless of the filter."""
        return sorted(self.selected)


class MultiSelect:
    """Multi-choice list, optionally with live search.

    Keys:
        Space toggles the item under the cursor; Up/Down move (no
        wraparound); Enter confirms; printable characters extend the search
        and Backspace shortens it (searchable lists only); Esc clears a
        non-empty search, otherwise aborts with an empty result.

    Args:
        items: Row labels.
        keys: Search keys, one per item. Defaults to the plain label text.
        prompt: Question shown above the list.
        header: Lines drawn above everything else.
        searchable: Whether typing filters the list.
    """

    def __init__(
        self,
        items: Sequence[RenderableType],
        keys: Sequence[str] | None = None,
        *,
        prompt: str = "Select items",
        header: Sequence[RenderableType] = (),
        searchable: bool = True,
    ) -> None:
        if keys is None:
            keys = [item.plain if isinstance(item, Text) else str(item) for item in items]
        if len(keys) != len(items):
            raise ValueError("items and keys must have the same length")
        self.items = list(items)
        self.prompt = prompt
        self.header = list(header)
        self.searchable = searchable
        self.state = SelectionState(keys)

    def handle_key(self, key: Key) -> Outcome | None:
        """Apply one keystroke. Returns an outcome once the list is done."""
        state = self.state
        if key.kind is KeyKind.SPACE:
            state.toggle()
        elif key.kind is KeyKind.UP:
            state.move_up()
        elif key.kind is KeyKind.DOWN:
            state.move_down()
        elif key.kind is KeyKind.ENTER:
            return Outcome.CONFIRM
        elif key.kind is KeyKind.ESCAPE:
            if not state.search:
                return Outcome.ABORT
            state.clear_search()
        elif self.searchable and key.kind is KeyKind.CHAR:
            state.type_text(key.text)
        elif self.searchable and key.kind is KeyKind.BACKSPACE:
            state.backspace()
        return None

    def frame(self, page_size: int) -> list[RenderableType]:
        """Build the lines of one full redraw."""
        state = self.state
        lines: list[RenderableType] = list(self.header)
        if self.searchable:
            if state.search:
                lines.append(Text.assemble(
                    ("  Search: ", "cyan"), (state.search, "bold yellow"),
                    (f"  ({len(state.filtered)}/{len(self.items)})", "dim"),
                ))
            else:
                lines.append(Text.assemble(
                    ("  Search: ", "cyan"), ("(type to filter...)", "dim"),
                ))
            lines.append(Text(""))
        lines.append(Text.assemble(("? ", "bold green"), (self.prompt, "")))

        if not state.filtered:
            lines.append(Text("  No matches", style="yellow"))
        else:
            start, end = visible_window(state.cursor, len(state.filtered), page_size)
            if start > 0:
                lines.append(Text(f"  ↑ {start} more above", style="dim"))
            for pos in range(start, end):
                idx = state.filtered[pos]
                lines.append(self._row(idx, is_cursor=pos == state.cursor))
            remaining = len(state.filtered) - end
            if remaining > 0:
                lines.append(Text(f"  ↓ {remaining} more below", style="dim"))

        lines.append(Text(""))
        escape_hint = "clear search" if state.search else "cancel"
        lines.append(Text.assemble(
            ("  ", ""), (str(len(state.selected)), "bold green"), (" selected | ", ""),
            ("Space", "cyan"), (" select  ", ""), ("↑↓", "cyan"), (" move  ", ""),
            ("Enter", "cyan"), (" confirm  ", ""), ("Esc", "cyan"), (f" {escape_hint}", ""),
        ))
        return lines

    def _row(self, idx: int, is_cursor: bool) -> Text:
        mark = Text("◉", style="bold green") if idx in self.state.selected else Text("◯", style="dim")
        arrow = Text("❯", style="bold cyan") if is_cursor else Text(" ")
        label = self.items[idx]
        if not isinstance(label, Text):
            label = Text(str(label))
        if is_cursor:
            label = label.copy()
            label.stylize("bold")
        return Text.assemble(arrow, " ", mark, " ", label)

    def run(self, terminal: Terminal) -> list[int]:
        """Drive the list until Enter or Esc.

        Returns:
            Sorted selected indices; empty when aborted.
        """
        page_size = page_size_for(terminal.height, len(self.header))
        with terminal.hidden_cursor():
            while True:
                terminal.render(self.frame(page_size))
                outcome = self.handle_key(terminal.read_key())
                if outcome is Outcome.CONFIRM:
                    return self.state.result()
                if outcome is Outcome.ABORT:
                    return []


class Menu:
    """Single-choice list. Enter picks the highlighted item, Esc cancels."""

    def __init__(self, items: Sequence[str], prompt: str, header: Sequence[RenderableType] = ()) -> None:
        if not items:
            raise ValueError("a menu needs at least one item")
        self.items = list(items)
        self.prompt = prompt
        self.header = list(header)
        self.cursor = 0

    def handle_key(self, key: Key) -> Outcome | None:
        if key.kind is KeyKind.UP and self.cursor > 0:
            self.cursor -= 1
        elif key.kind is KeyKind.DOWN and self.cursor < len(self.items) - 1:
            self.cursor += 1
        elif key.kind is KeyKind.ENTER:
            return Outcome.CONFIRM
        elif key.kind is KeyKind.ESCAPE:
            return Outcome.ABORT
        return None

    def frame(self) -> list[RenderableType]:
        lines: list[RenderableType] = list(self.header)
        lines.append(Text.assemble(("? ", "bold green"), (self.prompt, "")))
        for pos, item in enumerate(self.items):
            if pos == self.cursor:
                lines.append(Text.assemble(("❯ ", "bold cyan"), (item, "bold")))
            else:
                lines.append(Text(f"  {item}"))
        return lines

    def run(self, terminal: Terminal) -> int | None:
        """Return the chosen index, or ``None`` on Esc."""
        with terminal.hidden_cursor():
            while True:
                terminal.render(self.frame())
                outcome = self.handle_key(terminal.read_key())
                if outcome is Outcome.CONFIRM:
                    return self.cursor
                if outcome is Outcome.ABORT:
                    return None
