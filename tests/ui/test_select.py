"""Tests for the searchable multi-select list and the single-choice menu."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from rich.text import Text

from skillsweep.ui.select import (
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
    Menu,
    MultiSelect,
    Outcome,
    SelectionState,
    page_size_for,
    visible_window,
)
from skillsweep.ui.terminal import Key, KeyKind

UP = "\x1b[A"
DOWN = "\x1b[B"
ENTER = "\r"
ESC = "\x1b"
SPACE = " "
BACKSPACE = "\x7f"

NAMES = ["pdf", "docx", "pptx", "xlsx", "canvas-design"]


def _plain(lines: list) -> list[str]:
    return [line.plain if isinstance(line, Text) else str(line) for line in lines]


# ---------------------------------------------------------------------------
# Paging helpers
# ---------------------------------------------------------------------------


class TestPaging:
    """Page size and scroll window computation."""

    def test_page_size_capped_at_max(self) -> None:
        assert page_size_for(200) == MAX_PAGE_SIZE

    def test_page_size_floor(self) -> None:
        assert page_size_for(3) == MIN_PAGE_SIZE

    def test_page_size_accounts_for_header(self) -> None:
        assert page_size_for(20, header_lines=2) == 10

    def test_window_at_top(self) -> None:
        assert visible_window(0, 30, 5) == (0, 5)

    def test_window_scrolls_with_cursor(self) -> None:
        assert visible_window(7, 30, 5) == (3, 8)

    def test_window_shorter_than_page(self) -> None:
        assert visible_window(2, 3, 5) == (0, 3)

    def test_cursor_always_inside_window(self) -> None:
        for cursor in range(30):
            start, end = visible_window(cursor, 30, 5)
            assert start <= cursor < end


# ---------------------------------------------------------------------------
# Selection state
# ---------------------------------------------------------------------------


class TestSelectionState:
    """Search, cursor and selection bookkeeping."""

    def test_initial_state(self) -> None:
        state = SelectionState(NAMES)
        assert state.filtered == [0, 1, 2, 3, 4]
        assert state.current == 0
        assert state.result() == []

    def test_filter_is_case_insensitive_substring(self) -> None:
        state = SelectionState(["PDF", "Docx", "canvas"])
        state.type_text("D")
        assert state.filtered == [0, 1]

    def test_selection_survives_filtering(self) -> None:
        state = SelectionState(NAMES)
        state.toggle()
        state.type_text("xlsx")
        assert state.filtered == [3]
        state.toggle()
        for _ in range(4):
            state.backspace()
        assert state.filtered == [0, 1, 2, 3, 4]
        assert state.result() == [0, 3]

    def test_hidden_selected_items_still_returned(self) -> None:
        state = SelectionState(NAMES)
        state.move_down()
        state.toggle()
        state.type_text("canvas")
        assert 1 not in state.filtered
        assert state.result() == [1]

    def test_cursor_clamped_when_filter_shrinks(self) -> None:
        state = SelectionState(NAMES)
        for _ in range(4):
            state.move_down()
        state.type_text("x")
        assert state.filtered == [1, 2, 3]
        assert state.cursor == 2

    def test_type_then_backspace_restores_cursor(self) -> None:
        state = SelectionState(NAMES)
        for _ in range(3):
            state.move_down()
        state.type_text("pdf")
        assert state.cursor == 0
        for _ in range(3):
            state.backspace()
        assert state.search == ""
        assert state.cursor == 3
        assert state.filtered == [0, 1, 2, 3, 4]

    def test_clear_search_restores_cursor(self) -> None:
        state = SelectionState(NAMES)
        state.move_down()
        state.move_down()
        state.type_text("canv")
        state.clear_search()
        assert state.search == ""
        assert state.cursor == 2

    def test_backspace_on_empty_search_is_noop(self) -> None:
        state = SelectionState(NAMES)
        state.move_down()
        state.backspace()
        assert state.cursor == 1
        assert state.search == ""

    def test_no_matches(self) -> None:
        state = SelectionState(NAMES)
        state.type_text("zzz")
        assert state.filtered == []
        assert state.current is None
        state.toggle()
        state.move_down()
        assert state.result() == []
        assert state.cursor == 0

    def test_movement_does_not_wrap(self) -> None:
        state = SelectionState(["a", "b"])
        state.move_up()
        assert state.cursor == 0
        state.move_down()
        state.move_down()
        assert state.cursor == 1

    def test_toggle_twice_deselects(self) -> None:
        state = SelectionState(NAMES)
        state.toggle()
        state.toggle()
        assert state.result() == []


# ---------------------------------------------------------------------------
# MultiSelect
# ---------------------------------------------------------------------------


class TestMultiSelect:
    """Key handling, frame rendering and the run loop."""

    def test_keys_default_to_label_text(self) -> None:
        picker = MultiSelect([Text("alpha"), "beta"])
        assert picker.state.keys == ["alpha", "beta"]

    def test_mismatched_keys_rejected(self) -> None:
        with pytest.raises(ValueError):
            MultiSelect(["a", "b"], ["a"])

    def test_enter_confirms(self) -> None:
        picker = MultiSelect(NAMES)
        assert picker.handle_key(Key(KeyKind.ENTER)) is Outcome.CONFIRM

    def test_escape_clears_search_before_aborting(self) -> None:
        picker = MultiSelect(NAMES)
        picker.handle_key(Key(KeyKind.CHAR, "p"))
        assert picker.handle_key(Key(KeyKind.ESCAPE)) is None
        assert picker.state.search == ""
        assert picker.handle_key(Key(KeyKind.ESCAPE)) is Outcome.ABORT

    def test_non_searchable_ignores_typing(self) -> None:
        picker = MultiSelect(NAMES, searchable=False)
        picker.handle_key(Key(KeyKind.CHAR, "x"))
        picker.handle_key(Key(KeyKind.BACKSPACE))
        assert picker.state.search == ""
        assert picker.state.filtered == [0, 1, 2, 3, 4]

    def test_unknown_key_ignored(self) -> None:
        picker = MultiSelect(NAMES)
        assert picker.handle_key(Key(KeyKind.UNKNOWN)) is None
        assert picker.state.cursor == 0

    def test_frame_shows_search_placeholder(self) -> None:
        lines = _plain(MultiSelect(NAMES, prompt="Pick").frame(10))
        assert "  Search: (type to filter...)" in lines
        assert "? Pick" in lines

    def test_frame_shows_filter_counts(self) -> None:
        picker = MultiSelect(NAMES)
        picker.state.type_text("x")
        lines = _plain(picker.frame(10))
        assert "  Search: x  (3/5)" in lines

    def test_frame_without_search_bar(self) -> None:
        lines = _plain(MultiSelect(NAMES, searchable=False).frame(10))
        assert not any("Search:" in line for line in lines)

    def test_frame_no_matches(self) -> None:
        picker = MultiSelect(NAMES)
        picker.state.type_text("zzz")
        assert "  No matches" in _plain(picker.frame(10))

    def test_frame_rows_mark_cursor_and_selection(self) -> None:
        picker = MultiSelect(["alpha", "beta"])
        picker.state.toggle()
        lines = _plain(picker.frame(10))
        assert "❯ ◉ alpha" in lines
        assert "  ◯ beta" in lines

    def test_frame_overflow_indicators(self) -> None:
        picker = MultiSelect([f"item{i}" for i in range(30)])
        lines = _plain(picker.frame(5))
        assert "  ↓ 25 more below" in lines
        assert not any("more above" in line for line in lines)
        for _ in range(10):
            picker.state.move_down()
        lines = _plain(picker.frame(5))
        assert "  ↑ 6 more above" in lines
        assert "  ↓ 19 more below" in lines

    def test_frame_footer_counts_selection(self) -> None:
        picker = MultiSelect(NAMES)
        picker.state.toggle()
        footer = _plain(picker.frame(10))[-1]
        assert footer.startswith("  1 selected")
        assert footer.endswith("Esc cancel")

    def test_frame_header_first(self) -> None:
        lines = _plain(MultiSelect(NAMES, header=[Text("HEADER")]).frame(10))
        assert lines[0] == "HEADER"

    def test_run_returns_sorted_selection(self, scripted_terminal: Callable) -> None:
        terminal = scripted_terminal([DOWN, DOWN, SPACE, UP, UP, SPACE, ENTER])
        assert MultiSelect(NAMES).run(terminal) == [0, 2]
        assert terminal.cursor_events == [False, True]

    def test_run_abort_returns_empty(self, scripted_terminal: Callable) -> None:
        terminal = scripted_terminal([SPACE, ESC])
        assert MultiSelect(NAMES).run(terminal) == []

    def test_run_search_then_select(self, scripted_terminal: Callable) -> None:
        terminal = scripted_terminal(["c", "a", "n", SPACE, ESC, ENTER])
        assert MultiSelect(NAMES).run(terminal) == [4]

    def test_run_restores_cursor_on_failure(self, scripted_terminal: Callable) -> None:
        terminal = scripted_terminal([DOWN])
        with pytest.raises(AssertionError, match="ran out of keys"):
            MultiSelect(NAMES).run(terminal)
        assert terminal.cursor_events == [False, True]

    def test_run_redraws_every_key(self, scripted_terminal: Callable) -> None:
        terminal = scripted_terminal([DOWN, ENTER])
        MultiSelect(NAMES, prompt="Pick").run(terminal)
        assert terminal.output.count("? Pick") == 2


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------


class TestMenu:
    """Single-choice menu."""

    def test_empty_menu_rejected(self) -> None:
        with pytest.raises(ValueError):
            Menu([], prompt="?")

    def test_enter_picks_first(self, scripted_terminal: Callable) -> None:
        assert Menu(["a", "b"], prompt="Go").run(scripted_terminal([ENTER])) == 0

    def test_down_then_enter(self, scripted_terminal: Callable) -> None:
        assert Menu(["a", "b"], prompt="Go").run(scripted_terminal([DOWN, ENTER])) == 1

    def test_cursor_clamped(self, scripted_terminal: Callable) -> None:
        terminal = scripted_terminal([UP, DOWN, DOWN, DOWN, ENTER])
        assert Menu(["a", "b"], prompt="Go").run(terminal) == 1

    def test_escape_cancels(self, scripted_terminal: Callable) -> None:
        terminal = scripted_terminal([DOWN, ESC])
        assert Menu(["a", "b"], prompt="Go").run(terminal) is None
        assert terminal.cursor_events == [False, True]

    def test_typing_ignored(self, scripted_terminal: Callable) -> None:
        assert Menu(["a", "b"], prompt="Go").run(scripted_terminal(["b", BACKSPACE, ENTER])) == 0

    def test_frame(self) -> None:
        menu = Menu(["Browse", "Exit"], prompt="What now?")
        assert _plain(menu.frame()) == ["? What now?", "❯ Browse", "  Exit"]
