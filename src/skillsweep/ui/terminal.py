"""Thin terminal layer: raw key reads, screen redraws, cursor visibility.

Keys are read with ``click.getchar`` and decoded into ``Key`` values;
drawing goes through a rich ``Console``. Anything that talks to the real
terminal is funnelled through ``Terminal`` so the selectors can be driven
by a scripted stand-in.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, auto

import click
from rich.console import Console, RenderableType

from skillsweep.exceptions import TerminalError


class KeyKind(Enum):
    UP = auto()
    DOWN = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    SPACE = auto()
    CHAR = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Key:
    """A decoded keystroke. ``text`` is set only for ``KeyKind.CHAR``."""

    kind: KeyKind
    text: str = ""


# POSIX escape sequences (normal and application cursor mode) and the
# two-character Windows scan codes returned by ``click.getchar``.
_SEQUENCES: dict[str, KeyKind] = {
    "\x1b[A": KeyKind.UP,
    "\x1bOA": KeyKind.UP,
    "\x00H": KeyKind.UP,
    "\xe0H": KeyKind.UP,
    "\x1b[B": KeyKind.DOWN,
    "\x1bOB": KeyKind.DOWN,
    "\x00P": KeyKind.DOWN,
    "\xe0P": KeyKind.DOWN,
    "\r": KeyKind.ENTER,
    "\n": KeyKind.ENTER,
    "\r\n": KeyKind.ENTER,
    "\x1b": KeyKind.ESCAPE,
    "\x7f": KeyKind.BACKSPACE,
    "\x08": KeyKind.BACKSPACE,
    " ": KeyKind.SPACE,
}


def decode_key(raw: str) -> Key:
    """Map raw ``click.getchar`` output to a ``Key``."""
    kind = _SEQUENCES.get(raw)
    if kind is not None:
        return Key(kind)
    if raw and raw.isprintable():
        return Key(KeyKind.CHAR, raw)
    return Key(KeyKind.UNKNOWN)


class Terminal:
    """The interactive terminal the selectors draw on and read from."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    @property
    def height(self) -> int:
        return self.console.size.height

    def read_key(self) -> Key:
        """Block until the next keystroke and decode it."""
        try:
            return decode_key(click.getchar())
        except OSError as exc:
            raise TerminalError(f"cannot read from terminal: {exc}") from exc

    def render(self, lines: Iterable[RenderableType]) -> None:
        """Clear the screen and draw *lines* from the top."""
        try:
            self.console.clear()
            for line in lines:
                self.console.print(line, highlight=False)
        except OSError as exc:
            raise TerminalError(f"cannot write to terminal: {exc}") from exc

    def print(self, *objects: RenderableType, **kwargs: object) -> None:
        try:
            self.console.print(*objects, **kwargs)
        except OSError as exc:
            raise TerminalError(f"cannot write to terminal: {exc}") from exc

    def confirm(self, prompt: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        try:
            return click.confirm(prompt, default=default)
        except OSError as exc:
            raise TerminalError(f"cannot read from terminal: {exc}") from exc

    @contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the cursor for the duration of the block.

        The cursor is shown again on every exit path, including errors and
        ``KeyboardInterrupt``.
        """
        self.console.show_cursor(False)
        try:
            yield
        finally:
            self.console.show_cursor(True)
