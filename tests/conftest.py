"""Shared fixtures for skillsweep tests."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from rich.console import Console
from rich.text import Text

from skillsweep.discovery.catalog import PathCatalog
from skillsweep.discovery.engine import DiscoveryEngine
from skillsweep.discovery.models import Skill
from skillsweep.ui.terminal import Key, Terminal, decode_key

CLEAR_SCREEN = "\x1b[2J"


def write_skill(directory: Path, description: str = "test") -> Path:
    """Create *directory* with a minimal SKILL.md and return it."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "SKILL.md").write_text(
        f"---\nname: {directory.name}\ndescription: {description}\n---\n# {directory.name}\n",
        encoding="utf-8",
    )
    return directory


class ScriptedTerminal(Terminal):
    """Terminal stand-in fed from a list of raw keystrokes and yes/no answers.

    Output goes to an in-memory console; cursor visibility changes are
    recorded in ``cursor_events`` (False = hidden, True = shown). With
    ``force_terminal`` the console behaves like a TTY, so redraws really
    clear the screen and ``last_screen`` shows what is left visible.
    """

    def __init__(
        self,
        keys: Iterable[str | Key] = (),
        answers: Iterable[bool] = (),
        height: int = 40,
        force_terminal: bool = False,
    ) -> None:
        super().__init__(Console(
            file=io.StringIO(), width=120, height=height,
            force_terminal=force_terminal, color_system=None,
        ))
        self.keys = list(keys)
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.cursor_events: list[bool] = []
        self.console.show_cursor = self._record_cursor  # type: ignore[method-assign]

    def _record_cursor(self, show: bool = True) -> bool:
        self.cursor_events.append(show)
        return True

    def read_key(self) -> Key:
        if not self.keys:
            raise AssertionError("scripted terminal ran out of keys")
        raw = self.keys.pop(0)
        return raw if isinstance(raw, Key) else decode_key(raw)

    def confirm(self, prompt: str, default: bool = False) -> bool:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError("scripted terminal ran out of answers")
        return self.answers.pop(0)

    @property
    def output(self) -> str:
        return self.console.file.getvalue()  # type: ignore[attr-defined]

    @property
    def last_screen(self) -> str:
        """Plain text drawn since the most recent screen clear."""
        return Text.from_ansi(self.output.split(CLEAR_SCREEN)[-1]).plain


@pytest.fixture
def scripted_terminal() -> Callable[..., ScriptedTerminal]:
    """Factory for ``ScriptedTerminal`` instances."""
    return ScriptedTerminal


@pytest.fixture
def skill_factory(tmp_path: Path) -> Callable[..., Skill]:
    """Create real skill directories on disk and return their records."""

    def make(name: str, tool: str = "Claude Code", description: str | None = "test") -> Skill:
        directory = write_skill(tmp_path / "skills" / tool.replace(" ", "_") / name)
        return Skill(name=name, tool=tool, path=directory, description=description)

    return make


@pytest.fixture
def sandbox(tmp_path: Path) -> dict[str, Path]:
    """Isolated home, config, workspace and system roots.

    The workspace is a git repository so the ancestor walk stops inside
    ``tmp_path``.
    """
    dirs = {
        "home": tmp_path / "home",
        "config": tmp_path / "home" / ".config",
        "repo": tmp_path / "repo",
        "system": tmp_path / "sysroot",
    }
    for path in dirs.values():
        path.mkdir(parents=True, exist_ok=True)
    (dirs["repo"] / ".git").mkdir()
    dirs["cwd"] = dirs["repo"] / "pkg" / "sub"
    dirs["cwd"].mkdir(parents=True)
    return dirs


@pytest.fixture
def engine_factory(sandbox: dict[str, Path]) -> Callable[..., DiscoveryEngine]:
    """Build a ``DiscoveryEngine`` confined to the sandbox."""

    def make(catalog: PathCatalog | None = None, **overrides: object) -> DiscoveryEngine:
        kwargs: dict[str, object] = {
            "home": sandbox["home"],
            "config_dir": sandbox["config"],
            "cwd": sandbox["cwd"],
            "system_root": sandbox["system"],
            "platform_name": "linux",
        }
        kwargs.update(overrides)
        if catalog is not None:
            return DiscoveryEngine(catalog, **kwargs)  # type: ignore[arg-type]
        return DiscoveryEngine(**kwargs)  # type: ignore[arg-type]

    return make


@pytest.fixture
def skill_dir() -> Callable[..., Path]:
    """Expose ``write_skill`` to test modules."""
    return write_skill
