"""Removal of selected skill directories.

Each skill is attempted in order and failures never abort the batch.
There is no rollback and no retry: a partly failed batch leaves the
removed skills removed and reports the rest individually.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from dataclasses import dataclass

from skillsweep.discovery.models import Skill
from skillsweep.exceptions import DeletionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of removing one skill.

    Attributes:
        skill: The skill that was attempted.
        error: Error text when removal failed, ``None`` on success.
    """

    skill: Skill
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def delete_skill(skill: Skill) -> None:
    """Remove one skill directory from disk.

    A symlinked skill (common for skills shared between tools) only loses
    its link; the shared target is left alone.

    Raises:
        DeletionError: If the directory or link cannot be removed.
    """
    try:
        if skill.path.is_symlink():
            skill.path.unlink()
        else:
            shutil.rmtree(skill.path)
    except OSError as exc:
        raise DeletionError(exc.strerror or str(exc)) from exc


def delete_skills(skills: Iterable[Skill]) -> list[DeletionOutcome]:
    """Remove every skill in *skills*, continuing past failures.

    Args:
        skills: Skills to remove.

    Returns:
        One outcome per skill, in input order.
    """
    outcomes: list[DeletionOutcome] = []
    for skill in skills:
        try:
            delete_skill(skill)
        except DeletionError as exc:
            logger.warning("Failed to delete %s (%s): %s", skill.name, skill.path, exc)
            outcomes.append(DeletionOutcome(skill=skill, error=str(exc)))
        else:
            logger.info("Deleted %s (%s)", skill.name, skill.path)
            outcomes.append(DeletionOutcome(skill=skill))
    return outcomes
