"""skillsweep exception hierarchy.

All public exceptions inherit from SkillSweepError, giving callers a single
base class to catch when they want to handle any skillsweep-specific failure
without swallowing unrelated errors.

Discovery and descriptor parsing never raise: missing directories, broken
links, and unreadable descriptors degrade to "skipped" or "no description".
"""


class SkillSweepError(Exception):
    """Base exception for all skillsweep errors."""


class CatalogError(SkillSweepError, ValueError):
    """Raised when a catalog entry is malformed.

    Covers empty path segment lists and unknown platform identifiers.
    """


class TerminalError(SkillSweepError):
    """Raised when reading keys from or drawing to the terminal fails.

    The interactive selector treats this as fatal for the current
    interaction and returns control to the main menu.
    """


class DeletionError(SkillSweepError):
    """Raised when a single skill directory cannot be removed.

    The deletion executor records the message and continues with the rest
    of the batch.
    """
