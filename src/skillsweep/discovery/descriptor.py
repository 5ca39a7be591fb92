"""Descriptor (``SKILL.md``) detection and description extraction.

A directory is a skill when it holds a ``SKILL.md`` file. The file may
start with YAML frontmatter delimited by ``---`` lines:

    ---
    name: pdf
    description: "Extract text and tables from PDF files"
    ---

Frontmatter Parsing
-------------------
The frontmatter block is loaded with ``yaml.safe_load``. Hand-written
frontmatter is frequently not valid YAML (an unquoted ``description: Use
when: ...`` is a mapping error), so on a YAML error the block is scanned
line by line for the first ``description:`` key instead. Without a usable
frontmatter description, the first non-empty line of the body that is not
a Markdown heading is used.

Reading is best-effort: an unreadable descriptor yields no description but
the directory is still reported as a skill.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "SKILL.md"

# Match YAML frontmatter: ---\n...\n--- (closing marker ends a line or the file).
_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)

_QUOTES = "\"'"


def has_descriptor(directory: Path) -> bool:
    """Check whether *directory* directly contains a descriptor file."""
    try:
        return (directory / DESCRIPTOR_FILENAME).is_file()
    except OSError:
        return False


def _split_frontmatter(text: str) -> tuple[str | None, str]:
    """Split *text* into (frontmatter block, body)."""
    match = _FRONTMATTER_PATTERN.match(text)
    if match is None:
        return None, text
    return match.group(1), text[match.end():]


def _scan_description_line(block: str) -> str | None:
    for line in block.splitlines():
        line = line.strip()
        if line.startswith("description:"):
            value = line[len("description:"):].strip().strip(_QUOTES)
            return value or None
    return None


def _frontmatter_description(block: str) -> str | None:
    """Pull the ``description`` value out of a frontmatter block as one line."""
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError:
        logger.debug("Frontmatter is not valid YAML, scanning lines instead")
        return _scan_description_line(block)

    if not isinstance(data, dict):
        return _scan_description_line(block)
    value = data.get("description")
    if value is None or isinstance(value, (dict, list)):
        return None
    value = " ".join(str(value).split()).strip(_QUOTES)
    return value or None


def _first_body_line(body: str) -> str | None:
    for line in body.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            return stripped
    return None


def extract_description(text: str) -> str | None:
    """Extract a one-line description from descriptor *text*.

    Args:
        text: Full content of a ``SKILL.md`` file.

    Returns:
        The frontmatter ``description`` if present, otherwise the first
        non-empty, non-heading body line, otherwise ``None``.
    """
    text = text.lstrip("\ufeff")
    block, body = _split_frontmatter(text)
    if block is not None:
        description = _frontmatter_description(block)
        if description:
            return description
    return _first_body_line(body)


def read_description(directory: Path) -> str | None:
    """Read the descriptor in *directory* and extract its description.

    Args:
        directory: A skill directory.

    Returns:
        The description, or ``None`` if the descriptor is missing,
        unreadable, or yields nothing.
    """
    descriptor = directory / DESCRIPTOR_FILENAME
    try:
        raw_content = descriptor.read_text(encoding="utf-8", errors="replace")
    except OSError:
        logger.debug("Cannot read descriptor: %s", descriptor)
        return None
    return extract_description(raw_content)
