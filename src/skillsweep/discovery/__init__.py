"""Skill discovery across known AI tool locations.

Resolves a static catalog of tool skill directories (home, config,
workspace, and system locations) against the filesystem and collects every
directory holding a ``SKILL.md`` descriptor.

Public API::

    from skillsweep.discovery import DiscoveryEngine

    engine = DiscoveryEngine()
    roots = engine.resolve_roots()
    for skill in engine.scan(roots, custom_paths=["./my-skills"]):
        print(f"{skill.tool}: {skill.name}")
"""

from __future__ import annotations

from skillsweep.discovery.catalog import DEFAULT_CATALOG, CatalogEntry, Origin, PathCatalog
from skillsweep.discovery.descriptor import DESCRIPTOR_FILENAME, extract_description
from skillsweep.discovery.engine import DiscoveryEngine
from skillsweep.discovery.models import CUSTOM_LABEL, ResolvedRoot, Skill

__all__ = [
    "CUSTOM_LABEL",
    "CatalogEntry",
    "DEFAULT_CATALOG",
    "DESCRIPTOR_FILENAME",
    "DiscoveryEngine",
    "Origin",
    "PathCatalog",
    "ResolvedRoot",
    "Skill",
    "extract_description",
]
