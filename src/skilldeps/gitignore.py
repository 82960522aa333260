"""Append-only maintenance of required .gitignore patterns."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def missing_patterns(existing: str, patterns: Sequence[str]) -> list[str]:
    """Return the patterns (in request order, once each) not yet present.

    Presence is an exact match against a stripped existing line.
    """
    present = {line.strip() for line in existing.splitlines()}
    missing: list[str] = []
    for pattern in patterns:
        if pattern not in present and pattern not in missing:
            missing.append(pattern)
    return missing


def merge_gitignore(existing: str, patterns: Sequence[str]) -> str:
    missing = missing_patterns(existing, patterns)
    if not missing:
        return existing
    head = existing if not existing or existing.endswith("\n") else existing + "\n"
    return head + "\n".join(missing) + "\n"


def ensure_gitignore(repo_root: Path, patterns: Sequence[str]) -> list[str]:
    """Add missing ``patterns`` to ``<repo_root>/.gitignore``; return what was added."""
    path = repo_root / ".gitignore"
    existing = path.read_text(encoding="utf-8") if path.is_file() else ""
    missing = missing_patterns(existing, patterns)
    if not missing:
        return []
    path.write_text(merge_gitignore(existing, patterns), encoding="utf-8")
    logger.debug("gitignore updated at %s: %s", path, ", ".join(missing))
    return missing
