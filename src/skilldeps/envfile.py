"""Repository-level .env section for skill dependency settings."""

from __future__ import annotations

from pathlib import Path

CHECK_DAYS_KEY = "SKILL_UPDATE_CHECK_DAYS"

ENV_SKILL_SECTION = f"""# Skill dependency management (skill-deps)
# How often to check for package updates (days). Set to 0 to disable.
{CHECK_DAYS_KEY}=7
"""


def merge_env_section(existing: str) -> str:
    if CHECK_DAYS_KEY in existing:
        return existing
    if not existing.strip():
        return ENV_SKILL_SECTION
    return existing.rstrip() + "\n\n" + ENV_SKILL_SECTION


def ensure_env_file(repo_root: Path) -> str:
    """Make sure ``<repo_root>/.env`` carries the skill section.

    Returns ``"present"``, ``"appended"`` or ``"created"``.
    """
    path = repo_root / ".env"
    if not path.is_file():
        path.write_text(ENV_SKILL_SECTION, encoding="utf-8")
        return "created"
    existing = path.read_text(encoding="utf-8")
    merged = merge_env_section(existing)
    if merged == existing:
        return "present"
    path.write_text(merged, encoding="utf-8")
    return "appended"
