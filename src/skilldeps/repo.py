"""Repository root discovery and skill package lookup."""

from __future__ import annotations

from pathlib import Path

REPO_MARKER = ".git"
MAX_ASCENT = 20


def find_repo_root(start_dir: Path | str, *, max_ascent: int = MAX_ASCENT) -> Path | None:
    """Return the closest directory at or above ``start_dir`` holding ``.git``.

    Stops at the filesystem root or after ``max_ascent`` levels, whichever
    comes first.
    """
    current = Path(start_dir).absolute()
    for _ in range(max_ascent):
        if (current / REPO_MARKER).exists():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def find_skill_packages(repo_root: Path, skills_dir: str = "skills") -> list[Path]:
    """List the package.json of every skill under ``<repo_root>/<skills_dir>``.

    A skill's ``scripts/package.json`` wins over one at the skill root; skills
    with neither are skipped.
    """
    root = repo_root / skills_dir
    if not root.is_dir():
        return []

    found: list[Path] = []
    for skill_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        scripts_manifest = skill_dir / "scripts" / "package.json"
        root_manifest = skill_dir / "package.json"
        if scripts_manifest.is_file():
            found.append(scripts_manifest)
        elif root_manifest.is_file():
            found.append(root_manifest)
    return found
