"""Status command: prints auth and per-skill dependency state."""

from __future__ import annotations

from pathlib import Path

from skilldeps.cli.checks import (
    CheckResult,
    check_marker,
    check_npm_auth,
    check_tool_exists,
    installed_versions,
)
from skilldeps.config import Settings
from skilldeps.configure import default_npmrc_path
from skilldeps.marker import INSTALL_DIR_NAME
from skilldeps.repo import find_repo_root, find_skill_packages


def _green(text: str) -> str:
    return f"\033[32m{text}\033[0m"


def _red(text: str) -> str:
    return f"\033[31m{text}\033[0m"


def _yellow(text: str) -> str:
    return f"\033[33m{text}\033[0m"


def _bold(text: str) -> str:
    return f"\033[1m{text}\033[0m"


def _print_result(result: CheckResult, indent: str = "  ") -> None:
    icon = _green("✓") if result.passed else _red("✗")
    print(f"{indent}{icon} {result.name}: {result.message}")
    if not result.passed and result.fix_hint:
        print(f"{indent}  {_yellow('Fix:')} {result.fix_hint}")


def _section(title: str) -> None:
    print(f"\n{_bold(title)}")


def show_skill_status(package_json: Path, max_age_days: int) -> None:
    path = package_json.expanduser().resolve()
    if not path.is_file():
        print(f"\n  {_red('✗')} Package not found: {path}")
        return

    target_dir = path.parent
    print(f"\n  Skill: {path}")
    _print_result(check_marker(target_dir, max_age_days), indent="    ")

    if not (target_dir / INSTALL_DIR_NAME).is_dir():
        print(f"    {INSTALL_DIR_NAME}: not found (not installed)")
        return
    versions = installed_versions(target_dir)
    if not versions:
        print(f"    {INSTALL_DIR_NAME} exists but no packages tracked")
        return
    print("    Installed packages:")
    for name, version in versions.items():
        print(f"      - {name}@{version}")


def run_status(
    settings: Settings,
    *,
    package_json: Path | None = None,
    start_dir: Path | None = None,
    npmrc_path: Path | None = None,
) -> bool:
    """Print the report. Informational only, so it always returns True."""
    print(_bold("=== skill-deps status ==="))

    _section("Tools")
    _print_result(check_tool_exists(settings.npm_bin))

    _section("NPM Auth")
    _print_result(
        check_npm_auth(
            npmrc_path or default_npmrc_path(),
            settings.registry_scope,
            settings.registry_url,
        )
    )

    _section("Skills")
    max_age_days = settings.skill_update_check_days
    if package_json is not None:
        show_skill_status(package_json, max_age_days)
    else:
        repo_root = find_repo_root(start_dir or Path.cwd())
        if repo_root is None:
            print("  Could not find repository root (no .git directory found)")
        else:
            packages = find_skill_packages(repo_root, settings.skills_dir)
            if not packages:
                print(f"  No skills found under {repo_root / settings.skills_dir}")
            for manifest in packages:
                show_skill_status(manifest, max_age_days)

    print()
    return True
