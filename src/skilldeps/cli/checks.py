"""Shared check primitives for the status report."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from pathlib import Path

from skilldeps.marker import INSTALL_DIR_NAME, StalenessTracker
from skilldeps.npmrc import has_auth_token, registry_declaration


@dataclass(frozen=True, slots=True)
class CheckResult:
    name: str
    passed: bool
    message: str
    fix_hint: str = ""


def check_tool_exists(name: str) -> CheckResult:
    found = shutil.which(name) is not None
    return CheckResult(
        name=f"{name} on PATH",
        passed=found,
        message=f"{name} found" if found else f"{name} not found",
        fix_hint=f"Install {name} and ensure it is on your PATH.",
    )


def check_npm_auth(npmrc_path: Path, scope: str, registry_url: str) -> CheckResult:
    name = "Registry auth configured"
    hint = "Run: skill-deps setup"
    if not npmrc_path.is_file():
        return CheckResult(name=name, passed=False, message=f"{npmrc_path} missing", fix_hint=hint)
    try:
        content = npmrc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return CheckResult(name=name, passed=False, message=str(exc), fix_hint=hint)

    has_registry = registry_declaration(scope, registry_url) in content.splitlines()
    has_token = has_auth_token(content, registry_url)
    if has_registry and has_token:
        return CheckResult(name=name, passed=True, message=registry_url)
    missing = [
        label
        for label, present in (("registry line", has_registry), ("auth token", has_token))
        if not present
    ]
    return CheckResult(
        name=name,
        passed=False,
        message=f"missing {' and '.join(missing)} in {npmrc_path}",
        fix_hint=hint,
    )


def format_age(seconds: float) -> str:
    seconds = max(0, int(seconds))
    minutes, hours, days = seconds // 60, seconds // 3600, seconds // 86400
    if days > 0:
        return f"{days} day{'s' if days > 1 else ''} ago"
    if hours > 0:
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    if minutes > 0:
        return f"{minutes} minute{'s' if minutes > 1 else ''} ago"
    return f"{seconds} second{'s' if seconds != 1 else ''} ago"


def check_marker(
    target_dir: Path,
    max_age_days: int,
    tracker: StalenessTracker | None = None,
) -> CheckResult:
    tracker = tracker or StalenessTracker()
    written_at = tracker.read(target_dir)
    if written_at is None:
        return CheckResult(
            name="Marker",
            passed=False,
            message="not found (never installed)",
            fix_hint="Run: skill-deps ensure --npm <path>",
        )
    age = (tracker.clock() - written_at).total_seconds()
    stale = tracker.is_stale(target_dir, max_age_days)
    return CheckResult(
        name="Marker",
        passed=not stale,
        message=f"{format_age(age)}{' (stale)' if stale else ''}",
        fix_hint="Run: skill-deps update --npm <path>",
    )


def installed_versions(target_dir: Path) -> dict[str, str]:
    """Installed versions of the dependencies declared in package.json."""
    modules = target_dir / INSTALL_DIR_NAME
    manifest = target_dir / "package.json"
    if not modules.is_dir() or not manifest.is_file():
        return {}
    try:
        pkg = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(pkg, dict):
        return {}

    declared: dict[str, object] = {}
    for section in ("dependencies", "devDependencies"):
        value = pkg.get(section)
        if isinstance(value, dict):
            declared.update(value)

    versions: dict[str, str] = {}
    for name in declared:
        # scoped names ("@scope/pkg") map onto nested directories
        installed = modules.joinpath(*name.split("/"), "package.json")
        if not installed.is_file():
            continue
        try:
            data = json.loads(installed.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            continue
        if isinstance(data, dict) and data.get("version"):
            versions[name] = str(data["version"])
    return versions
