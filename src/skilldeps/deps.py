"""Install, update and ensure commands for a single skill."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from skilldeps.config import Settings
from skilldeps.configure import configure_auth
from skilldeps.errors import PackageManagerError
from skilldeps.marker import INSTALL_DIR_NAME, is_marker_stale, touch_marker
from skilldeps.registry import classify_failure
from skilldeps.runner import run_npm

logger = logging.getLogger(__name__)


def _resolve_package_json(package_json: Path | str) -> Path | None:
    path = Path(package_json).expanduser().resolve()
    if not path.is_file():
        click.echo(f"Error: package.json not found at {path}", err=True)
        return None
    return path


def _report_failure(exc: PackageManagerError) -> None:
    click.echo(f"Error: {exc}", err=True)
    if not exc.output:
        return
    category, hints = classify_failure(exc.output)
    click.echo(f"  category: {category}", err=True)
    for hint in hints:
        click.echo(f"  - {hint}", err=True)


def run_with_reauth(subcommand: str, cwd: Path, settings: Settings) -> None:
    """Run ``npm <subcommand>``; on a registry/auth failure re-auth and retry once.

    Raises PackageManagerError when the command (or its single retry) fails.
    """
    try:
        run_npm(subcommand, cwd, settings)
        return
    except PackageManagerError as exc:
        if not exc.retryable:
            raise
        logger.info("npm %s hit a registry error in %s; refreshing auth", subcommand, cwd)
        click.echo("Registry access failed, refreshing npm auth and retrying...")
        if not configure_auth(settings):
            raise
    run_npm(subcommand, cwd, settings)


def run_and_mark(subcommand: str, target_dir: Path, settings: Settings) -> bool:
    """Run npm with re-auth and refresh the marker; failures are printed with hints."""
    try:
        run_with_reauth(subcommand, target_dir, settings)
    except PackageManagerError as exc:
        _report_failure(exc)
        return False
    if not touch_marker(target_dir):
        logger.warning("could not write freshness marker in %s", target_dir / INSTALL_DIR_NAME)
    return True


def install(package_json: Path | str, settings: Settings) -> bool:
    """Force ``npm install`` (no staleness check)."""
    path = _resolve_package_json(package_json)
    if path is None:
        return False
    target_dir = path.parent
    click.echo(f"Installing dependencies in {target_dir}...")
    if not run_and_mark("install", target_dir, settings):
        return False
    click.echo("✓ Dependencies installed successfully")
    return True


def update(package_json: Path | str, settings: Settings) -> bool:
    """Force ``npm update`` (ignores the marker)."""
    path = _resolve_package_json(package_json)
    if path is None:
        return False
    target_dir = path.parent
    click.echo(f"Updating dependencies in {target_dir}...")
    if not run_and_mark("update", target_dir, settings):
        return False
    click.echo("✓ Dependencies updated successfully")
    return True


def ensure(
    package_json: Path | str,
    settings: Settings,
    *,
    max_age_days: int | None = None,
) -> bool:
    """Install if node_modules is missing, update if the marker is stale.

    ``max_age_days`` of 0 turns off staleness-driven updates.
    """
    path = _resolve_package_json(package_json)
    if path is None:
        return False
    target_dir = path.parent
    if max_age_days is None:
        max_age_days = settings.skill_update_check_days

    needs_install = not (target_dir / INSTALL_DIR_NAME).is_dir()
    needs_update = (
        not needs_install and max_age_days > 0 and is_marker_stale(target_dir, max_age_days)
    )

    if not needs_install and not needs_update:
        click.echo("✓ Dependencies are up to date")
        return True

    if needs_install:
        click.echo(f"Installing dependencies in {target_dir}...")
        subcommand = "install"
    else:
        click.echo(f"Updating dependencies in {target_dir}...")
        subcommand = "update"

    if not run_and_mark(subcommand, target_dir, settings):
        return False
    click.echo("✓ Dependencies ready")
    return True
