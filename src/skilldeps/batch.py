"""Batch install/update across every skill in the repository."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from skilldeps.config import Settings
from skilldeps.deps import run_and_mark
from skilldeps.repo import find_repo_root, find_skill_packages

logger = logging.getLogger(__name__)

_VERBS = {"install": ("Installing", "installed"), "update": ("Updating", "updated")}


def _run_all(subcommand: str, start_dir: Path, settings: Settings) -> bool:
    repo_root = find_repo_root(start_dir)
    if repo_root is None:
        click.echo("Error: Could not find repository root", err=True)
        return False

    packages = find_skill_packages(repo_root, settings.skills_dir)
    logger.debug("found %d skill package(s) under %s", len(packages), repo_root / settings.skills_dir)
    if not packages:
        click.echo("No skill package.json files found")
        return True

    doing, done = _VERBS[subcommand]
    click.echo(f"Found {len(packages)} skill(s) to {subcommand}")

    all_succeeded = True
    for package_json in packages:
        target_dir = package_json.parent
        skill_name = package_json.relative_to(repo_root).as_posix()
        click.echo(f"\n{doing} {skill_name}...")
        if not run_and_mark(subcommand, target_dir, settings):
            click.echo(f"✗ Failed to {subcommand} {skill_name}", err=True)
            all_succeeded = False
            continue
        click.echo(f"✓ {skill_name} {done}")

    summary = "completed" if all_succeeded else "completed with errors"
    click.echo(f"\n{'✓' if all_succeeded else '✗'} {subcommand.capitalize()}-all {summary}")
    return all_succeeded


def install_all(start_dir: Path, settings: Settings) -> bool:
    return _run_all("install", start_dir, settings)


def update_all(start_dir: Path, settings: Settings) -> bool:
    return _run_all("update", start_dir, settings)
