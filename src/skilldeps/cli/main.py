"""Click CLI group: setup, install, update, ensure, batch and status commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from skilldeps.config import Settings, get_settings, validate_settings
from skilldeps.errors import ConfigError
from skilldeps.logging import configure_logging

_NPM_OPTION_HELP = "Path to the skill's package.json."


def _settings(ctx: click.Context) -> Settings:
    return ctx.find_object(Settings) or get_settings()


def _finish(ok: bool) -> None:
    sys.exit(0 if ok else 1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Increase log verbosity for troubleshooting.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Manage npm dependencies in Agent Skills."""
    try:
        settings = get_settings()
        validate_settings(settings)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(settings, verbose=verbose)
    ctx.obj = settings


@cli.command()
@click.pass_context
def setup(ctx: click.Context) -> None:
    """Configure npm auth for private packages."""
    from skilldeps.configure import setup as run_setup

    _finish(run_setup(Path.cwd(), _settings(ctx)))


@cli.command()
@click.option("--npm", "package_json", type=click.Path(path_type=Path), required=True,
              help=_NPM_OPTION_HELP)
@click.pass_context
def install(ctx: click.Context, package_json: Path) -> None:
    """Install dependencies for an Agent Skill."""
    from skilldeps.deps import install as run_install

    _finish(run_install(package_json, _settings(ctx)))


@cli.command()
@click.option("--npm", "package_json", type=click.Path(path_type=Path), required=True,
              help=_NPM_OPTION_HELP)
@click.pass_context
def update(ctx: click.Context, package_json: Path) -> None:
    """Update dependencies for an Agent Skill."""
    from skilldeps.deps import update as run_update

    _finish(run_update(package_json, _settings(ctx)))


@cli.command()
@click.option("--npm", "package_json", type=click.Path(path_type=Path), required=True,
              help=_NPM_OPTION_HELP)
@click.option(
    "--max-age",
    "max_age_days",
    type=click.IntRange(min=0),
    default=None,
    show_default="SKILL_UPDATE_CHECK_DAYS or 7",
    help="Days before the install marker is stale (0 disables update checks).",
)
@click.pass_context
def ensure(ctx: click.Context, package_json: Path, max_age_days: int | None) -> None:
    """Install if missing, update if stale."""
    from skilldeps.deps import ensure as run_ensure

    _finish(run_ensure(package_json, _settings(ctx), max_age_days=max_age_days))


@cli.command("install-all")
@click.pass_context
def install_all(ctx: click.Context) -> None:
    """Install dependencies for all Agent Skills in the repo."""
    from skilldeps.batch import install_all as run_install_all

    _finish(run_install_all(Path.cwd(), _settings(ctx)))


@cli.command("update-all")
@click.pass_context
def update_all(ctx: click.Context) -> None:
    """Update dependencies for all Agent Skills in the repo."""
    from skilldeps.batch import update_all as run_update_all

    _finish(run_update_all(Path.cwd(), _settings(ctx)))


@cli.command()
@click.option("--npm", "package_json", type=click.Path(path_type=Path), default=None,
              help="Limit the report to one skill's package.json.")
@click.pass_context
def status(ctx: click.Context, package_json: Path | None) -> None:
    """Show dependency status and diagnostics."""
    from skilldeps.cli.status import run_status

    _finish(run_status(_settings(ctx), package_json=package_json))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
