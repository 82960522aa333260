"""Setup command: registry auth in ~/.npmrc plus repo .gitignore/.env hygiene."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from skilldeps.config import Settings
from skilldeps.envfile import ensure_env_file
from skilldeps.errors import CredentialError
from skilldeps.gitignore import ensure_gitignore
from skilldeps.npmrc import merge_npmrc
from skilldeps.repo import find_repo_root
from skilldeps.runner import gh_auth_token

logger = logging.getLogger(__name__)

GITIGNORE_PATTERNS = [
    ".npmrc",
    ".env",
    "**/skills/*/scripts/node_modules",
]


def default_npmrc_path() -> Path:
    return Path.home() / ".npmrc"


def resolve_token(settings: Settings, token: str | None = None) -> str:
    """Pick a registry token: explicit, then GITHUB_TOKEN/GH_TOKEN, then gh CLI."""
    if token and token.strip():
        return token.strip()
    env_token = settings.env_token()
    if env_token:
        return env_token
    helper_token = gh_auth_token(settings.gh_bin)
    if helper_token:
        logger.debug("using registry token from %s auth token", settings.gh_bin)
        return helper_token
    raise CredentialError(
        "No GitHub token found. Set GITHUB_TOKEN or run 'gh auth login'."
    )


def configure_npmrc(npmrc_path: Path, token: str, settings: Settings) -> bool:
    try:
        existing = npmrc_path.read_text(encoding="utf-8") if npmrc_path.is_file() else ""
        merged = merge_npmrc(existing, settings.registry_scope, settings.registry_url, token)
        npmrc_path.write_text(merged, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error configuring npm auth: {exc}", err=True)
        return False
    click.echo(f"✓ npm auth configured in {npmrc_path}")
    return True


def configure_auth(
    settings: Settings,
    *,
    npmrc_path: Path | None = None,
    token: str | None = None,
) -> bool:
    try:
        resolved = resolve_token(settings, token)
    except CredentialError as exc:
        click.echo(f"Error: {exc}", err=True)
        return False
    return configure_npmrc(npmrc_path or default_npmrc_path(), resolved, settings)


def setup(
    start_dir: Path,
    settings: Settings,
    *,
    npmrc_path: Path | None = None,
    token: str | None = None,
) -> bool:
    repo_root = find_repo_root(start_dir)
    if repo_root is not None:
        try:
            added = ensure_gitignore(repo_root, GITIGNORE_PATTERNS)
            if added:
                click.echo(f"✓ Added to .gitignore: {', '.join(added)}")
            else:
                click.echo("✓ .gitignore OK")

            env_state = ensure_env_file(repo_root)
            click.echo(
                {
                    "present": "✓ .env already has skill config",
                    "appended": "✓ Added skill config to .env",
                    "created": "✓ Created .env with skill config",
                }[env_state]
            )
        except (OSError, UnicodeDecodeError) as exc:
            click.echo(f"Error updating repository files: {exc}", err=True)
            return False
    else:
        logger.info("no repository root above %s; skipping .gitignore/.env", start_dir)

    return configure_auth(settings, npmrc_path=npmrc_path, token=token)
