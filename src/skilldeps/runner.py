"""Subprocess invocation of npm and the gh credential helper."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from skilldeps.config import Settings
from skilldeps.errors import PackageManagerError
from skilldeps.registry import is_registry_error

logger = logging.getLogger(__name__)

_OUTPUT_TAIL_CHARS = 4000


@dataclass(frozen=True, slots=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        return "\n".join(part for part in (self.stdout, self.stderr) if part)


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> CommandResult:
    """Run ``args`` with captured text output.

    A missing executable or a timeout raises PackageManagerError; a non-zero
    exit is reported through the returned result.
    """
    cmd = tuple(args)
    logger.debug("running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            text=True,
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise PackageManagerError(f"{cmd[0]} not found on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise PackageManagerError(f"{' '.join(cmd)} timed out after {timeout}s") from exc
    return CommandResult(cmd, proc.returncode, proc.stdout or "", proc.stderr or "")


def run_npm(subcommand: str, cwd: Path, settings: Settings) -> CommandResult:
    result = run_command(
        [settings.npm_bin, subcommand],
        cwd=cwd,
        timeout=settings.npm_timeout_seconds,
    )
    if result.stdout:
        logger.debug("npm %s stdout:\n%s", subcommand, result.stdout[-_OUTPUT_TAIL_CHARS:])
    if result.ok:
        return result
    output = result.output
    raise PackageManagerError(
        f"npm {subcommand} failed with exit code {result.returncode}",
        output=output[-_OUTPUT_TAIL_CHARS:],
        returncode=result.returncode,
        retryable=is_registry_error(output),
    )


def gh_auth_token(gh_bin: str = "gh") -> str | None:
    """Token from ``gh auth token``, or None if gh is missing or logged out."""
    try:
        result = run_command([gh_bin, "auth", "token"], timeout=30)
    except PackageManagerError as exc:
        logger.debug("gh auth token unavailable: %s", exc)
        return None
    if not result.ok:
        logger.debug("gh auth token exited %d", result.returncode)
        return None
    return result.stdout.strip() or None
