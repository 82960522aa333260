"""Idempotent merge of registry auth lines into an .npmrc document.

The document stays line-oriented so npm can read it, but merging works on an
ordered list of ``(key, line)`` entries: every line is tagged with the managed
key it belongs to (or None), managed entries are rewritten in place and
missing ones are appended. Merging again with the same inputs yields the same
text.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from urllib.parse import urlparse


@dataclass(frozen=True, slots=True)
class ManagedLine:
    key: str
    line: str
    matches: Callable[[str], bool]


def registry_declaration(scope: str, registry_url: str) -> str:
    return f"{scope}:registry={registry_url}"


def auth_token_prefix(registry_url: str) -> str:
    """``https://npm.pkg.github.com`` -> ``//npm.pkg.github.com/:_authToken=``."""
    parsed = urlparse(registry_url)
    path = parsed.path.rstrip("/")
    return f"//{parsed.netloc}{path}/:_authToken="


def managed_lines(scope: str, registry_url: str, token: str) -> list[ManagedLine]:
    declaration = registry_declaration(scope, registry_url)
    prefix = auth_token_prefix(registry_url)
    return [
        ManagedLine("registry", declaration, lambda line: line == declaration),
        ManagedLine("auth_token", prefix + token, lambda line: line.startswith(prefix)),
    ]


def _key_for(line: str, managed: Sequence[ManagedLine]) -> str | None:
    for entry in managed:
        if entry.matches(line):
            return entry.key
    return None


def merge_managed_lines(existing: str, managed: Sequence[ManagedLine]) -> str:
    replacements = {entry.key: entry.line for entry in managed}
    entries = [(_key_for(line, managed), line) for line in existing.splitlines()]

    merged: list[tuple[str | None, str]] = []
    seen: set[str] = set()
    for key, line in entries:
        if key is None:
            merged.append((None, line))
        elif key not in seen:
            seen.add(key)
            merged.append((key, replacements[key]))
        # later duplicates of a managed key are dropped

    for entry in managed:
        if entry.key not in seen:
            merged.append((entry.key, entry.line))

    return "\n".join(line for _, line in merged) + "\n"


def merge_npmrc(existing: str, scope: str, registry_url: str, token: str) -> str:
    return merge_managed_lines(existing, managed_lines(scope, registry_url, token))


def has_auth_token(content: str, registry_url: str) -> bool:
    prefix = auth_token_prefix(registry_url)
    return any(
        line.startswith(prefix) and len(line) > len(prefix) for line in content.splitlines()
    )
