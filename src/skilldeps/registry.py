"""Classification of package-manager failure output."""

from __future__ import annotations

# npm error codes carry the E prefix; a bare "404" in unrelated text must not match.
REGISTRY_ERROR_TOKENS: tuple[str, ...] = (
    "e404",
    "e401",
    "e403",
    "unauthorized",
    "forbidden",
    "@varasto",
)


def is_registry_error(message: str | None) -> bool:
    """True when ``message`` looks like a registry auth or access failure."""
    if not message:
        return False
    text = message.lower()
    return any(token in text for token in REGISTRY_ERROR_TOKENS)


def classify_failure(output: str) -> tuple[str, list[str]]:
    text = output.lower()
    if is_registry_error(output):
        return (
            "registry_auth",
            [
                "Re-run setup to refresh the registry token: skill-deps setup",
                "Check that GITHUB_TOKEN has the read:packages scope.",
            ],
        )
    if "enotfound" in text or "eai_again" in text or "name resolution" in text:
        return (
            "dns_or_network_resolution",
            [
                "Verify outbound DNS/network connectivity.",
                "Retry with explicit registry: npm install --registry https://registry.npmjs.org/",
            ],
        )
    if "econnreset" in text or "etimedout" in text or "network timeout" in text:
        return (
            "network_timeout_or_reset",
            [
                "Retry with a stable connection.",
                "Increase npm timeouts: npm config set fetch-retries 5 && npm config set fetch-timeout 120000",
            ],
        )
    if "eacces" in text or "permission denied" in text:
        return (
            "filesystem_permission",
            [
                "Fix ownership/permissions for the skill and npm cache directories.",
                "Avoid sudo npm installs inside this repo.",
            ],
        )
    if "enospc" in text:
        return (
            "disk_full",
            [
                "Free disk space and retry.",
                "Clean npm cache: npm cache clean --force",
            ],
        )
    if "enotempty" in text:
        return (
            "filesystem_conflict",
            [
                "Remove the skill's node_modules directory and retry.",
            ],
        )
    return (
        "unknown",
        [
            "Re-run with --verbose to see the full npm output.",
        ],
    )
