"""skill-deps exception hierarchy.

All skill-deps exceptions inherit from SkillDepsError. They are raised inside
the command layer (subprocess runner, settings validation) and turned into a
boolean result or exit status at the command boundary.
"""


class SkillDepsError(Exception):
    """Base exception for all skill-deps errors."""

    def __init__(self, message: str = "", *, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


class ConfigError(SkillDepsError):
    """Invalid or missing configuration."""


class PackageManagerError(SkillDepsError):
    """The package manager exited non-zero or could not be started.

    ``retryable`` is set when the output looks like a registry/auth failure,
    which is worth one re-authentication attempt.
    """

    def __init__(
        self,
        message: str = "",
        *,
        output: str = "",
        returncode: int | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message, retryable=retryable)
        self.output = output
        self.returncode = returncode


class CredentialError(SkillDepsError):
    """No registry token could be resolved."""
