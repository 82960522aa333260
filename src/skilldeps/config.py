"""Application configuration contract."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from skilldeps.errors import ConfigError
from skilldeps.repo import find_repo_root


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    skill_update_check_days: int = Field(alias="SKILL_UPDATE_CHECK_DAYS", default=7)
    github_token: str = Field(alias="GITHUB_TOKEN", default="")
    gh_token: str = Field(alias="GH_TOKEN", default="")
    registry_scope: str = Field(alias="SKILL_REGISTRY_SCOPE", default="@varasto")
    registry_url: str = Field(alias="SKILL_REGISTRY_URL", default="https://npm.pkg.github.com")
    skills_dir: str = Field(alias="SKILLS_DIR", default="skills")
    npm_bin: str = Field(alias="NPM_BIN", default="npm")
    gh_bin: str = Field(alias="GH_BIN", default="gh")
    npm_timeout_seconds: int = Field(alias="NPM_TIMEOUT_SECONDS", default=600)
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")
    log_format: str = Field(alias="LOG_FORMAT", default="console")

    def env_token(self) -> str:
        """Registry token from the environment, GITHUB_TOKEN first."""
        return (self.github_token or self.gh_token).strip()


def validate_settings(settings: Settings) -> None:
    problems: list[str] = []
    if settings.skill_update_check_days < 0:
        problems.append("SKILL_UPDATE_CHECK_DAYS(must be >= 0)")
    if settings.npm_timeout_seconds <= 0:
        problems.append("NPM_TIMEOUT_SECONDS(must be > 0)")
    if not settings.registry_scope.startswith("@"):
        problems.append("SKILL_REGISTRY_SCOPE(must start with @)")
    if not settings.registry_url.startswith(("https://", "http://")):
        problems.append("SKILL_REGISTRY_URL(http or https URL required)")
    if settings.log_format not in {"console", "json"}:
        problems.append("LOG_FORMAT(console or json)")

    if problems:
        raise ConfigError(f"invalid configuration: {', '.join(problems)}")


def load_settings(start_dir: Path | None = None) -> Settings:
    """Build settings, reading the repository-level .env when there is one."""
    repo_root = find_repo_root(start_dir or Path.cwd())
    try:
        if repo_root is not None and (repo_root / ".env").is_file():
            return Settings(_env_file=repo_root / ".env")
        return Settings()
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(part) for part in err['loc'])}({err['msg']})"
            for err in exc.errors()
        ]
        raise ConfigError(f"invalid configuration: {', '.join(problems)}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
