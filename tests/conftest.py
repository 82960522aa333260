from pathlib import Path

import pytest

from skilldeps.config import get_settings

_ENV_KEYS = (
    "GITHUB_TOKEN",
    "GH_TOKEN",
    "SKILL_UPDATE_CHECK_DAYS",
    "SKILL_REGISTRY_SCOPE",
    "SKILL_REGISTRY_URL",
    "SKILLS_DIR",
    "NPM_BIN",
    "GH_BIN",
    "NPM_TIMEOUT_SECONDS",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def test_env(tmp_path: Path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(workdir)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def skill_dir(tmp_path: Path) -> Path:
    """A skill scripts directory with a minimal package.json."""
    path = tmp_path / "skill" / "scripts"
    path.mkdir(parents=True)
    (path / "package.json").write_text('{"name": "test-skill", "version": "1.0.0"}\n')
    return path
