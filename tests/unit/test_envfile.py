"""Tests for the repository .env skill section."""

from __future__ import annotations

from pathlib import Path

from skilldeps.envfile import ENV_SKILL_SECTION, ensure_env_file, merge_env_section


def test_merge_into_empty() -> None:
    assert merge_env_section("") == ENV_SKILL_SECTION


def test_merge_appends_after_blank_line() -> None:
    result = merge_env_section("FOO=bar\n\n\n")
    assert result == "FOO=bar\n\n" + ENV_SKILL_SECTION


def test_merge_keeps_existing_setting() -> None:
    existing = "SKILL_UPDATE_CHECK_DAYS=3\n"
    assert merge_env_section(existing) == existing


def test_ensure_env_file_states(tmp_path: Path) -> None:
    assert ensure_env_file(tmp_path) == "created"
    assert ensure_env_file(tmp_path) == "present"
    assert (tmp_path / ".env").read_text().count("SKILL_UPDATE_CHECK_DAYS=") == 1


def test_ensure_env_file_appends(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("OTHER=1\n")
    assert ensure_env_file(tmp_path) == "appended"
    content = (tmp_path / ".env").read_text()
    assert content.startswith("OTHER=1\n\n# Skill dependency management")
