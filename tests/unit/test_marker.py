"""Tests for skilldeps.marker freshness tracking."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from pathlib import Path

import pytest

from skilldeps.marker import (
    MARKER_NAME,
    StalenessTracker,
    format_timestamp,
    is_marker_stale,
    marker_path,
    parse_timestamp,
    touch_marker,
)

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def target(tmp_path: Path) -> Path:
    (tmp_path / "node_modules").mkdir()
    return tmp_path


@pytest.fixture
def tracker() -> StalenessTracker:
    return StalenessTracker(clock=lambda: NOW)


def _write_marker(target: Path, written_at: datetime) -> None:
    marker_path(target).write_text(format_timestamp(written_at))


class TestMarkerPath:
    def test_inside_node_modules(self, tmp_path: Path) -> None:
        path = marker_path(tmp_path)
        assert path == tmp_path / "node_modules" / MARKER_NAME
        assert path.name == ".skill-update-check"

    def test_no_io(self, tmp_path: Path) -> None:
        missing = tmp_path / "does-not-exist"
        assert marker_path(missing) == marker_path(missing)
        assert not missing.exists()


class TestIsStale:
    def test_missing_marker_is_stale(self, target: Path, tracker: StalenessTracker) -> None:
        assert tracker.is_stale(target, 7) is True
        assert tracker.is_stale(target, 10_000) is True

    def test_missing_node_modules_is_stale(self, tmp_path: Path) -> None:
        assert is_marker_stale(tmp_path) is True

    def test_fresh_marker(self, target: Path) -> None:
        touch_marker(target)
        assert is_marker_stale(target) is False

    def test_old_marker(self, target: Path, tracker: StalenessTracker) -> None:
        _write_marker(target, NOW - timedelta(days=10))
        assert tracker.is_stale(target, 7) is True

    def test_respects_custom_max_age(self, target: Path, tracker: StalenessTracker) -> None:
        _write_marker(target, NOW - timedelta(days=5))
        assert tracker.is_stale(target, 7) is False
        assert tracker.is_stale(target, 3) is True

    def test_boundary_is_not_stale(self, target: Path, tracker: StalenessTracker) -> None:
        _write_marker(target, NOW - timedelta(days=7))
        assert tracker.is_stale(target, 7) is False

    def test_just_past_boundary_is_stale(self, target: Path, tracker: StalenessTracker) -> None:
        _write_marker(target, NOW - timedelta(days=7, seconds=1))
        assert tracker.is_stale(target, 7) is True

    @pytest.mark.parametrize("content", ["not-a-date", "", "   ", "2026-13-45T99:00:00Z"])
    def test_unparseable_content_is_stale(
        self, target: Path, tracker: StalenessTracker, content: str
    ) -> None:
        marker_path(target).write_text(content)
        assert tracker.is_stale(target, 10_000) is True

    def test_undecodable_content_is_stale(self, target: Path, tracker: StalenessTracker) -> None:
        marker_path(target).write_bytes(b"\xff\xfe\x00garbage")
        assert tracker.is_stale(target, 7) is True

    def test_marker_directory_is_stale(self, target: Path, tracker: StalenessTracker) -> None:
        marker_path(target).mkdir()
        assert tracker.is_stale(target, 7) is True

    def test_naive_timestamp_read_as_utc(self, target: Path, tracker: StalenessTracker) -> None:
        marker_path(target).write_text("2026-10-13T12:00:00")
        assert tracker.is_stale(target, 7) is False
        assert tracker.is_stale(target, 4) is True


class TestTouch:
    def test_creates_marker(self, target: Path) -> None:
        assert touch_marker(target) is True
        assert marker_path(target).is_file()

    def test_writes_iso_timestamp(self, target: Path, tracker: StalenessTracker) -> None:
        tracker.touch(target)
        content = marker_path(target).read_text()
        assert content == "2026-10-18T12:00:00.000Z"
        assert parse_timestamp(content) == NOW

    def test_touch_then_not_stale(self, target: Path, tracker: StalenessTracker) -> None:
        assert tracker.touch(target) is True
        assert tracker.is_stale(target, 0) is False
        assert tracker.is_stale(target, 7) is False

    def test_overwrites_old_marker(self, target: Path, tracker: StalenessTracker) -> None:
        _write_marker(target, NOW - timedelta(days=30))
        tracker.touch(target)
        assert tracker.read(target) == NOW

    def test_missing_node_modules(self, tmp_path: Path) -> None:
        assert touch_marker(tmp_path) is False
        assert not (tmp_path / "node_modules").exists()

    def test_write_failure_returns_false(self, target: Path) -> None:
        marker_path(target).mkdir()
        assert touch_marker(target) is False


class TestTimestamps:
    def test_format_converts_to_utc(self) -> None:
        local = datetime(2026, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(local) == "2026-01-01T00:00:00.000Z"

    def test_parse_offset(self) -> None:
        assert parse_timestamp("2026-10-18T14:00:00+02:00") == NOW

    def test_parse_invalid(self) -> None:
        assert parse_timestamp("yesterday") is None
