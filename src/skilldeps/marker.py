"""Install freshness tracking via a timestamp marker inside node_modules.

The marker is a plain-text file holding one ISO-8601 timestamp, written after
every successful install or update. Anything uncertain about it (missing,
unreadable, unparseable) counts as stale so the caller re-installs.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

MARKER_NAME = ".skill-update-check"
INSTALL_DIR_NAME = "node_modules"
SECONDS_PER_DAY = 86_400


def _utc_now() -> datetime:
    return datetime.now(UTC)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` in UTC with millisecond precision and a ``Z`` suffix."""
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(text: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(text.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class StalenessTracker:
    def __init__(
        self,
        *,
        marker_name: str = MARKER_NAME,
        install_dir_name: str = INSTALL_DIR_NAME,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.marker_name = marker_name
        self.install_dir_name = install_dir_name
        self.clock = clock

    def install_dir(self, target_dir: Path | str) -> Path:
        return Path(target_dir) / self.install_dir_name

    def marker_path(self, target_dir: Path | str) -> Path:
        return self.install_dir(target_dir) / self.marker_name

    def read(self, target_dir: Path | str) -> datetime | None:
        """Return the marker timestamp, or None if it is absent or corrupt."""
        try:
            content = self.marker_path(target_dir).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None
        return parse_timestamp(content)

    def age_days(self, target_dir: Path | str) -> float | None:
        written_at = self.read(target_dir)
        if written_at is None:
            return None
        return (self.clock() - written_at).total_seconds() / SECONDS_PER_DAY

    def is_stale(self, target_dir: Path | str, max_age_days: float = 7) -> bool:
        age = self.age_days(target_dir)
        if age is None:
            return True
        # an age equal to the threshold is still fresh
        return age > max_age_days

    def touch(self, target_dir: Path | str) -> bool:
        """Write the current time as the marker.

        Never creates the install directory: returns False when it is absent
        or when the write fails.
        """
        install_dir = self.install_dir(target_dir)
        if not install_dir.is_dir():
            return False
        try:
            self.marker_path(target_dir).write_text(
                format_timestamp(self.clock()), encoding="utf-8"
            )
        except OSError:
            return False
        return True


_default_tracker = StalenessTracker()


def marker_path(target_dir: Path | str) -> Path:
    return _default_tracker.marker_path(target_dir)


def read_marker(target_dir: Path | str) -> datetime | None:
    return _default_tracker.read(target_dir)


def is_marker_stale(target_dir: Path | str, max_age_days: float = 7) -> bool:
    return _default_tracker.is_stale(target_dir, max_age_days)


def touch_marker(target_dir: Path | str) -> bool:
    return _default_tracker.touch(target_dir)
