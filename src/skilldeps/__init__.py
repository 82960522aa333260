"""Manage npm dependencies in Agent Skills."""

from skilldeps.batch import install_all, update_all
from skilldeps.configure import setup
from skilldeps.deps import ensure, install, update
from skilldeps.marker import is_marker_stale, marker_path, touch_marker
from skilldeps.registry import is_registry_error

__version__ = "0.1.0"

__all__ = [
    "ensure",
    "install",
    "install_all",
    "is_marker_stale",
    "is_registry_error",
    "marker_path",
    "setup",
    "touch_marker",
    "update",
    "update_all",
]
