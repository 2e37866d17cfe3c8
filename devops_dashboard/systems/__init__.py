"""Leaf-level introspection helpers called by the route handlers."""

from .health import get_health_snapshot
from .inventory_scanner import EXCLUDED_DIRECTORIES, get_project_stats, scan_inventory
from .vcs_reader import get_branches, get_recent_commits, read_repository_status

__all__ = [
    "EXCLUDED_DIRECTORIES",
    "get_branches",
    "get_health_snapshot",
    "get_project_stats",
    "get_recent_commits",
    "read_repository_status",
    "scan_inventory",
]
