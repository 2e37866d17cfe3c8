# devops_dashboard/systems/inventory_scanner.py
"""
Filesystem inventory: counts files by extension and lists directories
under a project root, skipping well-known noise directories.
"""
import logging
import os
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import AbstractSet, List, Union

from devops_dashboard.exceptions import InventoryScanError
from devops_dashboard.models import NO_EXTENSION, InventoryError, ProjectInventory

logger = logging.getLogger(__name__)

# Dependency installs, VCS metadata, editor settings, coverage reports
EXCLUDED_DIRECTORIES = frozenset({"node_modules", ".git", ".vscode", "coverage"})

INVENTORY_ERROR = "Failed to get project statistics"


def classify_extension(filename: str) -> str:
    """Lowercase extension including the dot, or the no-extension bucket."""
    extension = os.path.splitext(filename)[1].lower()
    return extension or NO_EXTENSION


def _walk(root: Path, excluded: AbstractSet[str], counts: Counter, directories: List[str]) -> None:
    pending = [str(root)]
    while pending:
        directory = pending.pop()
        if directory != str(root):
            directories.append(Path(directory).relative_to(root).as_posix())
        children = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_dir():
                        if entry.name not in excluded:
                            children.append(entry.path)
                    else:
                        counts[classify_extension(entry.name)] += 1
        except OSError as e:
            # Unreadable subtree counts as empty; keep what was collected so far.
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
        # Reversed so the first enumerated child is visited next.
        pending.extend(reversed(children))


def scan_inventory(root_path, excluded: AbstractSet[str] = EXCLUDED_DIRECTORIES) -> ProjectInventory:
    """
    Walk ``root_path`` depth-first and build a ProjectInventory.

    Directories are listed in enumeration order, each one before its
    descendants. Errors below the root are swallowed per directory.

    Raises:
        InventoryScanError: the root is missing, not a directory or unreadable.
    """
    root = Path(root_path)
    if not root.is_dir():
        raise InventoryScanError(root, "not a directory")
    try:
        # Probe readability so a locked root is reported instead of read as empty.
        with os.scandir(root):
            pass
    except OSError as e:
        raise InventoryScanError(root, e.strerror or str(e)) from e

    counts: Counter = Counter()
    directories: List[str] = []
    _walk(root, excluded, counts, directories)

    return ProjectInventory(
        total_file_count=sum(counts.values()),
        extension_counts=dict(counts),
        relative_directory_paths=directories,
        scan_timestamp=datetime.now(timezone.utc).isoformat(),
    )


def get_project_stats(root_path, excluded: AbstractSet[str] = EXCLUDED_DIRECTORIES) -> Union[ProjectInventory, InventoryError]:
    """Scan ``root_path``, turning a root-level failure into an InventoryError record."""
    try:
        return scan_inventory(root_path, excluded)
    except (InventoryScanError, OSError) as e:
        logger.error(f"Project statistics unavailable for {root_path}: {e}")
        return InventoryError(error_kind=INVENTORY_ERROR, message=str(e))
