from .project import (
    NO_EXTENSION,
    InventoryError,
    ProjectInventory,
    RepositoryStatus,
    RepositoryStatusError,
)

__all__ = [
    "NO_EXTENSION",
    "InventoryError",
    "ProjectInventory",
    "RepositoryStatus",
    "RepositoryStatusError",
]
