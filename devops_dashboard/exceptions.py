# devops_dashboard/exceptions.py


class DashboardError(Exception):
    """Base class for errors raised by the dashboard's introspection helpers."""


class InventoryScanError(DashboardError):
    """Raised when the inventory root itself cannot be read."""

    def __init__(self, root_path, reason: str):
        self.root_path = str(root_path)
        self.reason = reason
        super().__init__(f"Cannot scan '{self.root_path}': {reason}")
