"""Progress reporting protocol for core services.

The installer reports download progress through this interface so it
never imports the terminal UI. Tests and non-interactive runs use
NullProgressReporter.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressReporter(Protocol):
    """Abstract interface for reporting progress from core services."""

    def is_active(self) -> bool:
        """Return True if progress updates are rendered anywhere."""
        ...

    async def add_task(self, name: str, total: int | None = None) -> str:
        """Start a task.

        Args:
            name: Human-readable task name
            total: Expected units of work, None when unknown

        Returns:
            Task identifier for update_task() and finish_task()

        """
        ...

    async def update_task(self, task_id: str, completed: int) -> None:
        """Report units of work completed so far."""
        ...

    async def finish_task(self, task_id: str, *, success: bool = True) -> None:
        """Mark a task as done."""
        ...


class NullProgressReporter:
    """No-op progress reporter for when progress display is disabled."""

    def is_active(self) -> bool:
        return False

    async def add_task(self, name: str, total: int | None = None) -> str:
        return "null"

    async def update_task(self, task_id: str, completed: int) -> None:
        return None

    async def finish_task(self, task_id: str, *, success: bool = True) -> None:
        return None
