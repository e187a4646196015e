"""Terminal progress bar for the archive download.

Implements the ProgressReporter protocol. In a terminal the line is
redrawn in place; otherwise only the final line is written so logs and
pipes do not fill with carriage returns.
"""

import os
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

from vsdown.utils.progress_utils import (
    format_eta,
    format_percentage,
    human_mib,
    human_speed_bps,
    render_bar,
)

# Minimum seconds between two redraws
REFRESH_INTERVAL = 0.1


@dataclass(slots=True)
class TaskState:
    """Progress of one task."""

    name: str
    total: int | None
    completed: int = 0
    started: float = field(default_factory=time.monotonic)
    finished: bool = False
    success: bool = True

    @property
    def speed(self) -> float:
        elapsed = time.monotonic() - self.started
        return self.completed / elapsed if elapsed > 0 else 0.0


class AsciiProgressBar:
    """Single-line ASCII progress renderer."""

    def __init__(
        self,
        output: TextIO | None = None,
        interactive: bool | None = None,
        bar_width: int = 25,
    ) -> None:
        """Initialize the renderer.

        Args:
            output: Output stream (defaults to sys.stdout)
            interactive: Redraw in place; auto-detected from TTY if None
            bar_width: Width of the bar in characters

        """
        self.output = output or sys.stdout
        if interactive is None:
            is_tty = bool(getattr(self.output, "isatty", lambda: False)())
            interactive = is_tty and os.environ.get("TERM", "") != "dumb"
        self.interactive = interactive
        self.bar_width = bar_width
        self.tasks: dict[str, TaskState] = {}
        self._last_render = 0.0

    def is_active(self) -> bool:
        return True

    async def add_task(self, name: str, total: int | None = None) -> str:
        task_id = f"{name}-{len(self.tasks)}"
        self.tasks[task_id] = TaskState(name=name, total=total)
        if self.interactive:
            self._render(self.tasks[task_id])
        return task_id

    async def update_task(self, task_id: str, completed: int) -> None:
        task = self.tasks[task_id]
        task.completed = completed
        now = time.monotonic()
        if self.interactive and now - self._last_render >= REFRESH_INTERVAL:
            self._last_render = now
            self._render(task)

    async def finish_task(self, task_id: str, *, success: bool = True) -> None:
        task = self.tasks[task_id]
        task.finished = True
        task.success = success
        self._render(task)
        self.output.write("\n")
        self.output.flush()

    def format_line(self, task: TaskState) -> str:
        """Build the text for one task."""
        status = ""
        if task.finished:
            status = " ✓" if task.success else " ✖"

        if not task.total:
            # Unknown length: bytes received only
            return (
                f"{task.name} {human_mib(task.completed):>10} "
                f"{human_speed_bps(task.speed):>10}{status}"
            )

        speed = task.speed
        remaining = task.total - task.completed
        eta = format_eta(remaining / speed) if speed > 0 else format_eta(0)
        return (
            f"{task.name} {render_bar(task.completed, task.total, self.bar_width)} "
            f"{human_mib(task.completed)}/{human_mib(task.total)} "
            f"({human_speed_bps(speed)}, eta {eta}) "
            f"{format_percentage(task.completed, task.total)}{status}"
        )

    def _render(self, task: TaskState) -> None:
        line = self.format_line(task)
        if self.interactive:
            self.output.write(f"\r\033[K{line}")
            self.output.flush()
        elif task.finished:
            self.output.write(line)
