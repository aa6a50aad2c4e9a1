from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn

from .formatting import format_time


class ProgressView:
    """Terminal progress bar for one countdown, cleared when the run stops."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._progress = None
        self._task = None
        self._total = 0

    def begin(self, total: int, symbol: str):
        self._total = int(total)
        self._progress = Progress(
            TextColumn(symbol),
            SpinnerColumn(),
            TextColumn("[{task.fields[eta]}]"),
            BarColumn(bar_width=None, style="red", complete_style="red", finished_style="red"),
            console=self.console,
            transient=True,
        )
        self._task = self._progress.add_task("pomodoro", total=self._total, eta=format_time(self._total))
        self._progress.start()

    def advance(self, remaining: int):
        """One tick forward; `remaining` comes from the controller's clock."""
        if self._progress is None:
            return
        self._progress.update(self._task, advance=1, eta=format_time(remaining))

    def close(self):
        if self._progress is None:
            return
        self._progress.stop()
        self._progress = None
        self._task = None
