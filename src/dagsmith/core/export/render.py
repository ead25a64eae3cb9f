"""Human-readable rendering of exported batches for diagnostics."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from dagsmith.core.export.batch import Batch

MAX_TASK_WIDTH = 60


def _task_preview(task: object) -> str:
    text = repr(task)
    if len(text) > MAX_TASK_WIDTH:
        text = text[: MAX_TASK_WIDTH - 3] + "..."
    return text


def batch_table(batch: Batch, title: str | None = None) -> Table:
    """Build a table with one row per task, sorted by label.

    Args:
        batch: Batch to render.
        title: Optional table title.

    Returns:
        Rich table with label, after and task columns.
    """
    table = Table(title=title)
    table.add_column("label", style="bold")
    table.add_column("after", style="cyan")
    table.add_column("task", style="dim")

    for exported in sorted(batch, key=lambda e: e.label):
        after = ", ".join(str(dep) for dep in sorted(exported.after)) or "-"
        table.add_row(str(exported.label), after, Text(_task_preview(exported.task)))
    return table


def print_batch(batch: Batch, console: Console | None = None, title: str | None = None) -> None:
    """Print a batch as a table.

    Args:
        batch: Batch to render.
        console: Rich console for output. Defaults to a new stdout console.
        title: Optional table title.
    """
    console = console or Console()
    console.print(batch_table(batch, title=title))
    if batch.is_empty:
        console.print("[dim]No tasks.[/]")
