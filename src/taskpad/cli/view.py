"""Task list rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from taskpad.tasks import StoreEvent, TaskCollection, TaskStore

if TYPE_CHECKING:
    from taskpad.cli.session import ConsoleSession

EMPTY_HINT = "No tasks yet. Type a task and press Enter, or use /add."


def render_tasks(snapshot: TaskCollection, title: str = "Tasks") -> RenderableType:
    """Build a table for a snapshot: row number, id, text."""
    if not snapshot:
        return Text(EMPTY_HINT, style="dim italic")

    table = Table(title=title, show_lines=False, padding=(0, 1))
    table.add_column("#", style="bold cyan", no_wrap=True, justify="right")
    table.add_column("ID", style="dim", no_wrap=True, max_width=12)
    table.add_column("Task")

    for row, task in enumerate(snapshot, start=1):
        table.add_row(str(row), task.id, Text(task.text))

    return table


class TaskListView:
    """Keeps the terminal in sync with the store.

    Redraws when the snapshot changes identity; no-op updates and
    deletes hand back the same tuple and are skipped.
    """

    def __init__(self, store: TaskStore, session: ConsoleSession, auto_render: bool = True) -> None:
        self._store = store
        self._session = session
        self.auto_render = auto_render
        self._last: TaskCollection | None = None
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self) -> None:
        """Subscribe to the store and draw the current list once."""
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self.on_event, replay=self.auto_render)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_event(self, event: StoreEvent) -> None:
        if not self.auto_render or event.snapshot is self._last:
            return
        self.render(event.snapshot)

    def render(self, snapshot: TaskCollection | None = None) -> None:
        """Draw a snapshot (the store's current one by default)."""
        if snapshot is None:
            snapshot = self._store.list()
        self._last = snapshot
        self._session.add_rich(render_tasks(snapshot))
