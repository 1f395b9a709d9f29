"""Modal task editor.

The dialog is either creating a new task or editing an existing one.
The two cases are separate types instead of an optional "task being
edited", so every caller handles both explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from taskpad.logging import Loggers
from taskpad.tasks import Task, TaskStore

if TYPE_CHECKING:
    from taskpad.cli.session import ConsoleSession

logger = Loggers.cli()

PLACEHOLDER = "Enter task"


@dataclass(frozen=True)
class Creating:
    """Dialog opened from the add action; starts empty."""


@dataclass(frozen=True)
class Editing:
    """Dialog opened from a row's edit action; starts with the task's text."""

    task: Task


EditorMode = Union[Creating, Editing]


def dialog_title(mode: EditorMode) -> str:
    if isinstance(mode, Editing):
        return "Edit Task"
    return "New Task"


def initial_text(mode: EditorMode) -> str:
    if isinstance(mode, Editing):
        return mode.task.text
    return ""


class TaskEditor:
    """Runs the save/cancel dialog and routes the result to the store."""

    def __init__(self, store: TaskStore, session: ConsoleSession) -> None:
        self._store = store
        self._session = session

    async def open(self, mode: EditorMode) -> Task | None:
        """Show the dialog for the given mode.

        Returns:
            The created or updated task on Save. None on Cancel, or when
            the edited task was deleted while the dialog was open.
        """
        text = await self._session.input_dialog(
            title=dialog_title(mode),
            text=PLACEHOLDER,
            default=initial_text(mode),
        )
        if text is None:
            logger.debug("editor_cancelled", mode=type(mode).__name__)
            return None
        return self.submit(mode, text)

    def submit(self, mode: EditorMode, text: str) -> Task | None:
        """Apply dialog text to the store according to the mode."""
        if isinstance(mode, Creating):
            return self._store.create(text)
        if isinstance(mode, Editing):
            self._store.update(mode.task.id, text)
            return self._store.get(mode.task.id)
        raise TypeError(f"Unknown editor mode: {mode!r}")
