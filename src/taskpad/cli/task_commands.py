"""Task commands: add, edit, delete, list.

Tasks are referenced by their 1-based row in the current list, or by id
with a leading ``#`` (``/edit #7``). A bare number is always a row.
"""

from typing import Any

from taskpad.cli.commands import Command, CommandCategory
from taskpad.cli.editor import Creating, Editing
from taskpad.tasks import Task, TaskStore


def _is_row(ref: str) -> bool:
    # str.isdigit() also accepts superscripts, which int() rejects
    return ref.isascii() and ref.isdigit()


def resolve_task(store: TaskStore, ref: str) -> Task | None:
    """Find a task by row number or id.

    Args:
        store: Store to look in.
        ref: "3" (row 3), "#3" (id "3") or any other id such as a uuid.

    Returns:
        The task, or None if nothing matches.
    """
    ref = ref.strip()
    if ref.startswith("#"):
        return store.get(ref[1:]) if len(ref) > 1 else None
    if _is_row(ref):
        snapshot = store.list()
        row = int(ref)
        return snapshot[row - 1] if 1 <= row <= len(snapshot) else None
    return store.get(ref) if ref else None


def _report_missing(app: Any, ref: str) -> None:
    if app.store.is_empty():
        app.session.add_error(f"No task {ref}: the list is empty")
    elif _is_row(ref):
        app.session.add_error(
            f"No task {ref}: rows run 1-{len(app.store)}. Use #{ref} to look up an id"
        )
    else:
        app.session.add_error(f"No task {ref}")


def _split_ref(args: str) -> tuple[str, str]:
    parts = args.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


class AddCommand(Command):
    """Create a task, directly or through the dialog."""

    def __init__(self) -> None:
        super().__init__(
            name="add",
            description="Add a task (opens the editor when no text is given)",
            aliases=["new", "+"],
            usage="/add [text]",
            examples=["/add Buy milk", "/add"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        text = args.strip()
        if text:
            task = app.store.create(text)
        else:
            task = await app.editor.open(Creating())
            if task is None:
                app.session.add_message("system", "Cancelled.")
                return
        app.session.add_success(f"Added task {task.id}")


class EditCommand(Command):
    """Change a task's text."""

    def __init__(self) -> None:
        super().__init__(
            name="edit",
            description="Edit a task (opens the editor when no text is given)",
            aliases=["e"],
            usage="/edit <row|#id> [text]",
            examples=["/edit 1", "/edit 2 Walk the dog", "/edit #17 Call mom"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        ref, text = _split_ref(args)
        if not ref:
            app.session.add_error(f"Usage: {self.usage}")
            return

        task = resolve_task(app.store, ref)
        if task is None:
            _report_missing(app, ref)
            return

        if text:
            app.store.update(task.id, text)
            updated = app.store.get(task.id)
        else:
            updated = await app.editor.open(Editing(task))
            if updated is None:
                if app.store.get(task.id) is None:
                    app.session.add_warning(f"Task {task.id} no longer exists")
                else:
                    app.session.add_message("system", "Cancelled.")
                return

        if updated is None:
            app.session.add_warning(f"Task {task.id} no longer exists")
            return
        app.session.add_success(f"Updated task {updated.id}")


class DeleteCommand(Command):
    """Remove a task."""

    def __init__(self) -> None:
        super().__init__(
            name="delete",
            description="Delete a task",
            aliases=["del", "rm"],
            usage="/delete <row|#id> [--yes]",
            examples=["/delete 1", "/rm #17", "/delete 2 --yes"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        parsed = self.parse_args(args)
        ref = parsed.positional
        if not ref:
            app.session.add_error(f"Usage: {self.usage}")
            return

        task = resolve_task(app.store, ref)
        if task is None:
            _report_missing(app, ref)
            return

        if app.settings.confirm_delete and not parsed.has_flag("yes"):
            confirmed = await app.session.yes_no_dialog(
                title="Delete Task",
                text=f"Delete \"{task.text}\"?",
            )
            if not confirmed:
                app.session.add_message("system", "Kept.")
                return

        if app.store.delete(task.id):
            app.session.add_success(f"Deleted task {task.id}")
        else:
            app.session.add_warning(f"Task {task.id} was already deleted")


class ListCommand(Command):
    """Show all tasks."""

    def __init__(self) -> None:
        super().__init__(
            name="list",
            description="Show all tasks",
            aliases=["ls"],
            category=CommandCategory.TASKS,
            silent=True,
        )

    async def execute(self, args: str, app: Any) -> None:
        app.view.render()
