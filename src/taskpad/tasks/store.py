"""In-memory task store.

TaskStore owns the ordered task collection. It is the only writer: every
change goes through create/update/delete, each of which swaps in a new
immutable snapshot and notifies subscribers with a StoreEvent.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Callable, Iterator

from taskpad.logging import Loggers
from taskpad.tasks.events import StoreEvent, StoreListener
from taskpad.tasks.ids import IdIssuer, get_id_issuer
from taskpad.tasks.models import EMPTY_COLLECTION, Task, TaskCollection

if TYPE_CHECKING:
    from taskpad.config import TaskpadSettings

logger = Loggers.store()


class TaskStore:
    """Ordered in-memory task collection with change notification.

    Update and delete of an unknown id are no-ops (the task may have been
    deleted while an edit dialog was open); they still notify subscribers.

    Example:
        >>> store = TaskStore(settings)
        >>> unsubscribe = store.subscribe(lambda event: render(event.snapshot))
        >>> task = store.create("Buy milk")
        >>> store.update(task.id, "Buy oat milk")
        True
        >>> store.delete(task.id)
        True
        >>> store.list()
        ()
    """

    def __init__(
        self,
        settings: TaskpadSettings | None = None,
        *,
        id_issuer: IdIssuer | None = None,
    ) -> None:
        strategy = settings.id_strategy if settings is not None else "counter"
        self._next_id = id_issuer or get_id_issuer(strategy)
        self._tasks: TaskCollection = EMPTY_COLLECTION
        self._listeners: list[StoreListener] = []
        # Reentrant so a listener may call back into the store
        self._lock = threading.RLock()

    # ---- mutations ----

    def create(self, text: str) -> Task:
        """Append a new task.

        Args:
            text: Display text. Empty and duplicate text are allowed.

        Returns:
            The created task with its freshly issued id.
        """
        with self._lock:
            task_id = self._next_id()
            if any(t.id == task_id for t in self._tasks):
                raise RuntimeError(f"Id issuer returned duplicate id {task_id!r}")
            task = Task(id=task_id, text=text)
            self._tasks = (*self._tasks, task)
            logger.debug("task_created", task_id=task_id, count=len(self._tasks))
            self._notify(StoreEvent.created(task_id, self._tasks))
        return task

    def update(self, task_id: str, new_text: str) -> bool:
        """Replace the text of the task with the given id.

        Position and id are kept; every other task stays the same object.

        Args:
            task_id: Id of the task to change.
            new_text: Replacement text.

        Returns:
            True if a task matched, False if the call was a no-op.
        """
        with self._lock:
            matched = False
            tasks: list[Task] = []
            for task in self._tasks:
                if task.id == task_id:
                    task = task.with_text(new_text)
                    matched = True
                tasks.append(task)
            if matched:
                self._tasks = tuple(tasks)
                logger.debug("task_updated", task_id=task_id)
            else:
                logger.debug("task_update_missed", task_id=task_id)
            self._notify(StoreEvent.updated(task_id, self._tasks, matched))
        return matched

    def delete(self, task_id: str) -> bool:
        """Remove the task with the given id, keeping the order of the rest.

        Args:
            task_id: Id of the task to remove.

        Returns:
            True if a task was removed, False if the call was a no-op.
        """
        with self._lock:
            remaining = tuple(t for t in self._tasks if t.id != task_id)
            matched = len(remaining) != len(self._tasks)
            if matched:
                self._tasks = remaining
                logger.debug("task_deleted", task_id=task_id, count=len(remaining))
            else:
                logger.debug("task_delete_missed", task_id=task_id)
            self._notify(StoreEvent.deleted(task_id, self._tasks, matched))
        return matched

    # ---- queries ----

    def list(self) -> TaskCollection:
        """Return the current snapshot in insertion order."""
        return self._tasks

    def get(self, task_id: str) -> Task | None:
        """Get a task by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def is_empty(self) -> bool:
        """Check if the store has any tasks."""
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- subscription ----

    def subscribe(self, listener: StoreListener, replay: bool = False) -> Callable[[], None]:
        """Register a listener called after every mutation.

        Args:
            listener: Called with a StoreEvent after each create/update/delete.
            replay: Deliver the current snapshot to the listener right away.

        Returns:
            A function that removes the listener. Calling it twice is harmless.
        """
        with self._lock:
            self._listeners.append(listener)
            if replay:
                self._deliver(listener, StoreEvent.current(self._tasks))

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            self._deliver(listener, event)

    @staticmethod
    def _deliver(listener: StoreListener, event: StoreEvent) -> None:
        # The mutation is already committed; one failing listener
        # must not starve the others.
        try:
            listener(event)
        except Exception:
            logger.error(
                "listener_failed",
                listener=getattr(listener, "__qualname__", repr(listener)),
                event_type=event.type.value,
                exc_info=True,
            )
