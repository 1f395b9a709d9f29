"""Events delivered to TaskStore subscribers.

Every create/update/delete produces exactly one StoreEvent, including
update/delete calls that matched nothing, so the UI can always redraw
from ``event.snapshot``.

Example:
    def on_change(event: StoreEvent) -> None:
        if event.type == StoreEventType.DELETED and not event.matched:
            print(f"{event.task_id} was already gone")
        render(event.snapshot)

    unsubscribe = store.subscribe(on_change)
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable

from taskpad.tasks.models import TaskCollection


class StoreEventType(Enum):
    """Kinds of store mutation."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    # Initial delivery on subscribe(replay=True); no mutation happened
    SNAPSHOT = "snapshot"


@dataclass(frozen=True)
class StoreEvent:
    """Notification sent after a store operation.

    Attributes:
        type: The kind of operation
        snapshot: The collection after the operation
        task_id: Id the operation targeted (None for SNAPSHOT)
        matched: Whether a task with task_id existed (always True for CREATED)
        timestamp: When the event was produced
    """

    type: StoreEventType
    snapshot: TaskCollection
    task_id: str | None = None
    matched: bool = True
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def created(cls, task_id: str, snapshot: TaskCollection) -> "StoreEvent":
        return cls(type=StoreEventType.CREATED, snapshot=snapshot, task_id=task_id)

    @classmethod
    def updated(cls, task_id: str, snapshot: TaskCollection, matched: bool) -> "StoreEvent":
        return cls(
            type=StoreEventType.UPDATED,
            snapshot=snapshot,
            task_id=task_id,
            matched=matched,
        )

    @classmethod
    def deleted(cls, task_id: str, snapshot: TaskCollection, matched: bool) -> "StoreEvent":
        return cls(
            type=StoreEventType.DELETED,
            snapshot=snapshot,
            task_id=task_id,
            matched=matched,
        )

    @classmethod
    def current(cls, snapshot: TaskCollection) -> "StoreEvent":
        return cls(type=StoreEventType.SNAPSHOT, snapshot=snapshot)


StoreListener = Callable[[StoreEvent], None]
