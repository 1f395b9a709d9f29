"""Task management for taskpad.

The TaskStore owns the ordered, in-memory task collection and is the only
component allowed to change it. Consumers read immutable snapshots and
subscribe to StoreEvents to learn about changes.

Example:
    store = TaskStore(settings)
    unsubscribe = store.subscribe(lambda event: print(len(event.snapshot)))
    task = store.create("Walk dog")  # prints 1
"""

from taskpad.tasks.events import StoreEvent, StoreEventType, StoreListener
from taskpad.tasks.ids import IdIssuer, get_id_issuer, next_counter_id, next_uuid_id
from taskpad.tasks.models import EMPTY_COLLECTION, Task, TaskCollection
from taskpad.tasks.store import TaskStore

__all__ = [
    "EMPTY_COLLECTION",
    "IdIssuer",
    "StoreEvent",
    "StoreEventType",
    "StoreListener",
    "Task",
    "TaskCollection",
    "TaskStore",
    "get_id_issuer",
    "next_counter_id",
    "next_uuid_id",
]
