"""Task value type and the snapshot type handed to the UI."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Task:
    """A single to-do entry.

    Tasks are immutable; TaskStore swaps in a copy when the text changes.
    """

    id: str
    text: str = ""

    def with_text(self, text: str) -> "Task":
        """Return a copy of this task carrying new text and the same id."""
        return replace(self, text=text)


# Ordered, immutable view of the store at one point in time
TaskCollection = tuple[Task, ...]

EMPTY_COLLECTION: TaskCollection = ()
