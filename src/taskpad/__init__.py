"""taskpad - a single-screen to-do list for the terminal.

This package provides:

- TaskStore: the in-memory, ordered task collection and its change events
- TaskApp: the interactive terminal UI (rich output, prompt_toolkit input
  and dialogs) that renders the store and forwards user actions to it
- Layered settings (pydantic-settings) and structured logging (structlog)

Example:
    from taskpad import TaskApp, TaskStore, get_settings

    settings = get_settings()
    store = TaskStore(settings)
    store.create("Buy milk")
    asyncio.run(TaskApp(settings, store=store).run())
"""

from taskpad.cli.app import TaskApp
from taskpad.cli.commands import Command, CommandRegistry
from taskpad.cli.editor import Creating, Editing, EditorMode
from taskpad.config import (
    TaskpadSettings,
    SettingsContext,
    SettingsValidationError,
    get_settings,
    set_settings,
    set_context_settings,
    get_context_settings,
    validate_settings,
    reload_settings,
)
from taskpad.tasks import StoreEvent, StoreEventType, Task, TaskCollection, TaskStore

__all__ = [
    # CLI
    "TaskApp",
    "Command",
    "CommandRegistry",
    "Creating",
    "Editing",
    "EditorMode",
    # Tasks
    "Task",
    "TaskCollection",
    "TaskStore",
    "StoreEvent",
    "StoreEventType",
    # Settings
    "TaskpadSettings",
    "SettingsContext",
    "SettingsValidationError",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "get_context_settings",
    "validate_settings",
    "reload_settings",
]

__version__ = "0.1.0"
