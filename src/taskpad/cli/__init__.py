"""Terminal UI for taskpad."""

from taskpad.cli.commands import (
    Command,
    CommandCategory,
    CommandRegistry,
    ParsedArgs,
)
from taskpad.cli.app import SlashCommandCompleter, TaskApp
from taskpad.cli.editor import Creating, Editing, EditorMode, TaskEditor
from taskpad.cli.session import ConsoleSession
from taskpad.cli.view import TaskListView, render_tasks

__all__ = [
    "Command",
    "CommandCategory",
    "CommandRegistry",
    "ConsoleSession",
    "Creating",
    "Editing",
    "EditorMode",
    "ParsedArgs",
    "SlashCommandCompleter",
    "TaskApp",
    "TaskEditor",
    "TaskListView",
    "render_tasks",
]
