"""The taskpad terminal application.

TaskApp owns one TaskStore, keeps a TaskListView subscribed to it, and
turns each prompt line into either a new task (plain text) or a slash
command. The prompt loop ends on /exit or Ctrl+D; Ctrl+C only drops the
line being typed.
"""

from __future__ import annotations

from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from taskpad.cli.builtin_commands import ClearCommand, ExitCommand, HelpCommand, StatusCommand
from taskpad.cli.commands import CommandRegistry
from taskpad.cli.editor import TaskEditor
from taskpad.cli.session import ConsoleSession
from taskpad.cli.view import TaskListView
from taskpad.config import TaskpadSettings, get_settings
from taskpad.logging import Loggers, bind_context, configure_logging, unbind_context
from taskpad.tasks import TaskStore

logger = Loggers.cli()

STATUS_TEXT = "Enter: add task | /help: commands | Ctrl+D: exit"
TASK_COMMANDS_MODULE = "taskpad.cli.task_commands"


class SlashCommandCompleter(Completer):
    """Completes the command word of a line that starts with ``/``.

    Task text is free-form, so nothing is offered for plain input or
    once the command word is finished.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = sorted(names)

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        typed = document.text_before_cursor
        if not typed.startswith("/") or " " in typed:
            return
        prefix = typed[1:].lower()
        for name in self.names:
            if name.lower().startswith(prefix):
                yield Completion(f"/{name}", start_position=-len(typed))


class TaskApp:
    """Interactive to-do list bound to one TaskStore.

    Subclasses add commands by overriding register_commands().
    """

    def __init__(
        self,
        settings: TaskpadSettings | None = None,
        store: TaskStore | None = None,
        session: ConsoleSession | None = None,
    ) -> None:
        """Wire the store, commands, editor and view together.

        Args:
            settings: Defaults to get_settings()
            store: Tasks to show and edit; a new empty store when omitted
            session: Terminal I/O; a real console and prompt when omitted
        """
        self._settings = settings if settings is not None else get_settings()
        configure_logging(self._settings)

        self.store = store if store is not None else TaskStore(self._settings)

        self.command_registry = CommandRegistry()
        for command in (HelpCommand(), ClearCommand(), ExitCommand(), StatusCommand()):
            self.command_registry.register(command)
        self.command_registry.discover_commands(TASK_COMMANDS_MODULE)
        self.register_commands()

        if session is None:
            session = ConsoleSession(
                message=self._settings.prompt_message,
                completer=SlashCommandCompleter(self.command_registry.get_completions()),
                status_text=STATUS_TEXT,
            )
        self.session = session
        self.editor = TaskEditor(self.store, self.session)
        self.view = TaskListView(self.store, self.session, auto_render=self._settings.auto_render)
        self.should_exit = False

        logger.info(
            "app_initialized",
            app_name=self._settings.app_name,
            id_strategy=self._settings.id_strategy,
            tasks=len(self.store),
        )

    @property
    def settings(self) -> TaskpadSettings:
        return self._settings

    def register_commands(self) -> None:
        """Hook for subclasses; runs after the built-in and task commands."""

    def stop(self) -> None:
        """End the prompt loop after the current line."""
        self.should_exit = True
        self.session.exit()

    async def process_input(self, line: str) -> None:
        """Handle one prompt line. Blank lines are ignored."""
        line = line.strip()
        if not line:
            return
        if line.startswith("/"):
            await self._run_command(line)
        else:
            task = self.store.create(line)
            self.session.add_success(f"Added task {task.id}")

    async def _run_command(self, line: str) -> None:
        name, _, args = line[1:].partition(" ")
        command = self.command_registry.get(name)

        if command is None or not command.silent:
            self.session.add_message("user", line)
        if command is None:
            self.session.add_error(f"Unknown command: /{name}")
            self.session.add_message("system", "Type /help to see available commands")
            return

        bind_context(command=command.name)
        try:
            logger.debug("executing_command", args=args)
            await command.execute(args.strip(), self)
        except Exception as e:
            # A broken command reports and returns to the prompt
            logger.error("command_failed", error=str(e), exc_info=True)
            self.session.add_error(f"Error executing command: {e}")
        finally:
            unbind_context("command")

    async def run(self) -> None:
        """Prompt until /exit or end of input, redrawing the list on every change."""
        self.view.attach()
        logger.info("prompt_loop_started")
        try:
            while not self.should_exit:
                try:
                    line = await self.session.prompt()
                except KeyboardInterrupt:
                    continue
                except EOFError:
                    break
                await self.process_input(line)
        finally:
            self.view.detach()

        logger.info("prompt_loop_ended", tasks=len(self.store))
        self.session.add_message("system", "Goodbye!")
