"""Slash commands: the base class, argument splitting and the registry.

A command is a named coroutine that receives the raw argument text and the
running TaskApp. Task commands live in ``taskpad.cli.task_commands`` and are
picked up by ``CommandRegistry.discover_commands``; a new one only needs a
zero-argument constructor:

    class CountCommand(Command):
        def __init__(self):
            super().__init__(name="count", description="Show the number of tasks",
                             category=CommandCategory.TASKS)

        async def execute(self, args, app):
            app.session.add_message("system", f"{len(app.store)} tasks")
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import importlib
import inspect
import re

from taskpad.logging import Loggers

logger = Loggers.cli()

# A double- or single-quoted run, or any run of non-space characters
_TOKEN = re.compile(r'"[^"]*"|\'[^\']*\'|\S+')


class CommandCategory(Enum):
    """Groups shown as sections in /help."""

    GENERAL = "general"
    TASKS = "tasks"


@dataclass
class ParsedArgs:
    """Arguments split into a task reference or text, and ``--`` switches."""

    positional: str
    flags: set[str] = field(default_factory=set)

    def has_flag(self, name: str) -> bool:
        return name in self.flags


class Command(ABC):
    """A slash command such as ``/add`` or ``/delete``."""

    def __init__(
        self,
        name: str,
        description: str,
        aliases: list[str] | None = None,
        usage: str | None = None,
        examples: list[str] | None = None,
        category: CommandCategory = CommandCategory.GENERAL,
        silent: bool = False,
    ) -> None:
        """Describe the command for the registry and /help.

        Args:
            name: Typed as /name
            description: One line for the /help table
            aliases: Other names that reach the same command
            usage: Syntax line, "/name" when omitted
            examples: Sample invocations for /help <name>
            category: /help section
            silent: Skip echoing the input line before running
        """
        self.name = name
        self.description = description
        self.aliases = aliases or []
        self.usage = usage or f"/{name}"
        self.examples = examples or []
        self.category = category
        self.silent = silent

    @abstractmethod
    async def execute(self, args: str, app: Any) -> None:
        """Run with everything typed after the command name."""

    def parse_args(self, args: str) -> ParsedArgs:
        """Split out ``--flag`` switches.

        A switch never consumes the following word, so ``--yes 2`` keeps
        ``2`` as the reference. Quotes group words and are removed.
        """
        flags: set[str] = set()
        words: list[str] = []

        for token in _TOKEN.findall(args):
            if token[0] in "\"'" and len(token) >= 2 and token[-1] == token[0]:
                words.append(token[1:-1])
            elif token.startswith("--") and len(token) > 2:
                flags.add(token[2:])
            else:
                words.append(token)

        return ParsedArgs(positional=" ".join(words), flags=flags)

    def get_help(self) -> str:
        """Plain-text help shown by /help <name>."""
        lines = [f"/{self.name}", f"  {self.description}", "", f"Usage: {self.usage}"]
        if self.aliases:
            lines.append("Aliases: " + ", ".join(f"/{a}" for a in self.aliases))
        if self.examples:
            lines += ["", "Examples:", *(f"  {e}" for e in self.examples)]
        return "\n".join(lines)


class CommandRegistry:
    """Maps command names and aliases to commands."""

    def __init__(self) -> None:
        self._by_name: dict[str, Command] = {}
        self._sections: dict[CommandCategory, list[Command]] = {c: [] for c in CommandCategory}

    def register(self, command: Command) -> None:
        """Add a command; a later command with the same name replaces the earlier one."""
        previous = self._by_name.get(command.name)
        if previous is not None and previous.name == command.name and previous is not command:
            self._sections[previous.category].remove(previous)
            for alias in previous.aliases:
                self._by_name.pop(alias, None)

        self._by_name[command.name] = command
        for alias in command.aliases:
            self._by_name[alias] = command
        if command not in self._sections[command.category]:
            self._sections[command.category].append(command)

    def get(self, name: str) -> Command | None:
        return self._by_name.get(name)

    def by_category(self, category: CommandCategory) -> list[Command]:
        return list(self._sections[category])

    def get_completions(self) -> list[str]:
        """Names and aliases, for the prompt completer."""
        return list(self._by_name)

    def discover_commands(self, module_path: str) -> list[Command]:
        """Instantiate and register every concrete Command defined in a module.

        Classes imported into the module are ignored. Raises ImportError
        when the module does not exist.
        """
        module = importlib.import_module(module_path)

        found: list[Command] = []
        for class_name, cls in inspect.getmembers(module, inspect.isclass):
            if (
                not issubclass(cls, Command)
                or cls.__module__ != module.__name__
                or inspect.isabstract(cls)
            ):
                continue
            try:
                command = cls()
            except TypeError:
                logger.debug("command_discovery_skipped", command_class=class_name)
                continue
            self.register(command)
            found.append(command)

        logger.debug("commands_discovered", module=module_path, count=len(found))
        return found
