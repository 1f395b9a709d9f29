"""Commands that manage the session rather than tasks: help, clear, exit, status."""

from typing import Any

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskpad.cli.commands import Command, CommandCategory


def _boxed(body: RenderableType, title: str) -> Panel:
    return Panel(body, title=f"[bold]{title}[/bold]", border_style="cyan")


def _grid(*columns: str) -> Table:
    grid = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
    grid.add_column(columns[0], style="bold cyan", no_wrap=True)
    for name in columns[1:]:
        grid.add_column(name)
    return grid


class HelpCommand(Command):
    """/help lists every command; /help <name> shows usage and examples."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            description="List commands, or show details for one",
            aliases=["?"],
            usage="/help [command]",
            examples=["/help", "/help delete"],
            silent=True,
        )

    async def execute(self, args: str, app: Any) -> None:
        wanted = args.strip().lstrip("/")
        if not wanted:
            app.session.add_rich(_boxed(self._overview(app.command_registry), "Commands"))
            return

        command = app.command_registry.get(wanted)
        if command is None:
            app.session.add_error(f"Unknown command: /{wanted}")
        else:
            # Usage lines contain [text]; keep rich from reading them as markup
            app.session.add_rich(_boxed(Text(command.get_help()), f"/{command.name}"))

    @staticmethod
    def _overview(registry: Any) -> Table:
        grid = _grid("Command", "Aliases", "Description")
        for category in CommandCategory:
            for command in sorted(registry.by_category(category), key=lambda c: c.name):
                aliases = Text(" ".join(f"/{a}" for a in command.aliases), style="dim")
                grid.add_row(f"/{command.name}", aliases, command.description)
        return grid


class ClearCommand(Command):
    """Wipe the terminal; the next change redraws the list."""

    def __init__(self) -> None:
        super().__init__(name="clear", description="Clear the screen", silent=True)

    async def execute(self, args: str, app: Any) -> None:
        app.session.clear()


class ExitCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            name="exit",
            description="Leave taskpad (Ctrl+D works too)",
            aliases=["quit", "q"],
        )

    async def execute(self, args: str, app: Any) -> None:
        app.session.add_message("system", "Exiting...")
        app.stop()


class StatusCommand(Command):
    """Task count and the settings that change how tasks behave."""

    def __init__(self) -> None:
        super().__init__(
            name="status",
            description="Show task count and active settings",
            silent=True,
        )

    async def execute(self, args: str, app: Any) -> None:
        settings = app.settings
        grid = _grid("Setting", "Value")
        rows = {
            "Tasks": str(len(app.store)) if not app.store.is_empty() else "none",
            "Id Strategy": settings.id_strategy,
            "Auto Render": "on" if app.view.auto_render else "off",
            "Confirm Delete": "on" if settings.confirm_delete else "off",
            "Log Level": settings.log_level,
        }
        for key, value in rows.items():
            grid.add_row(key, value)
        app.session.add_rich(_boxed(grid, "Status"))
