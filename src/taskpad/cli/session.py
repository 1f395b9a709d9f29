"""Terminal session: rich output plus prompt_toolkit input and dialogs.

ConsoleSession is the single object commands talk to for anything
user-visible. Tests swap the rich Console for a recording one and
replace the dialog coroutines with mocks.
"""

from __future__ import annotations

from typing import Any

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.shortcuts import input_dialog, yes_no_dialog
from rich.console import Console, RenderableType
from rich.markup import escape

# Role -> rich style for one-line messages
MESSAGE_STYLES: dict[str, str] = {
    "user": "cyan",
    "system": "dim italic",
    "error": "bold red",
    "warning": "yellow",
    "success": "green",
}


class ConsoleSession:
    """Output, line input and modal dialogs for the task app."""

    def __init__(
        self,
        console: Console | None = None,
        message: str = "todo> ",
        completer: Completer | None = None,
        status_text: str = "",
    ) -> None:
        self.console = console or Console(highlight=False)
        self.message = message
        self.completer = completer
        self.status_text = status_text
        # Created on first prompt; needs a real terminal
        self._prompt_session: PromptSession[str] | None = None

    # === Output ===

    def add_message(self, role: str, content: str) -> None:
        """Print a one-line message styled by role."""
        style = MESSAGE_STYLES.get(role, "")
        self.console.print(escape(content), style=style)

    def add_error(self, content: str) -> None:
        self.add_message("error", content)

    def add_warning(self, content: str) -> None:
        self.add_message("warning", content)

    def add_success(self, content: str) -> None:
        self.add_message("success", content)

    def add_rich(self, renderable: RenderableType) -> None:
        """Print any rich renderable (tables, panels)."""
        self.console.print(renderable)

    def clear(self) -> None:
        self.console.clear()

    # === Input ===

    async def prompt(self) -> str:
        """Read one line from the user.

        Raises:
            EOFError: On Ctrl-D.
            KeyboardInterrupt: On Ctrl-C.
        """
        if self._prompt_session is None:
            self._prompt_session = PromptSession(
                history=InMemoryHistory(),
                completer=self.completer,
                complete_while_typing=True,
            )
        return await self._prompt_session.prompt_async(
            self.message,
            bottom_toolbar=self.status_text or None,
        )

    async def input_dialog(self, title: str, text: str, default: str = "") -> str | None:
        """Show a modal text-entry dialog.

        Returns:
            The entered text on OK (possibly empty), None on Cancel.
        """
        dialog = input_dialog(
            title=title,
            text=text,
            ok_text="Save",
            cancel_text="Cancel",
            default=default,
        )
        return await dialog.run_async()

    async def yes_no_dialog(self, title: str, text: str) -> bool:
        """Show a modal yes/no dialog."""
        dialog = yes_no_dialog(title=title, text=text)
        result: Any = await dialog.run_async()
        return bool(result)

    def exit(self) -> None:
        """Abort a pending prompt, if any."""
        app = self._prompt_session.app if self._prompt_session else None
        if app is not None and app.is_running:
            app.exit(exception=EOFError())
