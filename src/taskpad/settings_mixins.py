"""Field groups composed into TaskpadSettings.

AppSettingsMixin names the app and picks the task id policy;
CLISettingsMixin holds what the terminal surface and logging read.
"""

from typing import Literal

from pydantic import Field

IdStrategy = Literal["counter", "uuid"]
ID_STRATEGIES: tuple[str, ...] = ("counter", "uuid")


class AppSettingsMixin:
    """Identity and task id policy."""

    app_name: str = Field(
        default="taskpad",
        title="App Name",
        description="Application name, logged at startup",
    )

    id_strategy: IdStrategy = Field(
        default="counter",
        title="Id Strategy",
        description="How new task ids are issued (counter or uuid)",
    )


class CLISettingsMixin:
    """Rendering, confirmation, prompt and log output."""

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Lowest level written to stderr",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="console for people, json for log collectors",
    )

    auto_render: bool = Field(
        default=True,
        title="Auto Render",
        description="Redraw the task list after every change",
    )
    confirm_delete: bool = Field(
        default=False,
        title="Confirm Delete",
        description="Ask for confirmation before deleting a task",
    )
    prompt_message: str = Field(
        default="todo> ",
        title="Prompt",
        description="Prompt shown in front of the input line",
    )
