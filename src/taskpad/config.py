"""Settings for taskpad.

Values are read from these sources, highest priority first:

1. Keyword arguments to TaskpadSettings
2. TASKPAD_* environment variables (TASKPAD_CONFIRM_DELETE=true)
3. ./.taskpad/settings.json, for one project directory
4. ~/.taskpad/settings.json, for the user
5. A .env file in the working directory
6. Field defaults from settings_mixins

TaskApp takes its settings as an argument. get_settings() serves the entry
point and code running inside a SettingsContext.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Iterator

from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from taskpad.settings_mixins import ID_STRATEGIES, AppSettingsMixin, CLISettingsMixin

__all__ = [
    "TaskpadSettings",
    "SettingsContext",
    "SettingsValidationError",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "get_context_settings",
    "validate_settings",
    "reload_settings",
    "settings_files",
]

CONFIG_DIR = ".taskpad"
SETTINGS_FILE = "settings.json"


def settings_files() -> list[Path]:
    """JSON settings locations, project before user, without duplicates."""
    candidates = [Path.cwd() / CONFIG_DIR / SETTINGS_FILE, Path.home() / CONFIG_DIR / SETTINGS_FILE]
    return list(dict.fromkeys(path.resolve() for path in candidates))


class TaskpadSettings(AppSettingsMixin, CLISettingsMixin, BaseSettings):
    """Every taskpad setting; the fields are declared on the mixins."""

    model_config = SettingsConfigDict(
        env_prefix="TASKPAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Missing JSON files are skipped rather than treated as empty
        json_sources = [
            JsonConfigSettingsSource(settings_cls, json_file=path)
            for path in settings_files()
            if path.is_file()
        ]
        return (init_settings, env_settings, *json_sources, dotenv_settings)


_scoped: ContextVar[TaskpadSettings | None] = ContextVar("taskpad_settings", default=None)
_process_settings: TaskpadSettings | None = None


def get_settings() -> TaskpadSettings:
    """Settings scoped to the current context, else the process-wide instance.

    The process-wide instance is read from the sources on first use.
    """
    scoped = _scoped.get()
    if scoped is not None:
        return scoped

    global _process_settings
    if _process_settings is None:
        _process_settings = TaskpadSettings()
    return _process_settings


def set_settings(settings: TaskpadSettings) -> None:
    """Replace the process-wide instance."""
    global _process_settings
    _process_settings = settings


def set_context_settings(settings: TaskpadSettings | None) -> Token:
    """Scope settings to the current context.

    Returns:
        Token for ``ContextVar.reset`` to restore the previous value.
    """
    return _scoped.set(settings)


def get_context_settings() -> TaskpadSettings | None:
    return _scoped.get()


@contextmanager
def SettingsContext(settings: TaskpadSettings) -> Iterator[TaskpadSettings]:
    """Make get_settings() return ``settings`` inside a with block."""
    token = _scoped.set(settings)
    try:
        yield settings
    finally:
        _scoped.reset(token)


def reload_settings() -> TaskpadSettings:
    """Forget cached and scoped settings and read the sources again."""
    global _process_settings
    _process_settings = None
    _scoped.set(None)
    return get_settings()


class SettingsValidationError(Exception):
    """Settings the app cannot start with; the message lists each problem."""


def validate_settings(settings: TaskpadSettings) -> None:
    """Check what field validation does not.

    Pydantic validates on construction only, so a value assigned later
    can still hold an unknown id strategy. A prompt of only whitespace
    passes the type check but leaves the input line unmarked.

    Raises:
        SettingsValidationError: One line per problem found.
    """
    problems: list[str] = []

    if settings.id_strategy not in ID_STRATEGIES:
        problems.append(
            f"Unknown id strategy '{settings.id_strategy}'. "
            f"Expected one of: {', '.join(ID_STRATEGIES)}"
        )
    if not settings.prompt_message.strip():
        problems.append("Prompt message must not be blank.")

    if problems:
        raise SettingsValidationError("\n".join(problems))
