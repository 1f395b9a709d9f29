"""Shared test fixtures and utilities for taskpad tests.

Provides:
- MockContext for isolating tests from global settings and config files
- A recording ConsoleSession whose dialogs are AsyncMocks
- Store and app fixtures wired to both
"""

import io
import os
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from taskpad.cli.app import TaskApp
from taskpad.cli.session import ConsoleSession
from taskpad.config import (
    TaskpadSettings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from taskpad.tasks import TaskStore


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Clearing TASKPAD_* environment variables
    - Pointing cwd and HOME at a temporary directory so no JSON
      settings file is picked up
    - Resetting the global settings singleton on exit

    Usage:
        with MockContext(tmp_path, confirm_delete=True) as ctx:
            settings = ctx.settings
    """

    def __init__(self, root: Path, **settings_kwargs):
        self._root = root
        self._settings_kwargs = settings_kwargs
        self._settings: TaskpadSettings | None = None
        self._env_patch = None
        self._cwd: str | None = None

    def __enter__(self) -> "MockContext":
        env = {k: v for k, v in os.environ.items() if not k.startswith("TASKPAD_")}
        env["HOME"] = str(self._root)
        self._env_patch = patch.dict(os.environ, env, clear=True)
        self._env_patch.start()
        self._cwd = os.getcwd()
        os.chdir(self._root)

        self._settings = TaskpadSettings(_env_file=None, **self._settings_kwargs)
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)
        if self._cwd is not None:
            os.chdir(self._cwd)
        if self._env_patch is not None:
            self._env_patch.stop()
        reload_settings()

    @property
    def settings(self) -> TaskpadSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings


def make_session() -> ConsoleSession:
    """ConsoleSession that records output and never touches the terminal."""
    console = Console(
        file=io.StringIO(),
        record=True,
        width=100,
        color_system=None,
        force_terminal=False,
    )
    session = ConsoleSession(console=console)
    session.input_dialog = AsyncMock(return_value=None)
    session.yes_no_dialog = AsyncMock(return_value=True)
    session.exit = lambda: None
    return session


def output_of(session: ConsoleSession) -> str:
    """Return and clear everything printed to the session so far."""
    return session.console.export_text(clear=True)


@pytest.fixture
def mock_context(tmp_path: Path) -> Generator[MockContext, None, None]:
    """Fixture providing an isolated settings context."""
    with MockContext(tmp_path) as ctx:
        yield ctx


@pytest.fixture
def settings(mock_context: MockContext) -> TaskpadSettings:
    return mock_context.settings


@pytest.fixture
def store(settings: TaskpadSettings) -> TaskStore:
    return TaskStore(settings)


@pytest.fixture
def session() -> ConsoleSession:
    return make_session()


@pytest.fixture
def app(settings: TaskpadSettings, store: TaskStore, session: ConsoleSession) -> TaskApp:
    return TaskApp(settings, store=store, session=session)
