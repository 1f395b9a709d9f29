"""Entry point: python -m taskpad"""

import asyncio
import sys

from taskpad.cli.app import TaskApp
from taskpad.config import SettingsValidationError, get_settings, validate_settings


def main() -> int:
    settings = get_settings()
    try:
        validate_settings(settings)
    except SettingsValidationError as e:
        print(f"Invalid settings:\n{e}", file=sys.stderr)
        return 2

    app = TaskApp(settings)
    try:
        asyncio.run(app.run())
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
