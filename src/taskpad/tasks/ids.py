"""Task id issuers.

Ids must never repeat within a process, across every store in it, so the
counter issuer draws from one module-level sequence rather than per instance.
"""

import itertools
import threading
import uuid
from typing import Protocol

from taskpad.settings_mixins import ID_STRATEGIES

_counter = itertools.count(1)
_counter_lock = threading.Lock()


class IdIssuer(Protocol):
    """Callable returning a fresh task id."""

    def __call__(self) -> str: ...


def next_counter_id() -> str:
    """Issue the next id from the process-wide counter ("1", "2", ...)."""
    with _counter_lock:
        return str(next(_counter))


def next_uuid_id() -> str:
    """Issue a random 128-bit id as 32 hex characters."""
    return uuid.uuid4().hex


_ISSUERS: dict[str, IdIssuer] = {
    "counter": next_counter_id,
    "uuid": next_uuid_id,
}


def get_id_issuer(strategy: str = "counter") -> IdIssuer:
    """Look up the issuer for a configured id strategy.

    Args:
        strategy: One of ID_STRATEGIES.

    Returns:
        The issuer callable.

    Raises:
        ValueError: If the strategy is unknown.
    """
    try:
        return _ISSUERS[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown id strategy '{strategy}'. Expected one of: {', '.join(ID_STRATEGIES)}"
        ) from None
