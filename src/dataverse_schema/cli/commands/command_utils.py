"""utility functions for commands"""

import signal
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Optional

from loguru import logger
from rich.console import Console

console = Console()


def parse_entity_names(values: Optional[Iterable[str]]) -> list[str]:
    """Flatten repeated and comma-separated --entities values into logical names."""
    names: list[str] = []
    for value in values or []:
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return names


@contextmanager
def cancel_on_interrupt() -> Iterator[threading.Event]:
    """Yield an event that is set when the user presses Ctrl-C.

    Generation checks the event between entities, so an interrupt finishes the
    entity in progress and then stops cleanly instead of leaving a partial file.
    """
    cancel_event = threading.Event()

    def _handle_interrupt(signum, frame):  # pragma: no cover
        logger.warning("Interrupt received, cancelling after the current entity")
        cancel_event.set()

    if threading.current_thread() is not threading.main_thread():  # pragma: no cover
        yield cancel_event
        return

    previous = signal.signal(signal.SIGINT, _handle_interrupt)
    try:
        yield cancel_event
    finally:
        signal.signal(signal.SIGINT, previous)
