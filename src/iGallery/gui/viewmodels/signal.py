"""Pure Python signal system: no Qt dependency.

Provides ``Signal`` for observer-pattern callbacks and ``ObservableProperty``
for data-binding in ViewModels.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator

_logger = logging.getLogger(__name__)


class Signal:
    """Pure Python signal: does not depend on Qt.

    Meant to be used from the event-loop thread only, so no locking is done.
    Handlers are snapshotted before emission: connecting or disconnecting
    from inside a handler takes effect on the next ``emit``.  Exceptions
    raised by individual handlers are caught and logged so that one failing
    handler does not prevent subsequent handlers from executing.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable] = []
        self._blocked = False

    def connect(self, handler: Callable) -> Callable:
        if handler not in self._handlers:
            self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Callable) -> None:
        self._handlers.remove(handler)

    def disconnect_all(self) -> None:
        self._handlers.clear()

    def emit(self, *args: Any, **kwargs: Any) -> None:
        if self._blocked:
            return
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception as exc:
                _logger.error("Signal handler %r failed: %s", handler, exc)

    @contextmanager
    def blocked(self) -> Iterator[None]:
        """Suppress emissions for the duration of the ``with`` block."""
        previous = self._blocked
        self._blocked = True
        try:
            yield
        finally:
            self._blocked = previous

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty:
    """Observable property: ViewModel data-binding foundation.

    Emits ``changed(new_value, old_value)`` whenever the value is set to
    something that compares unequal to the current one.
    """

    def __init__(self, initial_value: Any = None) -> None:
        self._initial = initial_value
        self._value = initial_value
        self.changed = Signal()

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value != new_value:
            old_value = self._value
            self._value = new_value
            self.changed.emit(new_value, old_value)

    def reset(self) -> None:
        """Restore the value given at construction time."""
        self.value = self._initial
