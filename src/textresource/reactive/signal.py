"""Observable values with automatic dependency tracking.

A Signal holds a value. Reading ``signal.value`` while an observer is
active (a RenderScope during its render pass) records a dependency edge;
assigning a different value invalidates every observer that read it.

Architecture:
    - The active observer is held in a ContextVar, so nested and concurrent
      renders each see their own observer
    - Dependency edges are established by reads, not by explicit callback
      registration

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol

__all__ = ["Observer", "Signal", "observing"]

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """Something that reads signals and wants to hear when they change."""

    def track(self, signal: Signal[object]) -> None:
        """Record that signal was read during the current pass."""
        ...

    def invalidate(self) -> None:
        """React to a change of a signal read earlier."""
        ...


_active_observer: ContextVar[Observer | None] = ContextVar(
    "textresource_active_observer", default=None
)


@contextmanager
def observing(observer: Observer | None) -> Iterator[None]:
    """Install observer as the active observer for the duration of the block.

    Passing None suspends tracking, e.g. for reads that must not subscribe.
    """
    token = _active_observer.set(observer)
    try:
        yield
    finally:
        _active_observer.reset(token)


class Signal[T]:
    """Observable value.

    Assignments of a value equal to the current one are ignored, so
    observers only re-run on real changes.

    Example:
        >>> locale = Signal("en")
        >>> locale.value
        'en'
        >>> locale.value = "fr"   # invalidates scopes that read it
        >>> locale.peek()
        'fr'
    """

    __slots__ = ("_name", "_observers", "_value")

    def __init__(self, value: T, *, name: str | None = None) -> None:
        """Initialize signal.

        Args:
            value: Initial value
            name: Optional label used in repr and logs
        """
        self._value = value
        self._name = name
        # dict as an insertion-ordered set: observers notified in subscription order
        self._observers: dict[Observer, None] = {}

    @property
    def value(self) -> T:
        """Current value; subscribes the active observer, if any."""
        observer = _active_observer.get()
        if observer is not None:
            observer.track(self)  # type: ignore[arg-type]
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    def peek(self) -> T:
        """Current value without subscribing."""
        return self._value

    def set(self, new_value: T) -> bool:
        """Replace the value and invalidate observers if it changed.

        Every observer is notified even if an earlier one raises while it
        reacts (for example a synchronous re-render that fails). The first
        such exception is re-raised once all observers have been notified;
        later ones are logged.

        Returns:
            True if the value changed
        """
        if new_value is self._value or new_value == self._value:
            return False
        self._value = new_value
        first_error: Exception | None = None
        for observer in list(self._observers):
            try:
                observer.invalidate()
            except Exception as e:
                if first_error is None:
                    first_error = e
                else:
                    logger.warning(
                        "Observer %r failed after signal %r changed",
                        observer,
                        self,
                        exc_info=True,
                    )
        if first_error is not None:
            raise first_error
        return True

    def subscribe(self, observer: Observer) -> None:
        """Add observer to the notification list (idempotent)."""
        self._observers[observer] = None

    def unsubscribe(self, observer: Observer) -> None:
        """Remove observer from the notification list (no-op if absent)."""
        self._observers.pop(observer, None)

    @property
    def observer_count(self) -> int:
        """Number of subscribed observers."""
        return len(self._observers)

    def __repr__(self) -> str:
        label = f"{self._name}=" if self._name else ""
        return f"Signal({label}{self._value!r})"
