"""Render scopes with positional memoization.

A RenderScope owns a content function and re-runs it whenever a signal the
content read has changed. Each pass is tracked: the scope subscribes to
exactly the signals read in its most recent pass.

remember() stores values in the scope's slot table by call position. A
slot survives across passes while:
    - the same call site (the factory's code object) occupies the position
    - the keys passed alongside are equal, in order and number, to the
      keys of the previous pass

Otherwise the factory runs once more and its result replaces the slot.
dispose() ends the scope's identity epoch and drops every slot.

Thread Safety:
    A scope is not thread-safe. The host must serialize render passes of a
    given scope. The current-scope pointer is a ContextVar, so different
    threads or tasks may render different scopes concurrently.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from textresource.constants import MAX_RENDER_PASSES
from textresource.diagnostics import RenderLoopError
from textresource.reactive.signal import Signal, observing

if TYPE_CHECKING:
    from types import TracebackType

    from textresource.runtime.context import ResolutionContext

__all__ = ["RenderScope", "current_scope", "remember"]

logger = logging.getLogger(__name__)

_current_scope: ContextVar[RenderScope[Any] | None] = ContextVar(
    "textresource_render_scope", default=None
)


@dataclass(slots=True)
class _Slot:
    site: object
    keys: tuple[object, ...]
    value: object


class RenderScope[T]:
    """Re-runnable render function with memoized slots and an ambient context.

    Args:
        content: Function producing the rendered result; may call remember(),
            resolve_text() and read signals
        resolution_context: Ambient resolution context, either a plain
            context or a Signal shared with other scopes (e.g. one signal per
            window, updated on locale changes)
        scheduler: Called with the scope when it is invalidated. Without a
            scheduler the scope re-renders synchronously.
        name: Label for repr and logs

    Example:
        >>> locale_ctx = Signal(catalog.context("en"))
        >>> def greeting() -> str:
        ...     text = remember_descriptor(lambda: formatted("greeting", "Derek"))
        ...     return resolve_text(text)
        >>> scope = RenderScope(greeting, resolution_context=locale_ctx)
        >>> scope.render()
        'Hello, Derek'
        >>> locale_ctx.value = catalog.context("fr")
        >>> scope.result
        'Bonjour, Derek'
    """

    __slots__ = (
        "_ambient",
        "_content",
        "_cursor",
        "_dependencies",
        "_dirty",
        "_disposed",
        "_has_result",
        "_name",
        "_render_count",
        "_rendering",
        "_result",
        "_scheduler",
        "_slots",
    )

    def __init__(
        self,
        content: Callable[[], T],
        *,
        resolution_context: ResolutionContext | Signal[ResolutionContext | None] | None = None,
        scheduler: Callable[[RenderScope[T]], None] | None = None,
        name: str | None = None,
    ) -> None:
        self._content = content
        if isinstance(resolution_context, Signal):
            self._ambient: Signal[ResolutionContext | None] = resolution_context
        else:
            self._ambient = Signal(resolution_context, name="resolution_context")
        self._scheduler = scheduler
        self._name = name or getattr(content, "__qualname__", "scope")
        self._slots: list[_Slot] = []
        self._dependencies: dict[Signal[Any], None] = {}
        self._cursor = 0
        self._dirty = False
        self._disposed = False
        self._rendering = False
        self._render_count = 0
        self._has_result = False
        self._result: T | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def ambient(self) -> Signal[ResolutionContext | None]:
        """Signal holding the ambient resolution context."""
        return self._ambient

    @property
    def result(self) -> T:
        """Result of the last successful pass.

        Raises:
            RuntimeError: If the scope has not rendered successfully yet
        """
        if not self._has_result:
            msg = f"Render scope '{self._name}' has not rendered yet"
            raise RuntimeError(msg)
        return self._result  # type: ignore[return-value]

    @property
    def render_count(self) -> int:
        """Number of successful passes."""
        return self._render_count

    @property
    def is_dirty(self) -> bool:
        """True if invalidated since the last successful pass."""
        return self._dirty

    @property
    def is_disposed(self) -> bool:
        """True once dispose() has been called."""
        return self._disposed

    @property
    def dependencies(self) -> tuple[Signal[Any], ...]:
        """Signals the scope is currently subscribed to."""
        return tuple(self._dependencies)

    def provide(self, context: ResolutionContext | None) -> None:
        """Replace the ambient resolution context.

        Scopes that resolved text through resolve_text() are invalidated,
        including other scopes sharing the same ambient signal.
        """
        self._ambient.set(context)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> T:
        """Run the content and return its result.

        If the content invalidates this scope during the pass (it wrote a
        signal it read), the pass is repeated until it settles.

        Raises:
            RuntimeError: If the scope is disposed or already rendering
            RenderLoopError: If the content does not settle within
                MAX_RENDER_PASSES passes
            Exception: Anything raised by the content propagates unchanged;
                the scope stays dirty so render_if_dirty() retries
        """
        if self._disposed:
            msg = f"Render scope '{self._name}' has been disposed"
            raise RuntimeError(msg)
        if self._rendering:
            msg = f"Render scope '{self._name}' is already rendering"
            raise RuntimeError(msg)

        for _ in range(MAX_RENDER_PASSES):
            self._dirty = False
            try:
                result = self._run_pass()
            except BaseException:
                # The stored result is stale until a pass succeeds
                self._dirty = True
                raise
            if not self._dirty:
                return result
            logger.debug("Render scope '%s' invalidated during its own pass", self._name)
        raise RenderLoopError(MAX_RENDER_PASSES)

    def render_if_dirty(self) -> bool:
        """Render if invalidated since the last pass (for scheduler hosts).

        Returns:
            True if a render happened
        """
        if self._disposed or not self._dirty:
            return False
        self.render()
        return True

    def invalidate(self) -> None:
        """Mark the scope dirty and schedule or perform a re-render.

        Called by signals the scope depends on. During the scope's own pass
        the re-render is deferred to the end of the pass.
        """
        if self._disposed:
            return
        self._dirty = True
        if self._rendering:
            return
        if self._scheduler is not None:
            self._scheduler(self)
            return
        logger.debug("Re-rendering scope '%s'", self._name)
        self.render()

    def track(self, signal: Signal[Any]) -> None:
        """Record a signal read during the current pass."""
        if signal not in self._dependencies:
            self._dependencies[signal] = None
            signal.subscribe(self)

    def _run_pass(self) -> T:
        previous = self._dependencies
        self._dependencies = {}
        self._cursor = 0
        self._rendering = True
        token = _current_scope.set(self)
        try:
            with observing(self):
                result = self._content()
        except BaseException:
            # Stay subscribed to everything seen so far so a later change can retry
            for signal in previous:
                self.track(signal)
            raise
        finally:
            self._rendering = False
            _current_scope.reset(token)

        for signal in previous:
            if signal not in self._dependencies:
                signal.unsubscribe(self)
        del self._slots[self._cursor :]
        self._result = result
        self._has_result = True
        self._render_count += 1
        return result

    def _remember[V](self, factory: Callable[[], V], keys: tuple[object, ...]) -> V:
        index = self._cursor
        self._cursor += 1
        site = getattr(factory, "__code__", type(factory))

        if index < len(self._slots):
            slot = self._slots[index]
            if slot.site == site and slot.keys == keys:
                return slot.value  # type: ignore[return-value]

        value = factory()
        slot = _Slot(site, keys, value)
        if index < len(self._slots):
            self._slots[index] = slot
        else:
            self._slots.append(slot)
        return value

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def dispose(self) -> None:
        """End the scope's epoch: drop slots and subscriptions (idempotent)."""
        if self._disposed:
            return
        for signal in self._dependencies:
            signal.unsubscribe(self)
        self._dependencies = {}
        self._slots.clear()
        self._disposed = True
        logger.debug("Disposed render scope '%s'", self._name)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return (
            f"RenderScope(name='{self._name}', render_count={self._render_count}, "
            f"slots={len(self._slots)}, dirty={self._dirty}, disposed={self._disposed})"
        )


def current_scope() -> RenderScope[Any]:
    """Return the scope whose render pass is running.

    Raises:
        RuntimeError: If called outside a render pass
    """
    scope = _current_scope.get()
    if scope is None:
        msg = "No render scope is active; call this from content passed to RenderScope"
        raise RuntimeError(msg)
    return scope


def remember[V](factory: Callable[[], V], *keys: object) -> V:
    """Memoize factory's result in the current scope's slot table.

    The factory runs on the first pass and again only when keys change
    (compared by equality, order- and arity-sensitive), when a different
    call site takes this position, or after the scope is disposed.

    Exceptions raised by factory propagate to the caller of render(); the
    slot is left as it was.

    Example:
        >>> def content():
        ...     rows = remember(lambda: load_rows(user_id), user_id)
        ...     return len(rows)

    Raises:
        RuntimeError: If called outside a render pass
    """
    return current_scope()._remember(factory, keys)  # noqa: SLF001
