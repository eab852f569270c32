"""In-process publish/subscribe channel."""

import logging
from typing import Callable, Generic, Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Disposable:
    """Handle that releases a resource when disposed.

    Disposing more than once is a no-op.
    """

    def __init__(self, on_dispose: Callable[[], None] | None = None) -> None:
        self._on_dispose = on_dispose

    @property
    def is_disposed(self) -> bool:
        return self._on_dispose is None

    def dispose(self) -> None:
        """Release the resource."""
        callback, self._on_dispose = self._on_dispose, None
        if callback is not None:
            callback()


class DisposableRegistry:
    """Collection of disposables released together."""

    def __init__(self, disposables: Iterable[Disposable] = ()) -> None:
        self._disposables: list[Disposable] = list(disposables)

    def __len__(self) -> int:
        return len(self._disposables)

    def push(self, disposable: Disposable) -> Disposable:
        self._disposables.append(disposable)
        return disposable

    def dispose(self) -> None:
        """Dispose every registered item, most recent first."""
        while self._disposables:
            self._disposables.pop().dispose()


class EventEmitter(Generic[T]):
    """Deliver payloads to subscribed listeners in subscription order.

    A listener that raises is logged and skipped; remaining listeners still
    receive the payload.
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[[T], object]] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def event(self, listener: Callable[[T], object]) -> Disposable:
        """Subscribe ``listener`` and return a handle that unsubscribes it."""
        self._listeners.append(listener)
        return Disposable(lambda: self._remove(listener))

    def fire(self, payload: T) -> None:
        """Deliver ``payload`` to every listener."""
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception(f"Event listener {listener!r} failed")

    def dispose(self) -> None:
        """Drop all listeners."""
        self._listeners.clear()

    def _remove(self, listener: Callable[[T], object]) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass
