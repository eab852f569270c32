"""Protocols for the host key-value persistence API."""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class StateStore(Protocol):
    """Opaque key-value storage owned by the host.

    Implementations include:
    - MemoryStateStore: process-local dictionary
    - JsonStateStore: JSON file on disk
    """

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key`` or ``default``."""
        ...

    def update(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``. ``None`` removes the key."""
        ...

    def keys(self) -> list[str]:
        """Return all stored keys."""
        ...


@runtime_checkable
class PersistentState(Protocol[T]):
    """Handle to a single persisted value."""

    @property
    def value(self) -> T:
        """Current value, or the handle's default when unset."""
        ...

    def update_value(self, value: T) -> None:
        """Persist a new value."""
        ...


@runtime_checkable
class PersistentStateFactory(Protocol):
    """Create handles to persisted values."""

    def create_global_persistent_state(self, key: str, default: T) -> PersistentState[T]:
        """Return a handle to the global value stored under ``key``."""
        ...
