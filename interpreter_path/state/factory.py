"""Persistent state handles over a key-value store."""

from typing import Any, Generic, TypeVar

from interpreter_path.state.protocols import StateStore


T = TypeVar("T")


class StoredValue(Generic[T]):
    """Handle to one key of a StateStore.

    Implements the PersistentState protocol. Reads go to the store each
    time, so two handles for the same key always agree.
    """

    def __init__(self, store: StateStore, key: str, default: T) -> None:
        self._store = store
        self.key = key
        self._default = default

    @property
    def value(self) -> T:
        return self._store.get(self.key, self._default)

    def update_value(self, value: T) -> None:
        self._store.update(self.key, value)


class StateFactory:
    """Create persistent state handles over a single store.

    Implements the PersistentStateFactory protocol.
    """

    def __init__(self, global_store: StateStore) -> None:
        self._global_store = global_store

    @property
    def global_store(self) -> StateStore:
        return self._global_store

    def create_global_persistent_state(self, key: str, default: Any = None) -> StoredValue[Any]:
        return StoredValue(self._global_store, key, default)
