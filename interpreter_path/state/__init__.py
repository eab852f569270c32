"""Host key-value persistence for the interpreter path service."""
from interpreter_path.state.protocols import StateStore, PersistentState, PersistentStateFactory
from interpreter_path.state.memory import MemoryStateStore
from interpreter_path.state.json_store import JsonStateStore
from interpreter_path.state.factory import StateFactory, StoredValue

__all__ = [
    "StateStore",
    "PersistentState",
    "PersistentStateFactory",
    "MemoryStateStore",
    "JsonStateStore",
    "StateFactory",
    "StoredValue",
]
