"""JSON file-backed key-value store."""

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from interpreter_path.exceptions import StateStoreError

logger = logging.getLogger(__name__)


class JsonStateStore:
    """Persist key-value pairs to a JSON file.

    Implements the StateStore protocol. The whole file is loaded lazily on
    first access and rewritten atomically on every update.

    Attributes:
        path: Location of the JSON file
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: JSON file location. It does not need to exist yet.
        """
        self.path = path
        self._data: dict[str, Any] | None = None

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def update(self, key: str, value: Any) -> None:
        """Write ``key``, or delete it when ``value`` is None.

        The cached contents change only after the file has been written.
        """
        data = dict(self._load())
        if value is None:
            if key not in data:
                return
            del data[key]
        else:
            data[key] = value
        self._write(data)
        self._data = data

    def keys(self) -> list[str]:
        return list(self._load())

    def _load(self) -> dict[str, Any]:
        """Read the backing file once and cache its contents.

        Raises:
            StateStoreError: If the file is unreadable, not JSON, or not an object
        """
        if self._data is not None:
            return self._data

        if not self.path.exists():
            logger.debug(f"State file {self.path} does not exist yet, starting empty")
            self._data = {}
            return self._data

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StateStoreError(
                f"Failed to parse state file {self.path} (line {e.lineno}, column {e.colno})",
                path=self.path,
            ) from e
        except OSError as e:
            raise StateStoreError(f"Cannot read state file {self.path}: {e}", path=self.path) from e

        if not isinstance(data, dict):
            raise StateStoreError(
                f"State file must contain a JSON object, got {type(data).__name__}",
                path=self.path,
            )
        self._data = data
        return self._data

    def _write(self, data: dict[str, Any]) -> None:
        """Write ``data`` atomically (temp file, then rename)."""
        json_content = json.dumps(data, indent=2, sort_keys=True)
        temp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=self.path.parent,
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as temp_file:
                temp_path = Path(temp_file.name)
                temp_file.write(json_content)
            temp_path.replace(self.path)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StateStoreError(f"Cannot write state file {self.path}: {e}", path=self.path) from e
        logger.debug(f"Wrote {len(data)} keys to {self.path}")
