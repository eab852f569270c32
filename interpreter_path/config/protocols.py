"""Protocol definitions for the host configuration API."""

from pathlib import Path
from typing import Any, Callable, Protocol, runtime_checkable

from interpreter_path.config.enums import ConfigurationTarget
from interpreter_path.config.models import InspectResult, WorkspaceFolder
from interpreter_path.events import Disposable


@runtime_checkable
class ConfigurationChangeEvent(Protocol):
    """Describes which settings a configuration change touched."""

    def affects_configuration(self, section: str) -> bool:
        """Return True if ``section`` (e.g. ``python.defaultInterpreterPath``) changed."""
        ...


@runtime_checkable
class ConfigurationSection(Protocol):
    """Settings of one section (e.g. ``python``) as seen from a resource."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the effective value of ``key``."""
        ...

    def inspect(self, key: str) -> InspectResult | None:
        """Return the per-scope values of ``key``."""
        ...

    def update(self, key: str, value: Any, target: ConfigurationTarget) -> None:
        """Write ``value`` for ``key`` at ``target``. ``None`` removes it."""
        ...


@runtime_checkable
class WorkspaceService(Protocol):
    """Host workspace and configuration API.

    The interpreter path service depends on this abstraction rather than a
    concrete host. Workspace is the implementation shipped with this package.
    """

    @property
    def workspace_folders(self) -> list[WorkspaceFolder]:
        """Folders opened in the workspace, in index order."""
        ...

    @property
    def workspace_file(self) -> Path | None:
        """The multi-root workspace file, if one is open."""
        ...

    def get_workspace_folder(self, resource: Path | None) -> WorkspaceFolder | None:
        """Return the folder containing ``resource``."""
        ...

    def get_workspace_folder_identifier(self, resource: Path | None, default: str = "") -> str:
        """Return a stable identifier for the folder containing ``resource``."""
        ...

    def get_configuration(self, section: str, resource: Path | None = None) -> ConfigurationSection:
        """Return the settings of ``section`` scoped to ``resource``."""
        ...

    def on_did_change_configuration(
            self, listener: Callable[[ConfigurationChangeEvent], object]
    ) -> Disposable:
        """Subscribe to configuration changes."""
        ...
