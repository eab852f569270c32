"""Workspace model implementing the host configuration API."""

import copy
import logging
from pathlib import Path
from typing import Any, Callable, Iterable

from interpreter_path.config.enums import ConfigurationTarget
from interpreter_path.config.models import InspectResult, WorkspaceFolder
from interpreter_path.config.resolver import SettingsResolver
from interpreter_path.config.settings_source import YAMLSettingsSource
from interpreter_path.environment import norm_case
from interpreter_path.events import Disposable, EventEmitter
from interpreter_path.exceptions import SettingsFileError, WorkspaceError

logger = logging.getLogger(__name__)


def _lookup(data: dict[str, Any], key: str) -> Any:
    """Find ``key`` in ``data`` as a flat dotted key or a nested path."""
    if key in data:
        return data[key]
    node: Any = data
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def _assign(data: dict[str, Any], key: str, value: Any) -> None:
    """Set ``key`` in ``data``, keeping a flat dotted key flat. ``None`` removes."""
    if key in data:
        if value is None:
            del data[key]
        else:
            data[key] = value
        return

    *parents, leaf = key.split(".")
    node = data
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            if value is None:
                return
            child = node[part] = {}
        node = child
    if value is None:
        node.pop(leaf, None)
    else:
        node[leaf] = value


class SettingsLayer:
    """One scope's settings, optionally backed by a YAML file.

    Attributes:
        source: File the layer is saved to after every update, if any
        root_key: Key under which the settings live inside the file
    """

    def __init__(
            self,
            data: dict[str, Any] | None = None,
            *,
            source: YAMLSettingsSource | None = None,
            root_key: str | None = None,
    ) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self.source = source
        self.root_key = root_key

    @classmethod
    def from_file(cls, path: Path, *, root_key: str | None = None, must_exist: bool = False) -> "SettingsLayer":
        """Load a layer from a YAML file."""
        source = YAMLSettingsSource(path, must_exist=must_exist)
        document = source.load()
        data = document
        if root_key is not None:
            data = document.get(root_key) or {}
            if not isinstance(data, dict):
                raise SettingsFileError(
                    f"'{root_key}' must be a mapping, got {type(data).__name__}", path=path
                )
        logger.debug(f"Loaded settings layer from {source.source_description}")
        return cls(data, source=source, root_key=root_key)

    def get(self, key: str) -> Any:
        return _lookup(self._data, key)

    def set(self, key: str, value: Any) -> None:
        """Write ``key``, keeping the previous data if saving fails."""
        data = copy.deepcopy(self._data)
        _assign(data, key, value)
        if self.source is not None:
            self._save(data)
        self._data = data

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def _save(self, data: dict[str, Any]) -> None:
        if self.root_key is None:
            self.source.save(data)
            return
        document = self.source.load()
        document[self.root_key] = data
        self.source.save(document)


class SettingsChangeEvent:
    """Configuration change naming the dotted keys that were written.

    Implements the ConfigurationChangeEvent protocol.
    """

    def __init__(self, keys: Iterable[str], resource: Path | None = None) -> None:
        self.keys = frozenset(keys)
        self.resource = resource

    def affects_configuration(self, section: str) -> bool:
        for key in self.keys:
            if key == section or key.startswith(f"{section}.") or section.startswith(f"{key}."):
                return True
        return False

    def __repr__(self) -> str:
        return f"SettingsChangeEvent(keys={sorted(self.keys)!r})"


class WorkspaceConfiguration:
    """Settings of one section as seen from a workspace folder.

    Implements the ConfigurationSection protocol.
    """

    def __init__(self, workspace: "Workspace", section: str, folder: WorkspaceFolder | None) -> None:
        self._workspace = workspace
        self._section = section
        self._folder = folder

    def _full_key(self, key: str) -> str:
        return f"{self._section}.{key}" if self._section else key

    def get(self, key: str, default: Any = None) -> Any:
        full_key = self._full_key(key)
        for layer in self._workspace._layers_for(self._folder):
            value = layer.get(full_key)
            if value is not None:
                return value
        return default

    def inspect(self, key: str) -> InspectResult:
        full_key = self._full_key(key)
        folder_layer = self._workspace._folder_layer(self._folder)
        workspace_layer = self._workspace._workspace_layer()
        return InspectResult(
            global_value=_as_str(self._workspace.user_settings.get(full_key)),
            workspace_value=_as_str(workspace_layer.get(full_key)) if workspace_layer else None,
            workspace_folder_value=_as_str(folder_layer.get(full_key)) if folder_layer else None,
        )

    def update(self, key: str, value: Any, target: ConfigurationTarget) -> None:
        """Write ``value`` at ``target`` and notify configuration listeners.

        Raises:
            WorkspaceError: If the target scope does not exist in this workspace
        """
        full_key = self._full_key(key)
        if target is ConfigurationTarget.GLOBAL:
            layer = self._workspace.user_settings
        elif target is ConfigurationTarget.WORKSPACE:
            layer = self._workspace._workspace_layer()
            if layer is None:
                raise WorkspaceError("Cannot write workspace settings: no workspace is open")
        else:
            layer = self._workspace._folder_layer(self._folder)
            if layer is None:
                raise WorkspaceError("Cannot write folder settings: resource is not in a workspace folder")

        layer.set(full_key, value)
        logger.debug(f"Updated {full_key} at {target.value} scope")
        self._workspace._fire_change(SettingsChangeEvent([full_key], self._folder.uri if self._folder else None))


def _as_str(value: Any) -> str | None:
    return None if value is None else str(value)


class Workspace:
    """Folders and settings layers of an open workspace.

    Implements the WorkspaceService protocol. Settings are layered as
    user < workspace < folder. The workspace layer is the workspace file's
    ``settings`` mapping when a workspace file is open, otherwise the single
    open folder's settings.

    Attributes:
        user_settings: Global (user) settings layer
    """

    def __init__(
            self,
            folders: Iterable[Path | WorkspaceFolder] = (),
            *,
            workspace_file: Path | None = None,
            user_settings: SettingsLayer | None = None,
            workspace_settings: SettingsLayer | None = None,
            folder_settings: dict[Path, SettingsLayer] | None = None,
    ) -> None:
        """Initialize the workspace.

        Args:
            folders: Folder paths (or prepared WorkspaceFolder models) in index order
            workspace_file: Multi-root workspace file, if one is open
            user_settings: Global settings layer (empty if None)
            workspace_settings: Settings of the workspace file (empty if None)
            folder_settings: Settings layer per folder path (empty for missing folders)
        """
        self._folders: list[WorkspaceFolder] = []
        for index, folder in enumerate(folders):
            if isinstance(folder, WorkspaceFolder):
                folder = folder.model_copy(update={"index": index})
            else:
                folder = WorkspaceFolder(uri=folder, name=Path(folder).name, index=index)
            self._folders.append(folder)

        self._workspace_file = workspace_file.expanduser().absolute() if workspace_file else None
        self.user_settings = user_settings or SettingsLayer()
        self._workspace_settings = workspace_settings or (SettingsLayer() if workspace_file else None)

        normalized = {Path(p).expanduser().absolute(): layer for p, layer in (folder_settings or {}).items()}
        self._folder_settings: dict[Path, SettingsLayer] = {
            folder.uri: normalized.get(folder.uri) or SettingsLayer() for folder in self._folders
        }
        self._did_change_configuration: EventEmitter[SettingsChangeEvent] = EventEmitter()

    @classmethod
    def from_paths(
            cls,
            folders: Iterable[Path] = (),
            *,
            workspace_file: Path | None = None,
            user_settings_file: Path | None = None,
            resolver: SettingsResolver | None = None,
    ) -> "Workspace":
        """Open a workspace from disk, loading every settings file it can find.

        Folder settings are read from ``<folder>/.interpreter/settings.yaml``.
        A workspace file is a YAML mapping with optional ``folders`` (paths
        relative to the file) and ``settings`` sections.

        Raises:
            WorkspaceError: If a folder does not exist
            SettingsFileError: If a settings file cannot be parsed
        """
        resolver = resolver or SettingsResolver()
        folder_paths = [Path(p).expanduser().absolute() for p in folders]

        workspace_settings = None
        if workspace_file is not None:
            workspace_file = workspace_file.expanduser().absolute()
            document = YAMLSettingsSource(workspace_file).load()
            listed = document.get("folders") or []
            if not isinstance(listed, list):
                raise SettingsFileError(
                    f"'folders' must be a list, got {type(listed).__name__}", path=workspace_file
                )
            for entry in listed:
                raw = entry.get("path") if isinstance(entry, dict) else entry
                folder_path = (workspace_file.parent / str(raw)).resolve()
                if folder_path not in folder_paths:
                    folder_paths.append(folder_path)
            workspace_settings = SettingsLayer.from_file(workspace_file, root_key="settings", must_exist=True)

        folder_settings: dict[Path, SettingsLayer] = {}
        for folder_path in folder_paths:
            if not folder_path.is_dir():
                raise WorkspaceError(f"Workspace folder does not exist: {folder_path}")
            settings_path = resolver.resolve(folder_path) or SettingsResolver.get_default_path(folder_path)
            folder_settings[folder_path] = SettingsLayer.from_file(settings_path)

        user_settings = SettingsLayer.from_file(user_settings_file) if user_settings_file else None
        return cls(
            folder_paths,
            workspace_file=workspace_file,
            user_settings=user_settings,
            workspace_settings=workspace_settings,
            folder_settings=folder_settings,
        )

    @property
    def workspace_folders(self) -> list[WorkspaceFolder]:
        return list(self._folders)

    @property
    def workspace_file(self) -> Path | None:
        return self._workspace_file

    def get_workspace_folder(self, resource: Path | None) -> WorkspaceFolder | None:
        """Return the deepest folder containing ``resource``."""
        if resource is None:
            return None
        matches = [folder for folder in self._folders if folder.contains(resource)]
        if not matches:
            return None
        return max(matches, key=lambda folder: len(folder.uri.parts))

    def get_workspace_folder_identifier(self, resource: Path | None, default: str = "") -> str:
        folder = self.get_workspace_folder(resource)
        return norm_case(folder.uri) if folder else default

    def get_configuration(self, section: str, resource: Path | None = None) -> WorkspaceConfiguration:
        return WorkspaceConfiguration(self, section, self.get_workspace_folder(resource))

    def on_did_change_configuration(self, listener: Callable[[SettingsChangeEvent], object]) -> Disposable:
        return self._did_change_configuration.event(listener)

    def _fire_change(self, event: SettingsChangeEvent) -> None:
        logger.debug(f"Configuration changed: {event!r}")
        self._did_change_configuration.fire(event)

    def _workspace_layer(self) -> SettingsLayer | None:
        if self._workspace_settings is not None:
            return self._workspace_settings
        if len(self._folders) == 1:
            return self._folder_settings[self._folders[0].uri]
        return None

    def _folder_layer(self, folder: WorkspaceFolder | None) -> SettingsLayer | None:
        if folder is None:
            return None
        return self._folder_settings.get(folder.uri)

    def _layers_for(self, folder: WorkspaceFolder | None) -> list[SettingsLayer]:
        """Return the layers visible from ``folder``, highest precedence first."""
        layers: list[SettingsLayer] = []
        for layer in (self._folder_layer(folder), self._workspace_layer(), self.user_settings):
            if layer is not None and not any(layer is seen for seen in layers):
                layers.append(layer)
        return layers
