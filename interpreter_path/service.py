"""Interpreter path resolution and persistence across configuration scopes."""

import logging
from pathlib import Path
from typing import Callable

from interpreter_path.config.enums import ConfigurationTarget
from interpreter_path.config.models import InspectResult, InterpreterConfigurationScope
from interpreter_path.config.protocols import ConfigurationChangeEvent, WorkspaceService
from interpreter_path.constants import (
    DEFAULT_INTERPRETER,
    DEFAULT_INTERPRETER_PATH_KEY,
    DEFAULT_INTERPRETER_PATH_SETTING,
    PYTHON_SECTION,
    WORKSPACE_FOLDER_KEY_PREFIX,
    WORKSPACE_KEY_PREFIX,
)
from interpreter_path.environment import get_ci_python_path, is_test_execution, norm_case
from interpreter_path.events import Disposable, DisposableRegistry, EventEmitter
from interpreter_path.state.protocols import PersistentState, PersistentStateFactory
from interpreter_path.types import Resource
from interpreter_path.variables import SystemVariables

logger = logging.getLogger(__name__)


def get_settings_uri_and_target(
        resource: Resource, workspace: WorkspaceService
) -> tuple[Path | None, ConfigurationTarget]:
    """Map a resource to the folder whose settings apply to it.

    Falls back to the first workspace folder when the resource is outside
    every folder (or absent). Without any folder the global scope applies.
    """
    folder = workspace.get_workspace_folder(resource) if resource is not None else None
    folder_uri = folder.uri if folder else None
    if folder_uri is None and workspace.workspace_folders:
        folder_uri = workspace.workspace_folders[0].uri
    target = ConfigurationTarget.WORKSPACE_FOLDER if folder_uri else ConfigurationTarget.GLOBAL
    return folder_uri, target


class InterpreterPathService:
    """Answer which interpreter path applies to a workspace resource.

    The global value lives in the host's user settings. Workspace and
    workspace-folder selections are persisted in the host's key-value store
    and take precedence over the host's own workspace settings.

    Resolution order is workspace folder, then workspace, then global, then
    the built-in default. Empty layers are skipped.

    Attributes:
        ci_python_path: Interpreter used as the default under test execution
    """

    def __init__(
            self,
            persistent_state_factory: PersistentStateFactory,
            workspace_service: WorkspaceService,
            disposables: DisposableRegistry | None = None,
            *,
            ci_python_path: str | None = None,
    ) -> None:
        """Initialize the service and subscribe to configuration changes.

        Args:
            persistent_state_factory: Factory for handles into the key-value store
            workspace_service: Host workspace and configuration API
            disposables: Registry receiving the configuration subscription
            ci_python_path: Override for the test-execution default interpreter
        """
        self._persistent_state_factory = persistent_state_factory
        self._workspace_service = workspace_service
        self._did_change_interpreter: EventEmitter[InterpreterConfigurationScope] = EventEmitter()
        self._disposables = disposables if disposables is not None else DisposableRegistry()
        self.ci_python_path = ci_python_path or get_ci_python_path()

        self._disposables.push(
            self._workspace_service.on_did_change_configuration(self.on_did_change_configuration)
        )

    @property
    def workspace_service(self) -> WorkspaceService:
        return self._workspace_service

    def on_did_change(self, listener: Callable[[InterpreterConfigurationScope], object]) -> Disposable:
        """Subscribe to interpreter path changes."""
        return self._did_change_interpreter.event(listener)

    def on_did_change_configuration(self, event: ConfigurationChangeEvent) -> None:
        """Forward host changes of the global setting as interpreter changes."""
        if event.affects_configuration(DEFAULT_INTERPRETER_PATH_KEY):
            logger.debug(f"{DEFAULT_INTERPRETER_PATH_KEY} changed in host configuration")
            self._did_change_interpreter.fire(
                InterpreterConfigurationScope(resource=None, config_target=ConfigurationTarget.GLOBAL)
            )

    def inspect(self, resource: Resource) -> InspectResult:
        """Return the per-scope interpreter paths applying to ``resource``.

        Persisted overrides take precedence over the host's workspace and
        folder values. The global value always comes from the host.
        """
        resource, _ = get_settings_uri_and_target(resource, self._workspace_service)
        workspace_folder_setting: PersistentState[str | None] | None = None
        workspace_setting: PersistentState[str | None] | None = None
        if resource is not None:
            workspace_folder_setting = self._persistent_state_factory.create_global_persistent_state(
                self.get_setting_key(resource, ConfigurationTarget.WORKSPACE_FOLDER), None
            )
            workspace_setting = self._persistent_state_factory.create_global_persistent_state(
                self.get_setting_key(resource, ConfigurationTarget.WORKSPACE), None
            )

        configuration = self._workspace_service.get_configuration(PYTHON_SECTION, resource)
        host = configuration.inspect(DEFAULT_INTERPRETER_PATH_SETTING) if configuration else None
        host = host or InspectResult()

        return InspectResult(
            global_value=host.global_value,
            workspace_folder_value=(
                (workspace_folder_setting.value if workspace_folder_setting else None)
                or host.workspace_folder_value
            ),
            workspace_value=(workspace_setting.value if workspace_setting else None) or host.workspace_value,
        )

    def get(self, resource: Resource) -> str:
        """Return the interpreter path for ``resource`` with variables expanded.

        Never returns None: without any setting the default interpreter applies.
        """
        value = self.inspect(resource).effective_value()
        if not value:
            value = self.ci_python_path if is_test_execution() else DEFAULT_INTERPRETER

        folder = self._workspace_service.get_workspace_folder(resource)
        system_variables = SystemVariables(
            None,
            folder.uri if folder else None,
            self._workspace_service,
        )
        return system_variables.resolve_any(value)

    def update(self, resource: Resource, config_target: ConfigurationTarget, python_path: str | None) -> None:
        """Store ``python_path`` at ``config_target``. ``None`` clears the scope.

        Global values are written to the host configuration, which reports
        the change through its own configuration event. Workspace and folder
        values go to the key-value store and fire a change notification when
        the stored value actually changes. Without a workspace, workspace and
        folder updates are skipped and logged.
        """
        resource, _ = get_settings_uri_and_target(resource, self._workspace_service)
        if config_target is ConfigurationTarget.GLOBAL:
            python_config = self._workspace_service.get_configuration(PYTHON_SECTION)
            inspected = python_config.inspect(DEFAULT_INTERPRETER_PATH_SETTING)
            global_value = inspected.global_value if inspected else None
            if global_value != python_path:
                python_config.update(DEFAULT_INTERPRETER_PATH_SETTING, python_path, ConfigurationTarget.GLOBAL)
            return

        if resource is None:
            logger.error("Cannot update workspace settings as no workspace is opened")
            return

        setting_key = self.get_setting_key(resource, config_target)
        persistent_setting = self._persistent_state_factory.create_global_persistent_state(setting_key, None)
        if persistent_setting.value != python_path:
            persistent_setting.update_value(python_path)
            logger.debug(f"Stored interpreter path under {setting_key}")
            self._did_change_interpreter.fire(
                InterpreterConfigurationScope(resource=resource, config_target=config_target)
            )

    def get_setting_key(self, resource: Path, config_target: ConfigurationTarget) -> str:
        """Derive the key-value store key for a workspace or folder scope.

        A workspace scope without a workspace file (single folder open) shares
        the folder's key.

        Raises:
            ValueError: If ``config_target`` is the global scope
        """
        if config_target is ConfigurationTarget.GLOBAL:
            raise ValueError("Global interpreter paths are not stored in the key-value store")

        folder_key = self._workspace_service.get_workspace_folder_identifier(resource)
        if config_target is ConfigurationTarget.WORKSPACE_FOLDER:
            return f"{WORKSPACE_FOLDER_KEY_PREFIX}{folder_key}"

        workspace_file = self._workspace_service.workspace_file
        if workspace_file is not None:
            return f"{WORKSPACE_KEY_PREFIX}{norm_case(workspace_file)}"
        return f"{WORKSPACE_FOLDER_KEY_PREFIX}{folder_key}"

    def dispose(self) -> None:
        """Release host subscriptions and drop all listeners."""
        self._disposables.dispose()
        self._did_change_interpreter.dispose()
