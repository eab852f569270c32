"""Configuration package for the interpreter path service."""

# Re-export enums
from interpreter_path.config.enums import ConfigurationTarget

# Re-export models
from interpreter_path.config.models import WorkspaceFolder, InspectResult, InterpreterConfigurationScope

# Re-export protocols
from interpreter_path.config.protocols import ConfigurationChangeEvent, ConfigurationSection, WorkspaceService

# Re-export settings files
from interpreter_path.config.settings_source import YAMLSettingsSource
from interpreter_path.config.resolver import SettingsResolver

# Re-export workspace
from interpreter_path.config.workspace import Workspace, SettingsLayer, SettingsChangeEvent

__all__ = [
    # Enums
    "ConfigurationTarget",
    # Models
    "WorkspaceFolder",
    "InspectResult",
    "InterpreterConfigurationScope",
    # Protocols
    "ConfigurationChangeEvent",
    "ConfigurationSection",
    "WorkspaceService",
    # Settings files
    "YAMLSettingsSource",
    "SettingsResolver",
    # Workspace
    "Workspace",
    "SettingsLayer",
    "SettingsChangeEvent",
]
