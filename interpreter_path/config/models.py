"""Pydantic models for the interpreter path service."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from interpreter_path.config.enums import ConfigurationTarget


class WorkspaceFolder(BaseModel):
    """A root folder opened in the workspace."""

    model_config = ConfigDict(frozen=True)

    uri: Path = Field(..., description="Absolute path of the folder")
    name: str = ""
    index: int = Field(0, ge=0)

    @field_validator("uri", mode="before")
    @classmethod
    def absolute_uri(cls, value) -> Path:
        """Normalize the folder path to an absolute path."""
        return Path(value).expanduser().absolute()

    def contains(self, resource: Path) -> bool:
        """Return True if ``resource`` is the folder itself or lies inside it."""
        resource = Path(resource).expanduser().absolute()
        return resource == self.uri or self.uri in resource.parents


class InspectResult(BaseModel):
    """Per-scope values of a setting. Absent layers are ``None``."""

    model_config = ConfigDict(frozen=True)

    global_value: str | None = None
    workspace_value: str | None = None
    workspace_folder_value: str | None = None

    def effective_value(self) -> str | None:
        """Return the highest-precedence non-empty value, if any."""
        return self.workspace_folder_value or self.workspace_value or self.global_value

    def value_for(self, target: ConfigurationTarget) -> str | None:
        """Return the value stored at ``target``."""
        if target is ConfigurationTarget.WORKSPACE_FOLDER:
            return self.workspace_folder_value
        if target is ConfigurationTarget.WORKSPACE:
            return self.workspace_value
        return self.global_value


class InterpreterConfigurationScope(BaseModel):
    """Payload of an interpreter change notification."""

    model_config = ConfigDict(frozen=True)

    resource: Path | None = None
    config_target: ConfigurationTarget
