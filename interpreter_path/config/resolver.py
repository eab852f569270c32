"""Settings file path resolution."""

from pathlib import Path

from interpreter_path.constants import FOLDER_SETTINGS_DIR, FOLDER_SETTINGS_NAMES


class SettingsResolver:
    """Resolve the settings file of a workspace folder.

    Resolution order (first match wins):
    1. ``.interpreter/settings.yaml`` inside the folder
    2. ``.interpreter/settings.yml`` inside the folder
    3. No file, the folder contributes no settings
    """

    def resolve(self, folder: Path) -> Path | None:
        """Resolve the settings file for ``folder``.

        Returns:
            Path to the settings file, or None if the folder has none
        """
        return self._find_in_directory(folder / FOLDER_SETTINGS_DIR)

    def _find_in_directory(self, directory: Path) -> Path | None:
        for name in FOLDER_SETTINGS_NAMES:
            settings_path = directory / name
            if settings_path.is_file():
                return settings_path
        return None

    @staticmethod
    def get_default_path(folder: Path) -> Path:
        """Return where a new settings file for ``folder`` would be created."""
        return folder / FOLDER_SETTINGS_DIR / FOLDER_SETTINGS_NAMES[0]
