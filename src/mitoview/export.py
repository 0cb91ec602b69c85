"""Export of settings as a downloadable JSON file."""

import json
from pathlib import Path

from mitoview.constants import SETTINGS_EXPORT_FILENAME
from mitoview.models.settings import Settings


def export_settings(settings: Settings, directory: str | Path = ".") -> Path:
    """Write the full settings to ``mitoSettings.json``, pretty-printed.

    Args:
        settings: Settings to export
        directory: Destination directory, created if missing

    Returns:
        Path of the written file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / SETTINGS_EXPORT_FILENAME

    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings.to_json_dict(), f, indent=2)

    return path
