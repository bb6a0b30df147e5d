from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "tabbed-notepad"
LOGGER_NAME = "tabbed_notepad"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

NOTES_DIR_ENV = "TABBED_NOTEPAD_NOTES_DIR"
NOTES_DIR_NAME = "Notes"
NOTE_FILE_SUFFIX = ".json"

AUTOSAVE_INTERVAL_MS = 5000

TITLE_MAX_LEN = 40
DISPLAY_TITLE_MAX_LEN = 20

FONT_SIZE_MIN = 10
FONT_SIZE_MAX = 36
FONT_SIZE_DEFAULT = 16


def default_notes_dir() -> Path:
    """
    Env override first, then the platform app-data location Qt picks
    (needs QCoreApplication.applicationName set beforehand).
    """
    override = os.environ.get(NOTES_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()

    from PySide6.QtCore import QStandardPaths

    base = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if not base:
        base = str(Path.home() / f".{APP_NAME}")
    return Path(base) / NOTES_DIR_NAME
