from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6.QtCore import QByteArray, QSettings

from tabbed_notepad.core.text import clamp_font_size
from tabbed_notepad.settings import APP_NAME, FONT_SIZE_DEFAULT

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingsKeys:
    SELECTED_NOTE: str = "session/selected_note_id"
    FONT_SIZE: str = "editor/font_size"
    UI_GEOMETRY: str = "ui/geometry"


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int(settings: QSettings, key: str, default: int) -> int:
    try:
        return int(float(settings.value(key, default)))
    except Exception:
        return default


def safe_set_setting(settings: QSettings, key: str, value) -> None:
    """Best-effort write; a broken settings backend must not take the UI down."""
    try:
        settings.setValue(key, value)
    except Exception:
        log.exception("Failed to write setting %s", key)


class Preferences:
    """
    Small persisted scalars kept outside the notes directory:
    last selected note id, editor font size, window geometry.
    """

    def __init__(self, settings: QSettings | None = None):
        self._settings = settings if settings is not None else QSettings(APP_NAME, APP_NAME)

    # ───────────────────────── selection ─────────────────────────

    def last_selected_id(self) -> str | None:
        value = get_str(self._settings, SettingsKeys.SELECTED_NOTE, "").strip()
        return value or None

    def set_last_selected_id(self, note_id: str | None) -> None:
        if not note_id:
            try:
                self._settings.remove(SettingsKeys.SELECTED_NOTE)
            except Exception:
                log.exception("Failed to clear setting %s", SettingsKeys.SELECTED_NOTE)
            return
        safe_set_setting(self._settings, SettingsKeys.SELECTED_NOTE, str(note_id))

    # ───────────────────────── font size ─────────────────────────

    def font_size(self) -> int:
        raw = get_int(self._settings, SettingsKeys.FONT_SIZE, FONT_SIZE_DEFAULT)
        return clamp_font_size(raw, default=FONT_SIZE_DEFAULT)

    def set_font_size(self, size: float | int) -> int:
        size = clamp_font_size(size, default=FONT_SIZE_DEFAULT)
        safe_set_setting(self._settings, SettingsKeys.FONT_SIZE, size)
        return size

    def increase_font_size(self, step: int = 1) -> int:
        return self.set_font_size(self.font_size() + step)

    def decrease_font_size(self, step: int = 1) -> int:
        return self.set_font_size(self.font_size() - step)

    # ───────────────────────── window ─────────────────────────

    def geometry(self) -> QByteArray | None:
        try:
            value = self._settings.value(SettingsKeys.UI_GEOMETRY)
        except Exception:
            return None
        return value if isinstance(value, QByteArray) and not value.isEmpty() else None

    def set_geometry(self, geometry: QByteArray) -> None:
        safe_set_setting(self._settings, SettingsKeys.UI_GEOMETRY, geometry)

    def sync(self) -> None:
        self._settings.sync()
