from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Slot

from tabbed_notepad.session.manager import SessionManager
from tabbed_notepad.settings import AUTOSAVE_INTERVAL_MS

log = logging.getLogger(__name__)


class AutosaveTimer(QObject):
    """Repeating timer that flushes every open note on each tick."""

    def __init__(
        self,
        session: SessionManager,
        *,
        interval_ms: int = AUTOSAVE_INTERVAL_MS,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._session = session
        self._timer = QTimer(self)
        self._timer.setInterval(int(interval_ms))
        self._timer.setSingleShot(False)
        self._timer.timeout.connect(self.flush_now)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()

    @Slot()
    def flush_now(self) -> int:
        saved = self._session.flush_all()
        log.debug("Autosave tick: saved=%d", saved)
        return saved
