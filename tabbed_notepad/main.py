from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from tabbed_notepad.logging_setup import (
    SESSION_ID,
    install_global_exception_hooks,
    log,
    setup_logging,
)
from tabbed_notepad.session.manager import SessionManager
from tabbed_notepad.settings import APP_NAME, default_notes_dir
from tabbed_notepad.storage.note_store import NoteStore
from tabbed_notepad.storage.preferences import Preferences
from tabbed_notepad.ui.main_window import NotepadWindow


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Multi-tab plain-text notepad")
    p.add_argument(
        "--notes-dir",
        type=Path,
        default=None,
        help="Folder for note files (default: the platform app-data folder)",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Also print debug messages to the console",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    install_global_exception_hooks()

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    notes_dir = args.notes_dir.expanduser() if args.notes_dir else default_notes_dir()
    store = NoteStore(notes_dir)
    prefs = Preferences()
    session = SessionManager(store, prefs)

    win = NotepadWindow(session, prefs)
    win.show()
    log.info("Application started: notes_dir=%s sid=%s", notes_dir, SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
