import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication, QSettings

from tabbed_notepad.session.manager import SessionManager
from tabbed_notepad.storage.note_store import NoteStore
from tabbed_notepad.storage.preferences import Preferences


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def notes_dir(tmp_path):
    return tmp_path / "Notes"


@pytest.fixture
def store(notes_dir):
    return NoteStore(notes_dir)


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "prefs.ini")


@pytest.fixture
def prefs(settings_path):
    return Preferences(QSettings(settings_path, QSettings.Format.IniFormat))


@pytest.fixture
def session(store, prefs):
    return SessionManager(store, prefs)
