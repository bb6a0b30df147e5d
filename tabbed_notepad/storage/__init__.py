from .filesystem import atomic_write_text, write_plain_text
from .note_store import NoteStore
from .preferences import Preferences, SettingsKeys

__all__ = ["atomic_write_text",
           "write_plain_text",
           "NoteStore",
           "Preferences",
           "SettingsKeys",
           ]
