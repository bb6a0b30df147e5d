from .core.note import Note, NoteFormatError
from .session.manager import DeleteState, SessionManager
from .storage.note_store import NoteStore

__version__ = "0.1.0"

__all__ = ["Note",
           "NoteFormatError",
           "DeleteState",
           "SessionManager",
           "NoteStore",
           ]
