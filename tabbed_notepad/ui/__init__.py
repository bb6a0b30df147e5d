from .editor import NoteEditor
from .main_window import NotepadWindow

__all__ = ["NoteEditor",
           "NotepadWindow",
           ]
