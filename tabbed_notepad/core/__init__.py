from .note import Note, NoteFormatError, generate_note_id
from .text import clamp_font_size, clamp_title, display_title, normalize_text
from .filenames import export_filename, note_filename

__all__ = ["Note",
           "NoteFormatError",
           "generate_note_id",
           "clamp_font_size",
           "clamp_title",
           "display_title",
           "normalize_text",
           "export_filename",
           "note_filename",
           ]
