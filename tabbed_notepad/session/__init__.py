from .manager import DeleteState, SessionManager, default_title
from .autosave import AutosaveTimer

__all__ = ["DeleteState",
           "SessionManager",
           "default_title",
           "AutosaveTimer",
           ]
