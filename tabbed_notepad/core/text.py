from __future__ import annotations

from tabbed_notepad.settings import (
    DISPLAY_TITLE_MAX_LEN,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    TITLE_MAX_LEN,
)

_QUOTE_MAP = str.maketrans({"\u2018": "'", "\u2019": "'"})

ELLIPSIS = "…"
UNTITLED = "Untitled"


def normalize_text(text: str | None) -> str:
    """Curly single quotes -> plain apostrophe. Idempotent."""
    if not text:
        return ""
    return text.translate(_QUOTE_MAP)


def clamp_title(title: str | None, *, max_len: int = TITLE_MAX_LEN) -> str:
    title = title or ""
    return title[:max_len]


def display_title(title: str | None, *, max_len: int = DISPLAY_TITLE_MAX_LEN) -> str:
    """Tab label: short titles as-is, long ones cut with an ellipsis."""
    title = title or ""
    if not title:
        return UNTITLED
    if len(title) <= max_len:
        return title
    return title[:max_len] + ELLIPSIS


def clamp_font_size(value: float | int | str | None, *, default: int | None = None) -> int:
    try:
        size = int(float(value))
    except (TypeError, ValueError):
        size = default if default is not None else FONT_SIZE_MIN
    return max(FONT_SIZE_MIN, min(FONT_SIZE_MAX, size))
