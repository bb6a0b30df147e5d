from tabbed_notepad.core.text import (
    clamp_font_size,
    clamp_title,
    display_title,
    normalize_text,
)


def test_curly_quotes_become_apostrophes():
    assert normalize_text("‘quoted’") == "'quoted'"
    assert normalize_text("it’s") == "it's"


def test_normalize_is_idempotent():
    s = "don’t ‘panic’ “double”"
    once = normalize_text(s)
    assert normalize_text(once) == once


def test_normalize_leaves_double_quotes_alone():
    assert normalize_text("“hi”") == "“hi”"


def test_normalize_empty():
    assert normalize_text("") == ""
    assert normalize_text(None) == ""


def test_clamp_title():
    assert clamp_title("x" * 50) == "x" * 40
    assert clamp_title("short") == "short"
    assert clamp_title(None) == ""


def test_display_title_truncates_with_ellipsis():
    assert display_title("a" * 20) == "a" * 20
    assert display_title("a" * 21) == "a" * 20 + "…"


def test_display_title_empty():
    assert display_title("") == "Untitled"


def test_clamp_font_size():
    assert clamp_font_size(5) == 10
    assert clamp_font_size(40) == 36
    assert clamp_font_size(16.7) == 16
    assert clamp_font_size("22") == 22
    assert clamp_font_size("garbage", default=16) == 16
