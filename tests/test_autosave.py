from tabbed_notepad.session.autosave import AutosaveTimer


def test_default_interval_is_five_seconds(qapp, session):
    timer = AutosaveTimer(session)
    assert timer.interval_ms == 5000
    assert timer.is_active() is False


def test_start_and_stop(qapp, session):
    timer = AutosaveTimer(session, interval_ms=50)
    timer.start()
    assert timer.is_active()
    timer.stop()
    assert not timer.is_active()


def test_tick_flushes_all_notes(qapp, session, store):
    session.load_if_needed()
    session.add_tab()
    for note in session.notes:
        session.edit_text(note.id, "typed")

    timer = AutosaveTimer(session)
    assert timer.flush_now() == 2
    assert [n.text for n in store.load_all()] == ["typed", "typed"]


def test_timer_fires_on_event_loop(qapp, session, store):
    from PySide6.QtCore import QEventLoop, QTimer

    session.load_if_needed()
    session.edit_text(session.selected_id, "from timer")

    timer = AutosaveTimer(session, interval_ms=10)
    timer.start()
    loop = QEventLoop()
    QTimer.singleShot(200, loop.quit)
    loop.exec()
    timer.stop()

    assert store.load_all()[0].text == "from timer"
