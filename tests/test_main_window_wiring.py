from pathlib import Path

import pytest

from hangul_ime.services.settings_store import SettingsStore
from hangul_ime.ui.main_window import create_main_window

pytestmark = pytest.mark.qt


def test_main_window_builds_and_exposes_handles(qtbot, tmp_path: Path):
    win = create_main_window(settings_path=str(tmp_path / "settings.yaml"))
    qtbot.addWidget(win)

    assert win.objectName().startswith("MainWindow")
    handles = getattr(win, "_handles")
    assert handles.line_edit.objectName() == "lineEditInput"
    assert handles.keyboard.isVisibleTo(win) is False
    assert handles.keyboard_button.isChecked() is False


def test_keyboard_toggle_persists(qtbot, tmp_path: Path):
    settings_path = str(tmp_path / "settings.yaml")
    win = create_main_window(settings_path=settings_path)
    qtbot.addWidget(win)
    handles = getattr(win, "_handles")

    handles.keyboard_button.click()
    assert handles.keyboard.isVisibleTo(win) is True
    assert SettingsStore(settings_path=settings_path).get_keyboard_visible() is True

    win2 = create_main_window(settings_path=settings_path)
    qtbot.addWidget(win2)
    handles2 = getattr(win2, "_handles")
    assert handles2.keyboard.isVisibleTo(win2) is True
    assert handles2.keyboard_button.isChecked() is True


def test_typing_through_the_window(qtbot, tmp_path: Path):
    win = create_main_window(settings_path=str(tmp_path / "settings.yaml"))
    qtbot.addWidget(win)
    handles = getattr(win, "_handles")

    for jamo in ["ㅎ", "ㅏ", "ㄴ", "ㄱ", "ㅡ", "ㄹ"]:
        handles.keyboard.key_button(jamo).click()
    assert handles.line_edit.text() == "한글"


def test_mode_button_toggles_composition(qtbot, tmp_path: Path):
    win = create_main_window(settings_path=str(tmp_path / "settings.yaml"))
    qtbot.addWidget(win)
    handles = getattr(win, "_handles")

    assert handles.mode_button.text() == "한"
    handles.mode_button.click()
    assert handles.controller.is_enabled() is False
    assert handles.mode_button.text() == "EN"
