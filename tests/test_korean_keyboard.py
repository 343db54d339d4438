import pytest
from PyQt6.QtWidgets import QPushButton

from hangul_ime.domain.jamo_data import CHOSEONG
from hangul_ime.ui.widgets.korean_keyboard import KoreanKeyboard

pytestmark = pytest.mark.qt


def test_keyboard_has_a_button_per_key(qtbot):
    keyboard = KoreanKeyboard()
    qtbot.addWidget(keyboard)

    for consonant in CHOSEONG:
        btn = keyboard.key_button(consonant)
        assert btn is not None
        assert btn.text() == consonant
    assert keyboard.key_button("ㅘ") is None
    assert keyboard.key_button("ㄲ").property("keyRole") == "double"
    assert keyboard.key_button("ㅏ").property("keyRole") == "vowel"


def test_buttons_emit_signals(qtbot):
    keyboard = KoreanKeyboard()
    qtbot.addWidget(keyboard)

    with qtbot.waitSignal(keyboard.jamoPressed, timeout=1000) as blocker:
        keyboard.key_button("ㅎ").click()
    assert blocker.args == ["ㅎ"]

    with qtbot.waitSignal(keyboard.backspacePressed, timeout=1000):
        keyboard.findChild(QPushButton, "keyBackspace").click()
    with qtbot.waitSignal(keyboard.spacePressed, timeout=1000):
        keyboard.findChild(QPushButton, "keySpace").click()
    with qtbot.waitSignal(keyboard.closeRequested, timeout=1000):
        keyboard.findChild(QPushButton, "keyClose").click()
