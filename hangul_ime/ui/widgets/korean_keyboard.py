"""On-screen Korean keyboard widget.

Pure presentation: every button only emits a signal. Routing those signals
into a composition session is the controller's job.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from hangul_ime.domain.keyboard_layout import ON_SCREEN_DOUBLES, ON_SCREEN_ROWS

# role -> stylesheet
_KEY_STYLES = {
    "consonant": "",
    "vowel": "color: #1d4ed8;",
    "double": "color: #c2410c;",
}


def _mk_key_button(jamo: str, role: str, *, point_size: int = 16) -> QPushButton:
    """Create a fixed-size key that never steals focus from the text field."""
    btn = QPushButton(jamo)
    btn.setObjectName("key_{}".format(jamo))
    btn.setProperty("jamo", jamo)
    btn.setProperty("keyRole", role)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setFixedSize(44, 44)
    f = QFont()
    f.setPointSize(int(point_size))
    btn.setFont(f)
    style = _KEY_STYLES.get(role, "")
    if style:
        btn.setStyleSheet(style)
    return btn


def _mk_action_button(text: str, object_name: str) -> QPushButton:
    btn = QPushButton(text)
    btn.setObjectName(object_name)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    return btn


class KoreanKeyboard(QWidget):
    """Consonant/vowel rows, a geminate row, then Backspace and Space."""

    jamoPressed = pyqtSignal(str)
    backspacePressed = pyqtSignal()
    spacePressed = pyqtSignal()
    closeRequested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("KoreanKeyboard")

        outer = QVBoxLayout(self)
        outer.setContentsMargins(6, 6, 6, 6)
        outer.setSpacing(4)

        header = QHBoxLayout()
        title = QLabel("한글")
        title.setObjectName("labelKeyboardTitle")
        header.addWidget(title)
        header.addStretch(1)
        btn_close = _mk_action_button("✕", "keyClose")
        btn_close.clicked.connect(self.closeRequested)
        header.addWidget(btn_close)
        outer.addLayout(header)

        self._keys: dict[str, QPushButton] = {}

        for consonants, vowels in ON_SCREEN_ROWS:
            row = QHBoxLayout()
            row.setSpacing(4)
            row.addStretch(1)
            for jamo in consonants:
                row.addWidget(self._add_key(jamo, "consonant"))
            row.addSpacing(8)
            for jamo in vowels:
                row.addWidget(self._add_key(jamo, "vowel"))
            row.addStretch(1)
            outer.addLayout(row)

        doubles = QHBoxLayout()
        doubles.setSpacing(4)
        doubles.addStretch(1)
        for jamo in ON_SCREEN_DOUBLES:
            doubles.addWidget(self._add_key(jamo, "double"))
        doubles.addStretch(1)
        outer.addLayout(doubles)

        actions = QHBoxLayout()
        btn_back = _mk_action_button("← Back", "keyBackspace")
        btn_back.clicked.connect(self.backspacePressed)
        btn_space = _mk_action_button("Space", "keySpace")
        btn_space.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn_space.clicked.connect(self.spacePressed)
        actions.addWidget(btn_back)
        actions.addWidget(btn_space, 1)
        outer.addLayout(actions)

    def key_button(self, jamo: str) -> Optional[QPushButton]:
        return self._keys.get(jamo)

    def _add_key(self, jamo: str, role: str) -> QPushButton:
        btn = _mk_key_button(jamo, role)
        btn.clicked.connect(lambda _checked=False, j=jamo: self.jamoPressed.emit(j))
        self._keys[jamo] = btn
        return btn
