"""Main window factory.

Public API:
- create_main_window(...): builds and returns the demo window without starting
  the Qt event loop, so UI tests can instantiate it headlessly.

QApplication creation and app.exec() stay in `main.py`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from hangul_ime.controllers.korean_input_controller import KoreanInputController
from hangul_ime.services.settings_store import SettingsStore
from hangul_ime.ui.widgets.korean_keyboard import KoreanKeyboard


@dataclass(frozen=True)
class MainWindowHandles:
    """Stable handles tests may need; stored on `window._handles`."""

    line_edit: QLineEdit
    keyboard: KoreanKeyboard
    keyboard_button: QPushButton
    mode_button: QPushButton
    controller: KoreanInputController


def _mode_text(enabled: bool) -> str:
    return "한" if enabled else "EN"


def create_main_window(*, settings_path: str | None = None, parent: Optional[QWidget] = None) -> QWidget:
    """Create and return the demo window.

    This function must NOT call app.exec(). It assumes a QApplication exists.

    Args:
        settings_path: Optional path to a settings.yaml; defaults to the
            project-root settings file.
    """
    store = SettingsStore(settings_path=settings_path)

    window = QWidget(parent)
    window.setObjectName("MainWindow")
    window.setWindowTitle("한글 입력")

    layout = QVBoxLayout(window)
    layout.setContentsMargins(12, 12, 12, 12)
    layout.setSpacing(8)

    prompt = QLabel("Type Korean with a 2-set layout or the on-screen keyboard.")
    prompt.setObjectName("labelPrompt")
    layout.addWidget(prompt)

    row = QHBoxLayout()
    line_edit = QLineEdit()
    line_edit.setObjectName("lineEditInput")
    row.addWidget(line_edit, 1)

    mode_button = QPushButton(_mode_text(True))
    mode_button.setObjectName("buttonMode")
    mode_button.setToolTip("Toggle Korean composition (한/EN)")
    row.addWidget(mode_button)

    keyboard_button = QPushButton("⌨ 한글")
    keyboard_button.setObjectName("buttonKeyboard")
    keyboard_button.setCheckable(True)
    row.addWidget(keyboard_button)
    layout.addLayout(row)

    keyboard = KoreanKeyboard()
    layout.addWidget(keyboard)

    controller = KoreanInputController(line_edit, settings_store=store, parent=window)
    controller.wire()
    controller.attach_keyboard(keyboard)

    keyboard_button.setChecked(keyboard.isVisibleTo(window))
    keyboard_button.clicked.connect(lambda checked: controller.set_keyboard_visible(checked))
    controller.keyboardVisibleChanged.connect(keyboard_button.setChecked)

    mode_button.clicked.connect(lambda _checked=False: controller.toggle())
    controller.enabledChanged.connect(lambda enabled: mode_button.setText(_mode_text(enabled)))

    setattr(
        window,
        "_handles",
        MainWindowHandles(
            line_edit=line_edit,
            keyboard=keyboard,
            keyboard_button=keyboard_button,
            mode_button=mode_button,
            controller=controller,
        ),
    )
    return window
