from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import QEvent, QObject, Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import QLineEdit

from hangul_ime.domain.enums import BackspaceUnit
from hangul_ime.domain.keyboard_layout import jamo_for_key
from hangul_ime.services.composer_session import ComposerSession
from hangul_ime.services.settings_store import SettingsStore
from hangul_ime.ui.widgets.korean_keyboard import KoreanKeyboard

logger = logging.getLogger(__name__)

_PASSTHROUGH_MODIFIERS = (
    Qt.KeyboardModifier.ControlModifier
    | Qt.KeyboardModifier.AltModifier
    | Qt.KeyboardModifier.MetaModifier
)

class KoreanInputController(QObject):
    """Binds one QLineEdit to one ComposerSession.

    Responsibilities:
    - route jamo keys, Backspace and Space (physical or on-screen) into the session
    - publish the session buffer back into the field
    - reset the session whenever the field changes for any other reason

    The field keeps no composition logic; it only displays the buffer.
    """

    enabledChanged = pyqtSignal(bool)
    keyboardVisibleChanged = pyqtSignal(bool)

    def __init__(
        self,
        line_edit: QLineEdit,
        *,
        session: Optional[ComposerSession] = None,
        settings_store: Optional[SettingsStore] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent if parent is not None else line_edit)
        self._edit = line_edit
        self._settings_store = settings_store

        unit = BackspaceUnit.JAMO
        self._map_physical_keys = True
        if settings_store is not None:
            unit = settings_store.get_backspace_unit()
            self._map_physical_keys = settings_store.get_map_physical_keys()

        self.session = session if session is not None else ComposerSession(backspace_unit=unit)
        self.session.reconcile_external_change(line_edit.text())
        self.session.set_on_change(self._publish)

        self._enabled = True
        self._keyboard: Optional[KoreanKeyboard] = None
        self._wired = False

    # --------------------------------------------------
    # Wiring
    # --------------------------------------------------

    def wire(self) -> None:
        """Install the key filter and the change hook (idempotent)."""
        if self._wired:
            return
        self._edit.installEventFilter(self)
        self._edit.textChanged.connect(self._on_text_changed)
        self._wired = True

    def attach_keyboard(self, keyboard: KoreanKeyboard) -> None:
        self._keyboard = keyboard
        keyboard.jamoPressed.connect(self.insert_jamo)
        keyboard.backspacePressed.connect(self.backspace)
        keyboard.spacePressed.connect(self.insert_space)
        keyboard.closeRequested.connect(lambda: self.set_keyboard_visible(False))
        visible = self._settings_store.get_keyboard_visible() if self._settings_store is not None else False
        keyboard.setVisible(visible)

    # --------------------------------------------------
    # State
    # --------------------------------------------------

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if enabled == self._enabled:
            return
        self._enabled = enabled
        # Leaving Korean mode commits whatever block is open.
        self.session.reconcile_external_change(self._edit.text())
        self.enabledChanged.emit(enabled)

    def toggle(self) -> None:
        self.set_enabled(not self._enabled)

    def set_keyboard_visible(self, visible: bool) -> None:
        if self._keyboard is None:
            return
        self._keyboard.setVisible(bool(visible))
        if self._settings_store is not None:
            self._settings_store.set_keyboard_visible(bool(visible))
        self.keyboardVisibleChanged.emit(bool(visible))

    # --------------------------------------------------
    # Edits
    # --------------------------------------------------

    def insert_jamo(self, symbol: str) -> None:
        self._sync()
        self.session.insert_jamo(symbol)

    def backspace(self) -> None:
        self._sync()
        self.session.backspace()

    def insert_space(self) -> None:
        self._sync()
        self.session.insert_space()

    # --------------------------------------------------
    # Qt hooks
    # --------------------------------------------------

    def eventFilter(self, obj: QObject, ev: QEvent) -> bool:
        if obj is not self._edit or ev.type() != QEvent.Type.KeyPress or not self._enabled:
            return False
        if not isinstance(ev, QKeyEvent):
            return False
        try:
            return self._handle_key(ev)
        except (AttributeError, RuntimeError, TypeError):
            logger.exception("KoreanInputController key handler failed")
            return False

    def _handle_key(self, ev: QKeyEvent) -> bool:
        if ev.modifiers() & _PASSTHROUGH_MODIFIERS:
            return False

        key = ev.key()
        if key == Qt.Key.Key_Backspace:
            self.backspace()
            return True
        if key == Qt.Key.Key_Space:
            self.insert_space()
            return True

        if not self._map_physical_keys:
            return False
        jamo = jamo_for_key(ev.text())
        if jamo is None:
            return False
        self.insert_jamo(jamo)
        return True

    def _on_text_changed(self, text: str) -> None:
        if self.session.observe_buffer(text):
            logger.debug("field changed externally; composition reset")

    def _sync(self) -> None:
        self.session.observe_buffer(self._edit.text())

    def _publish(self, buffer: str) -> None:
        if self._edit.text() != buffer:
            self._edit.setText(buffer)
        self._edit.setCursorPosition(len(buffer))
