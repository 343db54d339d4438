from __future__ import annotations

import logging
from typing import Callable, Optional

from hangul_ime.domain.backspace import apply_backspace
from hangul_ime.domain.composer import apply_jamo, apply_space
from hangul_ime.domain.composition_state import CompositionState, EditResult
from hangul_ime.domain.enums import BackspaceUnit

logger = logging.getLogger(__name__)


class ComposerSession:
    """Caller-owned composition session for one text field.

    Responsibilities:
      - Hold the buffer and the open CompositionState between events
      - Publish every edit through the optional `on_change` callback
      - Drop the open block whenever the buffer changes behind its back

    One session per field; sessions are not shared.
    """

    def __init__(
        self,
        buffer: str = "",
        *,
        on_change: Optional[Callable[[str], None]] = None,
        backspace_unit: BackspaceUnit = BackspaceUnit.JAMO,
    ) -> None:
        self._buffer = buffer
        self._state = CompositionState.empty()
        self._on_change = on_change
        self.backspace_unit = backspace_unit

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def state(self) -> CompositionState:
        return self._state

    def set_on_change(self, on_change: Optional[Callable[[str], None]]) -> None:
        self._on_change = on_change

    def insert_jamo(self, symbol: str) -> EditResult:
        return self._commit(apply_jamo(self._buffer, self._state, symbol))

    def backspace(self) -> EditResult:
        return self._commit(apply_backspace(self._buffer, self._state, self.backspace_unit))

    def insert_space(self) -> EditResult:
        return self._commit(apply_space(self._buffer, self._state))

    def reconcile_external_change(self, new_buffer: str) -> CompositionState:
        """Adopt `new_buffer` as ground truth and close any open block."""
        if not self._state.is_empty:
            logger.debug("external change; dropping open block %s", self._state)
        self._buffer = new_buffer
        self._state = CompositionState.empty()
        return self._state

    def observe_buffer(self, value: str) -> bool:
        """Host change-notification hook.

        Returns True if `value` is not this session's own last output and the
        session was reconciled to it.
        """
        if value == self._buffer:
            return False
        self.reconcile_external_change(value)
        return True

    def _commit(self, result: EditResult) -> EditResult:
        self._buffer = result.buffer
        self._state = result.state
        if self._on_change is not None:
            try:
                self._on_change(result.buffer)
            except (AttributeError, RuntimeError, TypeError):
                # Handler is injected; keep the session usable.
                logger.exception("ComposerSession on_change handler failed")
        return result
