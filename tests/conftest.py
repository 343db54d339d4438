# tests/conftest.py
import os

import pytest

# Headless Qt for CI; must be set before pytest-qt creates the QApplication.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from hangul_ime.domain.composer import apply_jamo  # noqa: E402
from hangul_ime.domain.composition_state import CompositionState, EditResult  # noqa: E402


def type_jamo(symbols, buffer: str = "", state: CompositionState | None = None) -> EditResult:
    """Fold a keystroke sequence through apply_jamo."""
    result = EditResult(buffer, state if state is not None else CompositionState.empty())
    for symbol in symbols:
        result = apply_jamo(result.buffer, result.state, symbol)
    return result


@pytest.fixture
def typed():
    return type_jamo
