from __future__ import annotations

"""Backspace transition function.

One call peels exactly one phonemic unit off the trailing block:
cluster final -> its kept half, single final -> gone, diphthong -> its base
vowel, vowel -> gone, lone initial -> character deleted. With no open block
the last syllable is reopened with one unit already peeled; any other
character is deleted outright.
"""

import logging

from hangul_ime.domain.combinations import base_vowel, split_final
from hangul_ime.domain.composition_state import CompositionState, EditResult
from hangul_ime.domain.enums import BackspaceUnit
from hangul_ime.domain.hangul_compose import decompose

logger = logging.getLogger(__name__)


def apply_backspace(
    buffer: str,
    state: CompositionState,
    unit: BackspaceUnit = BackspaceUnit.JAMO,
) -> EditResult:
    if not buffer:
        return EditResult(buffer, CompositionState.empty())

    if unit is BackspaceUnit.CHARACTER:
        return EditResult(buffer[:-1], CompositionState.empty())

    if state.is_empty:
        parts = decompose(buffer[-1])
        if parts is None:
            return EditResult(buffer[:-1], CompositionState.empty())
        state = CompositionState.from_parts(parts)

    result = _peel(buffer, state)
    logger.debug("backspace: %s -> %s", state, result.state)
    return result


def _peel(buffer: str, state: CompositionState) -> EditResult:
    if state.final is not None:
        split = split_final(state.final)
        reduced = CompositionState(state.initial, state.medial, split[0] if split else None)
    elif state.medial is not None:
        reduced = CompositionState(state.initial, base_vowel(state.medial))
    else:
        return EditResult(buffer[:-1], CompositionState.empty())

    tail = reduced.render()
    if not tail:
        logger.warning("cannot render %s after backspace; deleting %r", reduced, buffer[-1:])
        return EditResult(buffer[:-1], CompositionState.empty())
    return EditResult(buffer[:-1] + tail, reduced)
