from __future__ import annotations

"""Keystroke transition function.

Every function here is pure: (buffer, state, keystroke) -> EditResult. Only
the tail of the buffer is ever rewritten, and at most one block is open.

Medial keystroke, in precedence order:
  1. nothing open, last char is a syllable with a final -> the final migrates
     into a new block with the vowel (a cluster hands over its second half)
  2. nothing open, last char is a syllable without a final -> vowel appended
  3. nothing open, last char is a lone initial -> folded into (initial, vowel)
  4. nothing open, anything else -> vowel appended
  5. initial open -> vowel attached
  6. initial+medial open -> diphthong, or commit and append the vowel
  7. full block open -> same migration as (1)

Consonant keystroke:
  1. nothing open -> new block
  2. initial open -> initial replaced
  3. initial+medial open -> final attached, or commit and open new block
  4. full block open -> cluster final, or commit and open new block
"""

import logging

from hangul_ime.domain.classifier import can_stand_as_final, classify, is_initial
from hangul_ime.domain.combinations import combine_finals, combine_vowels, split_final
from hangul_ime.domain.composition_state import CompositionState, EditResult
from hangul_ime.domain.enums import JamoKind
from hangul_ime.domain.hangul_compose import SyllableParts, compose, decompose
from hangul_ime.domain.jamo_data import NO_FINAL

logger = logging.getLogger(__name__)

SPACE = " "


def apply_jamo(buffer: str, state: CompositionState, symbol: str) -> EditResult:
    """Apply one keystroke to the buffer tail.

    Symbols that are neither one of the 19 initials nor one of the 21 medials
    are appended verbatim and close any open block.
    """
    key = classify(symbol)
    if key.kind is JamoKind.MEDIAL:
        result = _on_medial(buffer, state, key.symbol)
    elif key.kind is JamoKind.INITIAL:
        result = _on_consonant(buffer, state, key.symbol)
    else:
        result = EditResult(buffer + key.symbol, CompositionState.empty())
    logger.debug("jamo %r: %s -> %s %r", symbol, state, result.state, result.buffer[-2:])
    return result


def apply_space(buffer: str, state: CompositionState) -> EditResult:
    """Commit any open block and append a literal space."""
    return EditResult(buffer + SPACE, CompositionState.empty())


# -----------------------------------------------------------------------------
# Medial
# -----------------------------------------------------------------------------

def _on_medial(buffer: str, state: CompositionState, vowel: str) -> EditResult:
    if state.initial is None:
        return _on_medial_closed(buffer, vowel)

    if state.medial is None:
        return _rewrite_tail(
            buffer,
            vowel,
            (compose(state.initial, vowel),),
            CompositionState(state.initial, vowel),
        )

    if state.final is None:
        combined = combine_vowels(state.medial, vowel)
        if combined is None:
            # The committed vowel is inert text; it is not reopened as a block.
            return EditResult(buffer + vowel, CompositionState.empty())
        return _rewrite_tail(
            buffer,
            vowel,
            (compose(state.initial, combined),),
            CompositionState(state.initial, combined),
        )

    return _migrate_final(buffer, SyllableParts(state.initial, state.medial, state.final), vowel)


def _on_medial_closed(buffer: str, vowel: str) -> EditResult:
    last = buffer[-1:]
    parts = decompose(last) if last else None

    if parts is not None:
        if parts.final:
            return _migrate_final(buffer, parts, vowel)
        return EditResult(buffer + vowel, CompositionState.empty())

    if last and is_initial(last):
        return _rewrite_tail(buffer, vowel, (compose(last, vowel),), CompositionState(last, vowel))

    return EditResult(buffer + vowel, CompositionState.empty())


def _migrate_final(buffer: str, parts: SyllableParts, vowel: str) -> EditResult:
    """Hand the trailing final over to a new block opened by `vowel`."""
    split = split_final(parts.final)
    if split is not None:
        kept, moved = split
    else:
        kept, moved = NO_FINAL, parts.final

    return _rewrite_tail(
        buffer,
        vowel,
        (compose(parts.initial, parts.medial, kept), compose(moved, vowel)),
        CompositionState(moved, vowel),
    )


# -----------------------------------------------------------------------------
# Consonant
# -----------------------------------------------------------------------------

def _on_consonant(buffer: str, state: CompositionState, consonant: str) -> EditResult:
    if state.initial is None:
        return _open_block(buffer, consonant)

    if state.medial is None:
        # Two consonants in a row overwrite; no syllable has formed yet.
        return EditResult(buffer[:-1] + consonant, CompositionState(consonant))

    if state.final is None:
        if not can_stand_as_final(consonant):
            return _open_block(buffer, consonant)
        return _rewrite_tail(
            buffer,
            consonant,
            (compose(state.initial, state.medial, consonant),),
            CompositionState(state.initial, state.medial, consonant),
        )

    cluster = combine_finals(state.final, consonant)
    if cluster is None:
        return _open_block(buffer, consonant)
    return _rewrite_tail(
        buffer,
        consonant,
        (compose(state.initial, state.medial, cluster),),
        CompositionState(state.initial, state.medial, cluster),
    )


def _open_block(buffer: str, consonant: str) -> EditResult:
    return EditResult(buffer + consonant, CompositionState(consonant))


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _rewrite_tail(
    buffer: str,
    symbol: str,
    replacement: tuple[str, ...],
    state: CompositionState,
) -> EditResult:
    """Replace the last buffer character with `replacement`.

    An empty string anywhere in `replacement` is a compose() failure; the
    open block is then committed as-is and `symbol` appended verbatim.
    """
    if not all(replacement):
        logger.warning("compose failed for %r after %r; committing and restarting", symbol, buffer[-1:])
        return EditResult(buffer + symbol, CompositionState.empty())
    return EditResult(buffer[:-1] + "".join(replacement), state)
