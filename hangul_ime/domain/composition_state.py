from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from hangul_ime.domain.hangul_compose import SyllableParts, compose


@dataclass(frozen=True)
class CompositionState:
    """The single trailing block still open for editing.

    Either empty, or the populated fields match the decomposition of the
    buffer's last character. Reachable shapes are: empty, initial only,
    initial+medial and initial+medial+final.
    """

    initial: Optional[str] = None
    medial: Optional[str] = None
    final: Optional[str] = None

    @classmethod
    def empty(cls) -> "CompositionState":
        return _EMPTY

    @classmethod
    def from_parts(cls, parts: SyllableParts) -> "CompositionState":
        return cls(parts.initial, parts.medial, parts.final or None)

    @property
    def is_empty(self) -> bool:
        return self.initial is None and self.medial is None and self.final is None

    def render(self) -> str:
        """Return the character this state occupies at the buffer tail."""
        if self.initial is None:
            return ""
        if self.medial is None:
            return self.initial
        return compose(self.initial, self.medial, self.final or "")

    def __str__(self) -> str:
        if self.is_empty:
            return "{}"
        fields = [
            "{}={}".format(name, value)
            for name, value in (("initial", self.initial), ("medial", self.medial), ("final", self.final))
            if value is not None
        ]
        return "{" + ", ".join(fields) + "}"


_EMPTY = CompositionState()


class EditResult(NamedTuple):
    buffer: str
    state: CompositionState
