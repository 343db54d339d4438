from __future__ import annotations

from enum import Enum, auto


class JamoKind(Enum):
    """Category of a single keystroke symbol."""

    INITIAL = auto()
    MEDIAL = auto()
    OTHER = auto()


class BackspaceUnit(str, Enum):
    """How much one backspace press removes.

    JAMO peels one phonemic unit off the trailing block; CHARACTER deletes the
    whole trailing character.
    """

    JAMO = "jamo"
    CHARACTER = "character"

    @classmethod
    def from_value(cls, value: object, default: "BackspaceUnit | None" = None) -> "BackspaceUnit":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default if default is not None else cls.JAMO
