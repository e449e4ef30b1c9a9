"""
Closed enumerations shared across the library.
"""

from enum import Enum
from typing import Optional


class Script(str, Enum):
    """Writing system of a string."""

    DEVANAGARI = "Devanagari"
    IAST = "IAST"
    UNKNOWN = "Unknown"

    @property
    def key(self) -> str:
        """Lowercase key used in table dumps ("devanagari", "iast")."""
        return self.value.lower()

    @classmethod
    def parse(cls, value: "Script | str | None") -> Optional["Script"]:
        """Resolve a Script from an enum member or a case-insensitive name."""
        if isinstance(value, Script):
            return value
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        for member in cls:
            if member.key == lowered:
                return member
        return None


class Tense(str, Enum):
    """
    Finite verbal tense/mood categories (lakāras) indexing the affix tables.

    Member values are the lakāra keys; English names are accepted by parse().
    """

    PRESENT = "lat"
    PERFECT = "lit"
    IMPERATIVE = "lot"
    POTENTIAL = "ling"
    AORIST = "lung"
    FUTURE = "lrt"
    CONDITIONAL = "lrng"

    @classmethod
    def parse(cls, value: "Tense | str | None") -> Optional["Tense"]:
        """Resolve a Tense from a member, a lakāra key, or an English name."""
        if isinstance(value, Tense):
            return value
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        for member in cls:
            if lowered in (member.value, member.name.lower()):
                return member
        return None


class Pada(str, Enum):
    """Grammatical voice of a verbal ending."""

    ATMANEPADA = "atmanepada"
    PARASMAIPADA = "parasmaipada"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Display name with diacritics."""
        return _PADA_LABELS[self]

    @classmethod
    def parse(cls, value: "Pada | str | None") -> Optional["Pada"]:
        """Resolve a Pada from a member or a case-insensitive name."""
        if isinstance(value, Pada):
            return value
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        return None


_PADA_LABELS = {
    Pada.ATMANEPADA: "Ātmanepada",
    Pada.PARASMAIPADA: "Parasmaipada",
    Pada.UNKNOWN: "Unknown",
}


class PhonemeKind(str, Enum):
    """Phonological kind of a tokenized unit."""

    VOWEL = "vowel"
    CONSONANT = "consonant"
    CLUSTER = "cluster"
    ANUSVARA = "anusvara"
    CANDRABINDU = "candrabindu"
    VISARGA = "visarga"
    AVAGRAHA = "avagraha"


class ValidationErrorType(str, Enum):
    """Reason a word failed validation."""

    TYPE_ERROR = "TYPE_ERROR"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_SCRIPT = "INVALID_SCRIPT"
    UNRECOGNIZED_UNIT = "UNRECOGNIZED_UNIT"
    NO_PHONEMES = "NO_PHONEMES"
