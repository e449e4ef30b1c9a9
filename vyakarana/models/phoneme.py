"""
Phoneme and tokenization data models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from vyakarana.data.inventory import ENG, GUNA, VRDDHI, lookup
from vyakarana.models.enums import PhonemeKind, Script


class Phoneme(BaseModel):
    """
    A single phonological unit produced by the tokenizer.

    The phoneme's identity is its canonical ``sound`` (IAST spelling) plus
    the script it was read from; ``text`` is how the unit is written on its
    own in that script, ``surface`` is exactly what appeared in the input.

    Attributes:
        text: Standalone form in the source script (e.g. "इ" for the "ि" sign)
        surface: Code points consumed from the input ("" for an inherent a)
        sound: Canonical identity (IAST), e.g. "kh", "ā"; joined for clusters
        script: Script the phoneme was read from
        kind: Phonological kind
        position: Index of the first consumed code point in the normalized input
        inherent: Whether this is the unwritten vowel of a Devanagari consonant
        components: Member sounds of a consonant cluster
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Standalone form in the source script")
    surface: str = Field(..., description="Code points consumed from the input")
    sound: str = Field(..., description="Canonical IAST identity")
    script: Script = Field(..., description="Script the phoneme was read from")
    kind: PhonemeKind = Field(..., description="Phonological kind")
    position: int = Field(..., description="Start index in the normalized input", ge=0)
    inherent: bool = Field(default=False, description="Implicit Devanagari vowel")
    components: tuple[str, ...] = Field(
        default=(),
        description="Member sounds of a consonant cluster",
    )

    def _has(self, category: str) -> bool:
        spec = lookup(self.sound)
        return spec is not None and spec.has(category)

    @computed_field
    @property
    def is_vowel(self) -> bool:
        """Whether the phoneme is a vowel."""
        return self.kind == PhonemeKind.VOWEL

    @computed_field
    @property
    def is_consonant(self) -> bool:
        """Whether the phoneme is a consonant or a consonant cluster."""
        return self.kind in (PhonemeKind.CONSONANT, PhonemeKind.CLUSTER)

    @computed_field
    @property
    def is_vrddhi(self) -> bool:
        return self._has(VRDDHI)

    @computed_field
    @property
    def is_guna(self) -> bool:
        return self._has(GUNA)

    @computed_field
    @property
    def is_eng_vowel(self) -> bool:
        return self._has(ENG)

    @computed_field
    @property
    def is_long(self) -> bool:
        spec = lookup(self.sound)
        return spec is not None and spec.long


class UnresolvedUnit(BaseModel):
    """A code point the tokenizer could not map to a known phoneme."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(..., description="Index in the normalized input", ge=0)
    character: str = Field(..., description="The unresolved code point")


class TokenizationResult(BaseModel):
    """
    Ordered phoneme sequence for one input word.

    Tokenization is best-effort: code points that could not be resolved are
    listed in ``unresolved`` and the rest of the word is still tokenized.
    """

    model_config = ConfigDict(frozen=True)

    word: str = Field(default="", description="Normalized input word")
    script: Script = Field(default=Script.UNKNOWN, description="Detected script")
    accurate: bool = Field(default=False, description="Conjunct policy used")
    phonemes: tuple[Phoneme, ...] = Field(default=(), description="Phonemes in input order")
    unresolved: tuple[UnresolvedUnit, ...] = Field(
        default=(),
        description="Code points not resolved to a known unit",
    )

    @computed_field
    @property
    def count(self) -> int:
        """Number of phonemes."""
        return len(self.phonemes)

    @computed_field
    @property
    def is_complete(self) -> bool:
        """Whether every code point was resolved."""
        return not self.unresolved

    @property
    def texts(self) -> list[str]:
        """Standalone forms of the phonemes, in order."""
        return [p.text for p in self.phonemes]

    @property
    def sounds(self) -> list[str]:
        """Canonical sounds of the phonemes, in order."""
        return [p.sound for p in self.phonemes]

    def surface(self) -> str:
        """Concatenate the consumed surface forms back into a string."""
        return "".join(p.surface for p in self.phonemes)

    def vowels(self) -> list[Phoneme]:
        return [p for p in self.phonemes if p.is_vowel]

    def first_unresolved(self) -> Optional[UnresolvedUnit]:
        return self.unresolved[0] if self.unresolved else None
