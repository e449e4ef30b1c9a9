"""
Analysis result data models.
"""

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from vyakarana.models.enums import Pada, Script, Tense, ValidationErrorType


class ValidationResult(BaseModel):
    """
    Outcome of validating a whole word.

    Attributes:
        is_valid: Whether every code point resolved to a known phoneme
        error: Human-readable reason when invalid
        error_type: Machine-readable reason when invalid
        fault_position: Index of the first offending code point, if any
        word: Normalized input (empty for non-string input)
        script: Detected script
        phoneme_count: Number of phonemes found
    """

    is_valid: bool = Field(..., description="Whether the word is well-formed")
    error: Optional[str] = Field(default=None, description="Reason the word is invalid")
    error_type: Optional[ValidationErrorType] = Field(
        default=None,
        description="Machine-readable reason the word is invalid",
    )
    fault_position: Optional[int] = Field(
        default=None,
        description="Index of the first offending code point",
        ge=0,
    )
    word: str = Field(default="", description="Normalized input word")
    script: Script = Field(default=Script.UNKNOWN, description="Detected script")
    phoneme_count: int = Field(default=0, description="Number of phonemes", ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "is_valid": False,
                    "error": "Unrecognized character 'x' at position 2",
                    "error_type": "UNRECOGNIZED_UNIT",
                    "fault_position": 2,
                    "word": "राxम",
                    "script": "Devanagari",
                    "phoneme_count": 4,
                }
            ]
        }
    }


class VowelOccurrence(BaseModel):
    """A vowel found in a word."""

    phoneme: str = Field(..., description="Standalone form in the word's script")
    sound: str = Field(..., description="Canonical IAST identity")
    position: int = Field(..., description="Index in the phoneme sequence", ge=0)


class FirstVowelAnalysis(BaseModel):
    """
    First-vowel analysis of a word.

    ``position`` indexes the phoneme sequence, not code points, and is -1
    when the word has no vowel.
    """

    word: str = Field(default="", description="Normalized input word")
    script: Script = Field(default=Script.UNKNOWN, description="Detected script")
    first_vowel: Optional[str] = Field(default=None, description="First vowel, if any")
    position: int = Field(default=-1, description="Phoneme index of the first vowel")
    is_vrddhi: bool = Field(default=False, description="First vowel is ā, ai or au")
    is_guna: bool = Field(default=False, description="First vowel is a, e or o")
    is_eng_vowel: bool = Field(default=False, description="First vowel is e or o")
    all_vowels: list[VowelOccurrence] = Field(
        default_factory=list,
        description="Every vowel of the word in order",
    )

    @computed_field
    @property
    def has_vowel(self) -> bool:
        return self.first_vowel is not None


class PadaClassification(BaseModel):
    """
    Voice classification of a verbal ending.

    An affix listed in both pada tables is reported with ``pada`` set to
    Ātmanepada and both padas in ``candidates``; check ``is_ambiguous``
    rather than trusting ``pada`` alone.

    Attributes:
        is_valid: False only for non-string or empty input
        error: Reason the input is invalid
        affix: Trimmed, normalized affix
        script: Detected script of the affix
        pada: Reported pada (None for invalid input, UNKNOWN when unlisted)
        tense: Tense bucket of the first match
        description: Human-readable summary
        candidates: Every pada whose table contains the affix
    """

    is_valid: bool = Field(..., description="Whether the input could be analyzed")
    error: Optional[str] = Field(default=None, description="Reason the input is invalid")
    affix: str = Field(default="", description="Trimmed, normalized affix")
    script: Script = Field(default=Script.UNKNOWN, description="Detected script")
    pada: Optional[Pada] = Field(default=None, description="Reported pada")
    tense: Optional[Tense] = Field(default=None, description="Tense of the first match")
    description: str = Field(default="", description="Human-readable summary")
    candidates: list[Pada] = Field(
        default_factory=list,
        description="Every pada whose table contains the affix",
    )

    @computed_field
    @property
    def is_ambiguous(self) -> bool:
        """Whether the affix occurs in more than one pada table."""
        return len(self.candidates) > 1

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "is_valid": True,
                    "affix": "ति",
                    "script": "Devanagari",
                    "pada": "parasmaipada",
                    "tense": "lat",
                    "description": "Parasmaipada (active voice) affix",
                    "candidates": ["parasmaipada"],
                }
            ]
        }
    }


class PadaValidationReport(BaseModel):
    """Diagnostics for an affix analysis against an optional expectation."""

    is_valid: bool = Field(..., description="False on invalid input or contradiction")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    analysis: Optional[PadaClassification] = Field(
        default=None,
        description="Underlying classification (None for invalid input)",
    )


class PhonemeSequenceReport(BaseModel):
    """Classification of an already-tokenized phoneme sequence."""

    is_valid: bool = Field(..., description="Whether every entry is a known phoneme")
    vowels: list[int] = Field(default_factory=list, description="Indices of vowels")
    consonants: list[int] = Field(default_factory=list, description="Indices of consonants")
    others: list[int] = Field(
        default_factory=list,
        description="Indices of anusvara, candrabindu, visarga and avagraha",
    )
    invalid: list[int] = Field(default_factory=list, description="Indices of unknown entries")
    error: Optional[str] = Field(default=None, description="Reason the sequence is invalid")
    structure: str = Field(
        default="",
        description="Entry kinds joined by '-', e.g. 'consonant-vowel-other'",
    )

    @computed_field
    @property
    def vowel_count(self) -> int:
        return len(self.vowels)

    @computed_field
    @property
    def consonant_count(self) -> int:
        return len(self.consonants)
