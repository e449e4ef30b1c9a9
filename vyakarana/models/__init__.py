"""
Pydantic data models for Vyakarana library.

These models represent the values passed between the analysis components:
- Script, Tense, Pada: closed enumerations used as keys
- Phoneme, TokenizationResult: tokenizer output
- ValidationResult: whole-word validation outcome
- FirstVowelAnalysis: first-vowel classification of a word
- PadaClassification, PadaValidationReport: affix voice analysis
"""

from vyakarana.models.enums import (
    Pada,
    PhonemeKind,
    Script,
    Tense,
    ValidationErrorType,
)
from vyakarana.models.phoneme import Phoneme, TokenizationResult, UnresolvedUnit
from vyakarana.models.result import (
    FirstVowelAnalysis,
    PadaClassification,
    PadaValidationReport,
    PhonemeSequenceReport,
    ValidationResult,
    VowelOccurrence,
)

__all__ = [
    "Pada",
    "PhonemeKind",
    "Script",
    "Tense",
    "ValidationErrorType",
    "Phoneme",
    "TokenizationResult",
    "UnresolvedUnit",
    "FirstVowelAnalysis",
    "PadaClassification",
    "PadaValidationReport",
    "PhonemeSequenceReport",
    "ValidationResult",
    "VowelOccurrence",
]
