"""
व्याकरण (Vyakarana) - Phonological and morphological analysis for Sanskrit.

Usage:
    from vyakarana.core import analyze_first_vowel, get_affix_pada, tokenize_phonemes

    # Tokenize
    result = tokenize_phonemes("रामः")
    print([p.sound for p in result.phonemes])  # ['r', 'ā', 'm', 'a', 'ḥ']

    # Classify
    analysis = analyze_first_vowel("ātmā")
    print(analysis.first_vowel, analysis.is_vrddhi)  # ā True

    # Affix voice
    pada = get_affix_pada("ते")
    print(pada.pada.value, pada.tense.value)  # atmanepada lat
"""

from vyakarana.models import (
    FirstVowelAnalysis,
    Pada,
    PadaClassification,
    PadaValidationReport,
    Phoneme,
    PhonemeKind,
    PhonemeSequenceReport,
    Script,
    Tense,
    TokenizationResult,
    UnresolvedUnit,
    ValidationErrorType,
    ValidationResult,
    VowelOccurrence,
)
from vyakarana.config import VyakaranaSettings, configure, get_settings, reset_settings
from vyakarana.exceptions import (
    VyakaranaError,
    ConfigurationError,
    InvalidInputError,
    ReferenceDataError,
)
from vyakarana.core import (
    analyze_first_vowel,
    detect_script,
    get_affix_pada,
    get_affixes_by_pada,
    is_atmanepada_affix,
    is_consonant,
    is_eng_vowel,
    is_guna,
    is_parasmaipada_affix,
    is_vowel,
    is_vrddhi,
    tokenize_phonemes,
    transliterate,
    validate_pada_analysis,
    validate_sanskrit_word,
)

__version__ = "0.1.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "FirstVowelAnalysis",
    "Pada",
    "PadaClassification",
    "PadaValidationReport",
    "Phoneme",
    "PhonemeKind",
    "PhonemeSequenceReport",
    "Script",
    "Tense",
    "TokenizationResult",
    "UnresolvedUnit",
    "ValidationErrorType",
    "ValidationResult",
    "VowelOccurrence",
    # Config
    "VyakaranaSettings",
    "configure",
    "get_settings",
    "reset_settings",
    # Exceptions
    "VyakaranaError",
    "ConfigurationError",
    "InvalidInputError",
    "ReferenceDataError",
    # Analysis
    "analyze_first_vowel",
    "detect_script",
    "get_affix_pada",
    "get_affixes_by_pada",
    "is_atmanepada_affix",
    "is_consonant",
    "is_eng_vowel",
    "is_guna",
    "is_parasmaipada_affix",
    "is_vowel",
    "is_vrddhi",
    "tokenize_phonemes",
    "transliterate",
    "validate_pada_analysis",
    "validate_sanskrit_word",
]
