"""
Core modules for Vyakarana library.

This package contains the analysis components:
- Script detection
- Phoneme tokenization
- Phonological classification
- Word validation
- Affix pada classification
- Transliteration between Devanagari and IAST
"""

from vyakarana.core.script import detect_script, normalize_text
from vyakarana.core.tokenizer import tokenize_phonemes
from vyakarana.core.classifier import (
    analyze_first_vowel,
    are_savarna,
    get_articulation_place,
    get_canonical_phoneme,
    get_guna_form,
    get_savarna_group,
    get_vowel_category,
    get_vrddhi_form,
    is_anusvara,
    is_consonant,
    is_eng_vowel,
    is_guna,
    is_ik_vowel,
    is_long_vowel,
    is_visarga,
    is_vowel,
    is_vrddhi,
)
from vyakarana.core.validator import validate_phoneme_sequence, validate_sanskrit_word
from vyakarana.core.pada import (
    get_affix_pada,
    get_affixes_by_pada,
    is_atmanepada_affix,
    is_parasmaipada_affix,
    suggest_affixes,
    validate_pada_analysis,
)
from vyakarana.core.transliteration import transliterate

__all__ = [
    # Script
    "detect_script",
    "normalize_text",
    # Tokenizer
    "tokenize_phonemes",
    # Classifier
    "analyze_first_vowel",
    "are_savarna",
    "get_articulation_place",
    "get_canonical_phoneme",
    "get_guna_form",
    "get_savarna_group",
    "get_vowel_category",
    "get_vrddhi_form",
    "is_anusvara",
    "is_consonant",
    "is_eng_vowel",
    "is_guna",
    "is_ik_vowel",
    "is_long_vowel",
    "is_visarga",
    "is_vowel",
    "is_vrddhi",
    # Validator
    "validate_phoneme_sequence",
    "validate_sanskrit_word",
    # Pada
    "get_affix_pada",
    "get_affixes_by_pada",
    "is_atmanepada_affix",
    "is_parasmaipada_affix",
    "suggest_affixes",
    "validate_pada_analysis",
    # Transliteration
    "transliterate",
]
