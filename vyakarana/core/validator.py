"""
Whole-word validation.

The validator is the strict counterpart of the tokenizer: a word is valid
only if every code point resolves to a known phoneme of its script.
"""

from typing import Any

from vyakarana.core.classifier import get_canonical_phoneme, is_consonant, is_vowel
from vyakarana.core.script import coerce_text, detect_script, first_foreign_position
from vyakarana.core.tokenizer import tokenize_phonemes
from vyakarana.exceptions import InvalidInputError
from vyakarana.models.enums import Script, ValidationErrorType
from vyakarana.models.phoneme import TokenizationResult
from vyakarana.models.result import PhonemeSequenceReport, ValidationResult


def _invalid(error: str, error_type: ValidationErrorType, **fields) -> ValidationResult:
    return ValidationResult(is_valid=False, error=error, error_type=error_type, **fields)


def validate_sanskrit_word(word: Any) -> ValidationResult:
    """
    Check that a word is made only of recognized phonemes.

    Surrounding whitespace is ignored. Never raises: non-string input,
    empty input, unsupported scripts and unrecognized code points are all
    reported through the result.

    Args:
        word: Word in Devanagari or IAST

    Returns:
        ValidationResult; ``fault_position`` indexes the normalized,
        stripped word

    Example:
        >>> validate_sanskrit_word("रामः").is_valid
        True
        >>> validate_sanskrit_word("").error
        'Input cannot be empty'
    """
    try:
        text = coerce_text(word, "word", strip=True)
    except InvalidInputError:
        if isinstance(word, str):
            return _invalid("Input cannot be empty", ValidationErrorType.EMPTY_INPUT)
        return _invalid("Input must be a string", ValidationErrorType.TYPE_ERROR)

    script = detect_script(text)
    if script is Script.UNKNOWN:
        position = first_foreign_position(text)
        return _invalid(
            "Input is not in a supported script (Devanagari or IAST)",
            ValidationErrorType.INVALID_SCRIPT,
            fault_position=position if position is not None else 0,
            word=text,
        )

    tokens = tokenize_phonemes(text)
    unit = tokens.first_unresolved()
    if unit is not None:
        return _invalid(
            f"Unrecognized character '{unit.character}' at position {unit.position}",
            ValidationErrorType.UNRECOGNIZED_UNIT,
            fault_position=unit.position,
            word=text,
            script=script,
            phoneme_count=tokens.count,
        )

    if not tokens.phonemes:
        return _invalid(
            "No phonemes found in input",
            ValidationErrorType.NO_PHONEMES,
            word=text,
            script=script,
        )

    return ValidationResult(
        is_valid=True,
        word=text,
        script=script,
        phoneme_count=tokens.count,
    )


def validate_phoneme_sequence(phonemes: Any) -> PhonemeSequenceReport:
    """
    Classify every entry of an already-tokenized phoneme sequence.

    Args:
        phonemes: List or tuple of surface strings or Phoneme objects

    Returns:
        PhonemeSequenceReport with entry indices grouped by kind
    """
    if isinstance(phonemes, TokenizationResult):
        phonemes = phonemes.phonemes
    if not isinstance(phonemes, (list, tuple)):
        return PhonemeSequenceReport(is_valid=False, error="Phonemes must be a list")
    if not phonemes:
        return PhonemeSequenceReport(is_valid=False, error="Phoneme sequence cannot be empty")

    report = PhonemeSequenceReport(is_valid=True)
    kinds = []
    for index, phoneme in enumerate(phonemes):
        if is_vowel(phoneme):
            report.vowels.append(index)
            kinds.append("vowel")
        elif is_consonant(phoneme):
            report.consonants.append(index)
            kinds.append("consonant")
        elif get_canonical_phoneme(phoneme) is not None:
            report.others.append(index)
            kinds.append("other")
        else:
            report.invalid.append(index)
            kinds.append("invalid")
    report.structure = "-".join(kinds)

    if report.invalid:
        report.is_valid = False
        report.error = f"Unrecognized phoneme at index {report.invalid[0]}"
    return report
