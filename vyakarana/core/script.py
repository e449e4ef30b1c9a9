"""
Script detection.

Classifies text as Devanagari, IAST or Unknown. Mixed-script text takes
the script of its first recognized character.
"""

import re
import unicodedata
from typing import Any, Optional

from vyakarana.config import get_settings
from vyakarana.exceptions import InvalidInputError
from vyakarana.models.enums import Script


# Zero-width joiners/spaces and BOM left behind by copy-paste
_ZERO_WIDTH = re.compile(r"[\u200B-\u200D\uFEFF]")

# Devanagari, Devanagari Extended and Vedic Extensions blocks
_DEVANAGARI_RANGES = (
    (0x0900, 0x097F),
    (0xA8E0, 0xA8FF),
    (0x1CD0, 0x1CFF),
)

IAST_DIACRITIC_LETTERS = frozenset("āīūṛṝḷḹṅñṭḍṇśṣḥṃṁĀĪŪṚṜḶḸṄÑṬḌṆŚṢḤṂṀ")

# Non-letters that may appear inside IAST text
_IAST_PUNCTUATION = frozenset("'’-")


def normalize_text(text: str) -> str:
    """
    Apply the configured Unicode normalization and drop zero-width characters.

    Args:
        text: Raw input text

    Returns:
        Normalized text
    """
    form = get_settings().unicode_form
    return _ZERO_WIDTH.sub("", unicodedata.normalize(form, text))


def coerce_text(value: Any, argument: str, strip: bool = False) -> str:
    """
    Check that an argument is a non-empty string and normalize it.

    Args:
        value: Argument as received at the public boundary
        argument: Argument name, for the error context
        strip: Also strip surrounding whitespace

    Returns:
        Normalized text

    Raises:
        InvalidInputError: If the value is not a string or is empty
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"{argument} must be a string", argument=argument, value=value)
    text = normalize_text(value)
    if strip:
        text = text.strip()
    if not text:
        raise InvalidInputError(f"{argument} cannot be empty", argument=argument)
    return text


def is_devanagari_char(char: str) -> bool:
    """Whether a single character lies in a Devanagari block."""
    code = ord(char)
    return any(start <= code <= end for start, end in _DEVANAGARI_RANGES)


def is_iast_letter(char: str) -> bool:
    """Whether a single character is a letter of the IAST alphabet."""
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char in IAST_DIACRITIC_LETTERS


def _is_combining_mark(char: str) -> bool:
    return 0x0300 <= ord(char) <= 0x036F


def is_iast_char(char: str) -> bool:
    """Whether a character may appear in IAST text."""
    return (
        is_iast_letter(char)
        or _is_combining_mark(char)
        or char.isspace()
        or char in _IAST_PUNCTUATION
    )


def _first_recognized(text: str) -> Optional[Script]:
    for char in text:
        if is_devanagari_char(char):
            return Script.DEVANAGARI
        if is_iast_letter(char):
            return Script.IAST
    return None


def first_foreign_position(text: str) -> Optional[int]:
    """
    Index of the first character belonging to neither supported script.

    Whitespace and IAST punctuation are not foreign.
    """
    for index, char in enumerate(text):
        if not (is_devanagari_char(char) or is_iast_char(char)):
            return index
    return None


def detect_script(text: Any) -> Script:
    """
    Detect the script of a string.

    Total and side-effect free: non-string and empty input return
    Script.UNKNOWN.

    Args:
        text: Text to classify

    Returns:
        DEVANAGARI if the first recognized character is Devanagari,
        IAST if it is a Latin letter and the whole text is IAST (mixed
        Devanagari allowed), UNKNOWN otherwise
    """
    if not isinstance(text, str) or not text:
        return Script.UNKNOWN

    normalized = normalize_text(text)
    script = _first_recognized(normalized)

    if script is Script.IAST and first_foreign_position(normalized) is not None:
        return Script.UNKNOWN
    return script or Script.UNKNOWN
