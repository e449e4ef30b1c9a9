"""
Transliteration between Devanagari and IAST.

Works phoneme by phoneme through the shared inventory: the tokenizer reads
the source script and each canonical sound is written back in the target
script. Unrecognized code points (spaces, digits, punctuation) are copied
through unchanged.
"""

from typing import Any, Union

from vyakarana._logging import log_warning
from vyakarana.core.tokenizer import tokenize_phonemes
from vyakarana.data.inventory import VIRAMA, lookup
from vyakarana.models.enums import PhonemeKind, Script
from vyakarana.models.phoneme import Phoneme, TokenizationResult


def _ordered_units(tokens: TokenizationResult) -> list[Union[Phoneme, str]]:
    """Phonemes and unresolved characters merged back into input order."""
    keyed = [(p.position, 0, i, p) for i, p in enumerate(tokens.phonemes)]
    keyed += [(u.position, 1, i, u.character) for i, u in enumerate(tokens.unresolved)]
    keyed.sort(key=lambda item: item[:3])
    return [unit for *_, unit in keyed]


def _to_iast(units: list[Union[Phoneme, str]]) -> str:
    return "".join(unit if isinstance(unit, str) else unit.sound for unit in units)


def _to_devanagari(units: list[Union[Phoneme, str]]) -> str:
    parts = []
    for index, unit in enumerate(units):
        if isinstance(unit, str):
            parts.append(unit)
            continue

        spec = lookup(unit.sound)
        if unit.kind is PhonemeKind.VOWEL:
            previous = units[index - 1] if index > 0 else None
            if not (isinstance(previous, Phoneme) and previous.is_consonant):
                parts.append(spec.devanagari)
            elif spec.matra:
                parts.append(spec.matra)
            # inherent a is not written after a consonant
            continue

        parts.append(spec.devanagari)
        if unit.kind is PhonemeKind.CONSONANT:
            following = units[index + 1] if index + 1 < len(units) else None
            if not (isinstance(following, Phoneme) and following.is_vowel):
                parts.append(VIRAMA)
    return "".join(parts)


def transliterate(word: Any, target: Union[Script, str]) -> str:
    """
    Convert a word between Devanagari and IAST.

    Args:
        word: Word in Devanagari or IAST
        target: Script.DEVANAGARI or Script.IAST (or their names)

    Returns:
        The word in the target script. Text already in the target script,
        text in no supported script and unsupported targets are returned
        normalized but otherwise unchanged; non-string input gives "".

    Example:
        >>> transliterate("रामः", "iast")
        'rāmaḥ'
        >>> transliterate("kṛṣṇa", Script.DEVANAGARI)
        'कृष्ण'
    """
    if not isinstance(word, str):
        return ""

    target_script = Script.parse(target)
    tokens = tokenize_phonemes(word, accurate=False)
    if target_script not in (Script.DEVANAGARI, Script.IAST):
        log_warning("Unsupported transliteration target", target=target)
        return tokens.word or word
    if tokens.script is Script.UNKNOWN or tokens.script is target_script:
        return tokens.word or word

    units = _ordered_units(tokens)
    if target_script is Script.IAST:
        return _to_iast(units)
    return _to_devanagari(units)
