"""
Phonological classification of phonemes.

Every predicate resolves its argument to a canonical sound through the
shared inventory and tests category membership there, so the answer for
"ā", "आ" and the vowel sign "ा" is always the same. Arguments may be a
surface string in either script or a Phoneme from the tokenizer.
Anything that is not a single known phoneme is simply not a member.
"""

import unicodedata
from typing import Any, Optional, Union

from vyakarana.core.script import coerce_text, is_devanagari_char
from vyakarana.core.tokenizer import tokenize_phonemes
from vyakarana.data.inventory import (
    ENG,
    GUNA,
    GUNA_GRADES,
    IAST_MAX_UNIT_LENGTH,
    IAST_UNITS,
    IK,
    INVENTORY,
    VIRAMA,
    VRDDHI,
    VRDDHI_GRADES,
    PhonemeSpec,
    lookup,
    resolve_surface,
)
from vyakarana.exceptions import InvalidInputError
from vyakarana.models.enums import PhonemeKind, Script
from vyakarana.models.phoneme import Phoneme
from vyakarana.models.result import FirstVowelAnalysis, VowelOccurrence


PhonemeLike = Union[str, Phoneme]


def get_canonical_phoneme(phoneme: Any) -> Optional[str]:
    """
    Canonical identity (IAST spelling) of a phoneme.

    Args:
        phoneme: Surface form in either script, or a Phoneme

    Returns:
        Canonical sound such as "ā" or "kh", or None if unknown

    Example:
        >>> get_canonical_phoneme("ि")
        'i'
    """
    if isinstance(phoneme, Phoneme):
        return phoneme.sound if phoneme.sound in INVENTORY else None
    if not isinstance(phoneme, str) or not phoneme:
        return None
    text = unicodedata.normalize("NFC", phoneme.strip())
    if len(text) == 2 and text.endswith(VIRAMA):
        # Dead consonant such as "क्"
        sound = resolve_surface(text[0])
        spec = lookup(sound) if sound else None
        return sound if spec and spec.kind is PhonemeKind.CONSONANT else None
    return resolve_surface(text)


def _spec(phoneme: Any) -> Optional[PhonemeSpec]:
    sound = get_canonical_phoneme(phoneme)
    return lookup(sound) if sound else None


def _in_category(phoneme: Any, category: str) -> bool:
    spec = _spec(phoneme)
    return spec is not None and spec.has(category)


def is_vowel(phoneme: PhonemeLike) -> bool:
    """Whether the phoneme is one of the fourteen vowels."""
    spec = _spec(phoneme)
    return spec is not None and spec.kind is PhonemeKind.VOWEL


def is_consonant(phoneme: PhonemeLike) -> bool:
    """
    Whether the phoneme is a consonant.

    Consonant clusters from accurate tokenization count as consonants.
    Anusvara and visarga do not.
    """
    if isinstance(phoneme, Phoneme) and phoneme.kind is PhonemeKind.CLUSTER:
        return True
    if _is_cluster_text(phoneme):
        return True
    spec = _spec(phoneme)
    return spec is not None and spec.kind is PhonemeKind.CONSONANT


def is_vrddhi(phoneme: PhonemeLike) -> bool:
    """Whether the phoneme is ā, ai or au."""
    return _in_category(phoneme, VRDDHI)


def is_guna(phoneme: PhonemeLike) -> bool:
    """Whether the phoneme is a, e or o."""
    return _in_category(phoneme, GUNA)


def is_eng_vowel(phoneme: PhonemeLike) -> bool:
    """Whether the phoneme is e or o (the eṅ vowels)."""
    return _in_category(phoneme, ENG)


def is_ik_vowel(phoneme: PhonemeLike) -> bool:
    """Whether the phoneme is one of i, u, ṛ, ḷ, short or long."""
    return _in_category(phoneme, IK)


def is_long_vowel(phoneme: PhonemeLike) -> bool:
    spec = _spec(phoneme)
    return spec is not None and spec.kind is PhonemeKind.VOWEL and spec.long


def is_anusvara(phoneme: PhonemeLike) -> bool:
    spec = _spec(phoneme)
    return spec is not None and spec.kind is PhonemeKind.ANUSVARA


def is_visarga(phoneme: PhonemeLike) -> bool:
    spec = _spec(phoneme)
    return spec is not None and spec.kind is PhonemeKind.VISARGA


def get_articulation_place(phoneme: PhonemeLike) -> Optional[str]:
    """
    Place of articulation of a vowel or consonant.

    Returns:
        One of "guttural", "palatal", "retroflex", "dental", "labial",
        or None for marks and unknown input
    """
    spec = _spec(phoneme)
    return spec.place if spec else None


def get_vowel_category(phoneme: PhonemeLike) -> Optional[str]:
    """Descriptive vowel category such as "long-a" or "diphthong-ai"."""
    spec = _spec(phoneme)
    return spec.vowel_category if spec else None


def are_savarna(first: PhonemeLike, second: PhonemeLike) -> bool:
    """
    Whether two phonemes are homorganic (savarṇa).

    Vowels pair with their long/short counterparts (ṛ and ḷ pair with each
    other), stops pair within their class. A vowel is never savarṇa with a
    consonant.
    """
    a, b = _spec(first), _spec(second)
    if a is None or b is None or a.savarna_class is None:
        return False
    if a.kind is not b.kind:
        return False
    return a.savarna_class == b.savarna_class


def get_savarna_group(phoneme: PhonemeLike) -> list[str]:
    """
    All phonemes homorganic with the given one, in the input's script.

    Returns:
        Members in inventory order (including the phoneme itself), or an
        empty list for unknown input
    """
    spec = _spec(phoneme)
    if spec is None or spec.savarna_class is None:
        return []
    devanagari = _script_of(phoneme) is Script.DEVANAGARI
    return [
        member.devanagari if devanagari else member.sound
        for member in INVENTORY.values()
        if member.kind is spec.kind and member.savarna_class == spec.savarna_class
    ]


def _split_iast_units(text: str) -> Optional[list[str]]:
    """Longest-match split of Latin text into IAST units, or None if any part is unknown."""
    units = []
    index = 0
    while index < len(text):
        for size in range(min(IAST_MAX_UNIT_LENGTH, len(text) - index), 0, -1):
            chunk = text[index:index + size]
            if chunk in IAST_UNITS:
                units.append(IAST_UNITS[chunk])
                index += size
                break
        else:
            return None
    return units


def _is_cluster_text(phoneme: Any) -> bool:
    """
    Whether a string spells a consonant cluster in either script.

    Devanagari clusters are virama-joined consonants such as "क्ष"; IAST
    clusters are two or more consonant units such as "kṣ".
    """
    if not isinstance(phoneme, str):
        return False
    text = unicodedata.normalize("NFC", phoneme.strip())
    if VIRAMA in text:
        letters = text.rstrip(VIRAMA).split(VIRAMA)
        return len(letters) > 1 and all(is_consonant(letter) for letter in letters)
    if not text or any(is_devanagari_char(c) for c in text):
        return False
    lowered = text.lower()
    sounds = _split_iast_units(lowered if len(lowered) == len(text) else text)
    return (
        sounds is not None
        and len(sounds) > 1
        and all(lookup(sound).kind is PhonemeKind.CONSONANT for sound in sounds)
    )


def _script_of(phoneme: Any) -> Script:
    if isinstance(phoneme, Phoneme):
        return phoneme.script
    if isinstance(phoneme, str) and any(is_devanagari_char(c) for c in phoneme):
        return Script.DEVANAGARI
    return Script.IAST


def _render(sounds: tuple[str, ...], script: Script) -> str:
    if script is not Script.DEVANAGARI:
        return "".join(sounds)
    parts = []
    for sound in sounds:
        spec = lookup(sound)
        if spec.kind is PhonemeKind.CONSONANT:
            parts.append(spec.devanagari + VIRAMA)
        else:
            parts.append(spec.devanagari)
    return "".join(parts)


def get_guna_form(vowel: PhonemeLike) -> Optional[str]:
    """
    Guṇa grade of a vowel, written in the vowel's own script.

    a, e and o are already guṇa and are returned unchanged.

    Example:
        >>> get_guna_form("ṛ")
        'ar'
        >>> get_guna_form("ऋ")
        'अर्'
    """
    spec = _spec(vowel)
    if spec is None or spec.kind is not PhonemeKind.VOWEL:
        return None
    if spec.has(GUNA):
        grade = (spec.sound,)
    else:
        grade = GUNA_GRADES.get(spec.sound)
    return _render(grade, _script_of(vowel)) if grade else None


def get_vrddhi_form(vowel: PhonemeLike) -> Optional[str]:
    """
    Vṛddhi grade of a vowel, written in the vowel's own script.

    ā, ai and au are already vṛddhi and are returned unchanged; e and o
    strengthen to ai and au.
    """
    spec = _spec(vowel)
    if spec is None or spec.kind is not PhonemeKind.VOWEL:
        return None
    if spec.has(VRDDHI):
        grade = (spec.sound,)
    else:
        grade = VRDDHI_GRADES.get(spec.sound)
    return _render(grade, _script_of(vowel)) if grade else None


def analyze_first_vowel(word: Any) -> FirstVowelAnalysis:
    """
    Find and classify the first vowel of a word.

    Args:
        word: Word in Devanagari or IAST

    Returns:
        FirstVowelAnalysis; ``first_vowel`` is None and ``position`` is -1
        when the word has no vowel or is not a string

    Example:
        >>> result = analyze_first_vowel("ātmā")
        >>> result.first_vowel, result.position, result.is_vrddhi
        ('ā', 0, True)
    """
    try:
        text = coerce_text(word, "word", strip=True)
    except InvalidInputError:
        return FirstVowelAnalysis()

    tokens = tokenize_phonemes(text)
    vowels = [
        VowelOccurrence(phoneme=p.text, sound=p.sound, position=index)
        for index, p in enumerate(tokens.phonemes)
        if p.is_vowel
    ]
    if not vowels:
        return FirstVowelAnalysis(word=text, script=tokens.script)

    first = vowels[0]
    return FirstVowelAnalysis(
        word=text,
        script=tokens.script,
        first_vowel=first.phoneme,
        position=first.position,
        is_vrddhi=is_vrddhi(first.sound),
        is_guna=is_guna(first.sound),
        is_eng_vowel=is_eng_vowel(first.sound),
        all_vowels=vowels,
    )
