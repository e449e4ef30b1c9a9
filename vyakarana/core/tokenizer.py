"""
Phoneme tokenizer for Devanagari and IAST.

Devanagari is read as an abugida: every consonant letter carries an
implicit short a unless a vowel sign or a virama follows it. IAST is
segmented by longest match against the shared phoneme inventory so that
digraphs such as "kh" and diphthongs such as "ai" are never split.
"""

from typing import Any, Optional

from vyakarana._logging import log_unresolved_units
from vyakarana.config import get_settings
from vyakarana.core.script import coerce_text, detect_script
from vyakarana.data.inventory import (
    DEVANAGARI_CONSONANTS,
    DEVANAGARI_MARKS,
    DEVANAGARI_MATRAS,
    DEVANAGARI_VOWELS,
    IAST_MAX_UNIT_LENGTH,
    IAST_UNITS,
    VIRAMA,
    lookup,
    to_devanagari_letter,
)
from vyakarana.exceptions import InvalidInputError
from vyakarana.models.enums import PhonemeKind, Script
from vyakarana.models.phoneme import Phoneme, TokenizationResult, UnresolvedUnit


_INHERENT_A = to_devanagari_letter("a")


class _Collector:
    """Accumulates phonemes and unresolved units for one word."""

    def __init__(self, script: Script):
        self.script = script
        self.phonemes: list[Phoneme] = []
        self.unresolved: list[UnresolvedUnit] = []

    def add(
        self,
        text: str,
        surface: str,
        sound: str,
        kind: PhonemeKind,
        position: int,
        inherent: bool = False,
        components: tuple[str, ...] = (),
    ) -> None:
        self.phonemes.append(
            Phoneme(
                text=text,
                surface=surface,
                sound=sound,
                script=self.script,
                kind=kind,
                position=position,
                inherent=inherent,
                components=components,
            )
        )

    def add_sound(self, text: str, surface: str, sound: str, position: int) -> None:
        self.add(text, surface, sound, lookup(sound).kind, position)

    def skip(self, character: str, position: int) -> None:
        self.unresolved.append(UnresolvedUnit(position=position, character=character))


def _read_consonant_run(word: str, start: int, accurate: bool) -> tuple[list[str], int, bool]:
    """
    Read a consonant, plus any virama-joined consonants in accurate mode.

    Returns:
        (consonant letters, index after the run, whether a final virama closed it)
    """
    letters = [word[start]]
    i = start + 1
    n = len(word)
    while i < n and word[i] == VIRAMA:
        if accurate and i + 1 < n and word[i + 1] in DEVANAGARI_CONSONANTS:
            letters.append(word[i + 1])
            i += 2
            continue
        return letters, i + 1, True
    return letters, i, False


def _tokenize_devanagari(word: str, accurate: bool, out: _Collector) -> None:
    i = 0
    n = len(word)
    while i < n:
        char = word[i]

        if char in DEVANAGARI_VOWELS:
            out.add_sound(char, char, DEVANAGARI_VOWELS[char], i)
            i += 1
            continue

        if char in DEVANAGARI_MARKS:
            out.add_sound(char, char, DEVANAGARI_MARKS[char], i)
            i += 1
            continue

        if char not in DEVANAGARI_CONSONANTS:
            # Stray virama or vowel sign, digits, punctuation, Latin letters
            out.skip(char, i)
            i += 1
            continue

        start = i
        letters, i, closed = _read_consonant_run(word, start, accurate)
        surface = word[start:i]
        sounds = tuple(DEVANAGARI_CONSONANTS[letter] for letter in letters)

        if len(sounds) > 1:
            out.add(
                VIRAMA.join(letters),
                surface,
                "".join(sounds),
                PhonemeKind.CLUSTER,
                start,
                components=sounds,
            )
        else:
            out.add(letters[0], surface, sounds[0], PhonemeKind.CONSONANT, start)

        if closed:
            continue

        if i < n and word[i] in DEVANAGARI_MATRAS:
            sound = DEVANAGARI_MATRAS[word[i]]
            out.add(lookup(sound).devanagari, word[i], sound, PhonemeKind.VOWEL, i)
            i += 1
        else:
            out.add(_INHERENT_A, "", "a", PhonemeKind.VOWEL, i, inherent=True)


def _tokenize_iast(word: str, out: _Collector) -> None:
    lowered = word.lower()
    # Case-folding must not shift positions
    if len(lowered) != len(word):
        lowered = word

    i = 0
    n = len(word)
    while i < n:
        for length in range(min(IAST_MAX_UNIT_LENGTH, n - i), 0, -1):
            sound = IAST_UNITS.get(lowered[i:i + length])
            if sound is not None:
                out.add_sound(sound, word[i:i + length], sound, i)
                i += length
                break
        else:
            out.skip(word[i], i)
            i += 1


def tokenize_phonemes(word: Any, accurate: Optional[bool] = None) -> TokenizationResult:
    """
    Segment a word into phonemes.

    Best-effort: unrecognized code points are reported in
    ``result.unresolved`` and tokenization continues after them. Non-string,
    empty and Unknown-script input yield an empty result.

    Args:
        word: Word in Devanagari or IAST
        accurate: Merge virama-joined Devanagari consonants into one cluster
            phoneme (default: the ``accurate_tokenization`` setting)

    Returns:
        TokenizationResult with phonemes in input order

    Example:
        >>> [p.sound for p in tokenize_phonemes("कृष्ण").phonemes]
        ['k', 'ṛ', 'ṣ', 'ṇ', 'a']
    """
    if accurate is None:
        accurate = get_settings().accurate_tokenization

    try:
        text = coerce_text(word, "word")
    except InvalidInputError:
        return TokenizationResult(accurate=accurate)

    script = detect_script(text)
    if script is Script.UNKNOWN:
        return TokenizationResult(word=text, accurate=accurate)

    out = _Collector(script)
    if script is Script.DEVANAGARI:
        _tokenize_devanagari(text, accurate, out)
    else:
        _tokenize_iast(text, out)

    if out.unresolved:
        log_unresolved_units(text, script.value, [u.position for u in out.unresolved])

    return TokenizationResult(
        word=text,
        script=script,
        accurate=accurate,
        phonemes=tuple(out.phonemes),
        unresolved=tuple(out.unresolved),
    )
