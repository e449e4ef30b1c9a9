"""
Sanskrit phoneme inventory.

Every phoneme is keyed by its canonical identity (the IAST spelling) and
carries its surface forms in both scripts together with its category
flags. All per-script lookup tables below are derived from this single
table, so a category test gives the same answer for "ā", "आ" and "ा".
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from vyakarana.models.enums import PhonemeKind


VIRAMA = "\u094d"  # halanta

# Vowel categories
VRDDHI = "vrddhi"
GUNA = "guna"
IK = "ik"
ENG = "eng"

# Places of articulation
GUTTURAL = "guttural"
PALATAL = "palatal"
RETROFLEX = "retroflex"
DENTAL = "dental"
LABIAL = "labial"


@dataclass(frozen=True)
class PhonemeSpec:
    """A single entry of the phoneme inventory."""

    sound: str  # Canonical identity (IAST)
    kind: PhonemeKind
    devanagari: str  # Independent letter, consonant letter or sign
    matra: Optional[str] = None  # Dependent vowel sign ("" for inherent a)
    place: Optional[str] = None
    long: bool = False
    categories: frozenset[str] = field(default_factory=frozenset)
    savarna_class: Optional[str] = None
    vowel_category: Optional[str] = None
    iast_variants: tuple[str, ...] = ()

    @property
    def iast_spellings(self) -> tuple[str, ...]:
        """All accepted IAST spellings, canonical first."""
        return (self.sound,) + self.iast_variants

    def has(self, category: str) -> bool:
        """Whether the phoneme belongs to a vowel category."""
        return category in self.categories


def _vowel(sound, devanagari, matra, place, long, categories, savarna_class, vowel_category):
    return PhonemeSpec(
        sound=sound,
        kind=PhonemeKind.VOWEL,
        devanagari=devanagari,
        matra=matra,
        place=place,
        long=long,
        categories=frozenset(categories),
        savarna_class=savarna_class,
        vowel_category=vowel_category,
    )


def _consonant(sound, devanagari, place, savarna_class=None):
    return PhonemeSpec(
        sound=sound,
        kind=PhonemeKind.CONSONANT,
        devanagari=devanagari,
        place=place,
        savarna_class=savarna_class or sound,
    )


VOWELS: tuple[PhonemeSpec, ...] = (
    _vowel("a", "अ", "", GUTTURAL, False, {GUNA}, "a", "basic-a"),
    _vowel("ā", "आ", "ा", GUTTURAL, True, {VRDDHI}, "a", "long-a"),
    _vowel("i", "इ", "ि", PALATAL, False, {IK}, "i", "high-front-short"),
    _vowel("ī", "ई", "ी", PALATAL, True, {IK}, "i", "high-front-long"),
    _vowel("u", "उ", "ु", LABIAL, False, {IK}, "u", "high-back-short"),
    _vowel("ū", "ऊ", "ू", LABIAL, True, {IK}, "u", "high-back-long"),
    _vowel("ṛ", "ऋ", "ृ", RETROFLEX, False, {IK}, "ṛ", "vocalic-r-short"),
    _vowel("ṝ", "ॠ", "ॄ", RETROFLEX, True, {IK}, "ṛ", "vocalic-r-long"),
    # ṛ and ḷ are treated as savarna of each other
    _vowel("ḷ", "ऌ", "ॢ", DENTAL, False, {IK}, "ṛ", "vocalic-l-short"),
    _vowel("ḹ", "ॡ", "ॣ", DENTAL, True, {IK}, "ṛ", "vocalic-l-long"),
    _vowel("e", "ए", "े", PALATAL, True, {GUNA, ENG}, "e", "front-mid"),
    _vowel("ai", "ऐ", "ै", PALATAL, True, {VRDDHI}, "ai", "diphthong-ai"),
    _vowel("o", "ओ", "ो", LABIAL, True, {GUNA, ENG}, "o", "back-mid"),
    _vowel("au", "औ", "ौ", LABIAL, True, {VRDDHI}, "au", "diphthong-au"),
)

CONSONANTS: tuple[PhonemeSpec, ...] = (
    # Velars
    _consonant("k", "क", GUTTURAL, "ku"),
    _consonant("kh", "ख", GUTTURAL, "ku"),
    _consonant("g", "ग", GUTTURAL, "ku"),
    _consonant("gh", "घ", GUTTURAL, "ku"),
    _consonant("ṅ", "ङ", GUTTURAL, "ku"),
    # Palatals
    _consonant("c", "च", PALATAL, "cu"),
    _consonant("ch", "छ", PALATAL, "cu"),
    _consonant("j", "ज", PALATAL, "cu"),
    _consonant("jh", "झ", PALATAL, "cu"),
    _consonant("ñ", "ञ", PALATAL, "cu"),
    # Retroflexes
    _consonant("ṭ", "ट", RETROFLEX, "ṭu"),
    _consonant("ṭh", "ठ", RETROFLEX, "ṭu"),
    _consonant("ḍ", "ड", RETROFLEX, "ṭu"),
    _consonant("ḍh", "ढ", RETROFLEX, "ṭu"),
    _consonant("ṇ", "ण", RETROFLEX, "ṭu"),
    # Dentals
    _consonant("t", "त", DENTAL, "tu"),
    _consonant("th", "थ", DENTAL, "tu"),
    _consonant("d", "द", DENTAL, "tu"),
    _consonant("dh", "ध", DENTAL, "tu"),
    _consonant("n", "न", DENTAL, "tu"),
    # Labials
    _consonant("p", "प", LABIAL, "pu"),
    _consonant("ph", "फ", LABIAL, "pu"),
    _consonant("b", "ब", LABIAL, "pu"),
    _consonant("bh", "भ", LABIAL, "pu"),
    _consonant("m", "म", LABIAL, "pu"),
    # Semivowels
    _consonant("y", "य", PALATAL),
    _consonant("r", "र", RETROFLEX),
    _consonant("l", "ल", DENTAL),
    _consonant("v", "व", LABIAL),
    # Sibilants and aspirate
    _consonant("ś", "श", PALATAL),
    _consonant("ṣ", "ष", RETROFLEX),
    _consonant("s", "स", DENTAL),
    _consonant("h", "ह", GUTTURAL),
)

MARKS: tuple[PhonemeSpec, ...] = (
    PhonemeSpec(sound="ṃ", kind=PhonemeKind.ANUSVARA, devanagari="ं", iast_variants=("ṁ",)),
    PhonemeSpec(sound="m̐", kind=PhonemeKind.CANDRABINDU, devanagari="ँ"),
    PhonemeSpec(sound="ḥ", kind=PhonemeKind.VISARGA, devanagari="ः"),
    PhonemeSpec(sound="'", kind=PhonemeKind.AVAGRAHA, devanagari="ऽ", iast_variants=("’",)),
)

INVENTORY: Mapping[str, PhonemeSpec] = MappingProxyType(
    {spec.sound: spec for spec in VOWELS + CONSONANTS + MARKS}
)


# ---------------------------------------------------------------------------
# Derived per-script lookups (surface form -> canonical sound)
# ---------------------------------------------------------------------------

DEVANAGARI_VOWELS: Mapping[str, str] = MappingProxyType(
    {spec.devanagari: spec.sound for spec in VOWELS}
)
DEVANAGARI_MATRAS: Mapping[str, str] = MappingProxyType(
    {spec.matra: spec.sound for spec in VOWELS if spec.matra}
)
DEVANAGARI_CONSONANTS: Mapping[str, str] = MappingProxyType(
    {spec.devanagari: spec.sound for spec in CONSONANTS}
)
DEVANAGARI_MARKS: Mapping[str, str] = MappingProxyType(
    {spec.devanagari: spec.sound for spec in MARKS}
)

IAST_UNITS: Mapping[str, str] = MappingProxyType(
    {
        spelling: spec.sound
        for spec in VOWELS + CONSONANTS + MARKS
        for spelling in spec.iast_spellings
    }
)
IAST_MAX_UNIT_LENGTH = max(len(spelling) for spelling in IAST_UNITS)

# Every accepted surface form in either script, including vowel signs
SURFACE_INDEX: Mapping[str, str] = MappingProxyType(
    {
        **IAST_UNITS,
        **DEVANAGARI_VOWELS,
        **DEVANAGARI_MATRAS,
        **DEVANAGARI_CONSONANTS,
        **DEVANAGARI_MARKS,
    }
)

# Guṇa and vṛddhi grades of vowels, expressed as sound sequences
GUNA_GRADES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "i": ("e",), "ī": ("e",),
    "u": ("o",), "ū": ("o",),
    "ṛ": ("a", "r"), "ṝ": ("a", "r"),
    "ḷ": ("a", "l"),
})
VRDDHI_GRADES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "a": ("ā",),
    "i": ("ai",), "ī": ("ai",),
    "u": ("au",), "ū": ("au",),
    "ṛ": ("ā", "r"), "ṝ": ("ā", "r"),
    "ḷ": ("ā", "l"),
    "e": ("ai",), "o": ("au",),
})


def lookup(sound: str) -> Optional[PhonemeSpec]:
    """Get the inventory entry for a canonical sound."""
    return INVENTORY.get(sound)


def resolve_surface(surface: str) -> Optional[str]:
    """
    Map a surface form in either script to its canonical sound.

    Args:
        surface: IAST spelling, Devanagari letter, or Devanagari vowel sign

    Returns:
        Canonical sound, or None if the form is not a single known unit
    """
    sound = SURFACE_INDEX.get(surface)
    if sound is None:
        sound = SURFACE_INDEX.get(surface.lower())
    return sound


def to_devanagari_letter(sound: str) -> Optional[str]:
    """Independent Devanagari form of a canonical sound."""
    spec = INVENTORY.get(sound)
    return spec.devanagari if spec else None
