"""
Reference data module for Vyakarana library.

Provides the bundled phoneme inventory and verbal-ending tables.
"""

from vyakarana.data.inventory import (
    INVENTORY,
    VIRAMA,
    PhonemeSpec,
    lookup,
    resolve_surface,
    to_devanagari_letter,
)
from vyakarana.data.affixes import (
    AFFIX_TABLES,
    ATMANEPADA_AFFIXES,
    PARASMAIPADA_AFFIXES,
    affix_table_tenses,
    ambiguous_affixes,
    load_affix_tables,
)

__all__ = [
    "INVENTORY",
    "VIRAMA",
    "PhonemeSpec",
    "lookup",
    "resolve_surface",
    "to_devanagari_letter",
    "AFFIX_TABLES",
    "ATMANEPADA_AFFIXES",
    "PARASMAIPADA_AFFIXES",
    "affix_table_tenses",
    "ambiguous_affixes",
    "load_affix_tables",
]
