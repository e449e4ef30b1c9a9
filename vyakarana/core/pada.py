"""
Affix to pada (grammatical voice) classification.

Verbal endings are looked up in the Ātmanepada and Parasmaipada tables
for the affix's script. Some endings (ताम्, एताम्, एत, त, ...) are listed
in both tables; such affixes are reported with every matching pada in
``candidates`` and are never silently resolved to one of them.
"""

import unicodedata
from typing import Any, Optional, Union

from vyakarana._logging import (
    log_ambiguous_affix,
    log_unknown_affix,
    log_warning,
)
from vyakarana.config import get_settings
from vyakarana.core.script import coerce_text, detect_script
from vyakarana.data.affixes import AFFIX_SETS, AFFIX_TABLES, TABLE_PADAS
from vyakarana.exceptions import InvalidInputError
from vyakarana.models.enums import Pada, Script, Tense
from vyakarana.models.result import PadaClassification, PadaValidationReport


TenseLike = Union[Tense, str, None]

_DESCRIPTIONS = {
    Pada.ATMANEPADA: "Ātmanepada (middle voice) affix",
    Pada.PARASMAIPADA: "Parasmaipada (active voice) affix",
    Pada.UNKNOWN: "Affix not recognized as either Ātmanepada or Parasmaipada",
}

# Keys of the keyed dump returned when no single script is requested
_DUMP_SCRIPTS = (Script.DEVANAGARI, Script.IAST)


class _NoTense:
    """Marker for a tense argument that was given but could not be parsed."""


_INVALID_TENSE = _NoTense()


def _table_script(affix: str) -> tuple[Script, Script]:
    """
    Detected script of an affix and the script whose table it is looked up in.

    Anything that is not Devanagari is looked up in the IAST table.
    """
    script = detect_script(affix)
    return script, (Script.DEVANAGARI if script is Script.DEVANAGARI else Script.IAST)


def _clean_affix(affix: Any) -> tuple[str, Script, Script]:
    text = coerce_text(affix, "affix", strip=True)
    script, table_script = _table_script(text)
    if table_script is Script.IAST:
        # IAST lookups ignore case; Devanagari has none
        lowered = text.lower()
        if len(lowered) == len(text):
            text = unicodedata.normalize("NFC", lowered)
    return text, script, table_script


def _resolve_tense(tense: TenseLike) -> Union[Tense, None, _NoTense]:
    if tense is None or (isinstance(tense, str) and not tense.strip()):
        return None
    parsed = Tense.parse(tense)
    if parsed is None:
        log_warning("Unrecognized tense; no affix will match", tense=tense)
        return _INVALID_TENSE
    return parsed


def _in_table(pada: Pada, affix: str, script: Script, tense: Union[Tense, None, _NoTense]) -> bool:
    if tense is _INVALID_TENSE:
        return False
    if tense is None:
        return affix in AFFIX_SETS[pada][script]
    return affix in AFFIX_TABLES[pada][script].get(tense, ())


def _first_tense(pada: Pada, affix: str, script: Script) -> Optional[Tense]:
    for tense, affixes in AFFIX_TABLES[pada][script].items():
        if affix in affixes:
            return tense
    return None


def _is_pada_affix(pada: Pada, affix: Any, tense: TenseLike) -> bool:
    try:
        text, _, table_script = _clean_affix(affix)
    except InvalidInputError:
        return False
    return _in_table(pada, text, table_script, _resolve_tense(tense))


def is_atmanepada_affix(affix: Any, tense: TenseLike = None) -> bool:
    """
    Check whether an affix is an Ātmanepada ending.

    Args:
        affix: Affix in Devanagari or IAST
        tense: Optional tense restriction (Tense, lakāra key or English name)

    Returns:
        True if the affix is listed in the Ātmanepada table for its script
    """
    return _is_pada_affix(Pada.ATMANEPADA, affix, tense)


def is_parasmaipada_affix(affix: Any, tense: TenseLike = None) -> bool:
    """
    Check whether an affix is a Parasmaipada ending.

    Args:
        affix: Affix in Devanagari or IAST
        tense: Optional tense restriction (Tense, lakāra key or English name)

    Returns:
        True if the affix is listed in the Parasmaipada table for its script
    """
    return _is_pada_affix(Pada.PARASMAIPADA, affix, tense)


def get_affix_pada(affix: Any, tense: TenseLike = None) -> PadaClassification:
    """
    Classify an affix by pada.

    The tables are consulted in the order Ātmanepada, Parasmaipada. When an
    affix is listed under several tenses of one pada the first tense wins
    (ते is both present and future). When it is listed in both padas,
    ``pada`` is Ātmanepada and ``is_ambiguous`` is True.

    Args:
        affix: Affix in Devanagari or IAST
        tense: Optional tense restriction

    Returns:
        PadaClassification; ``is_valid`` is False only for non-string or
        empty input, an unlisted affix has ``pada`` UNKNOWN

    Example:
        >>> result = get_affix_pada("ति")
        >>> result.pada, result.tense
        (<Pada.PARASMAIPADA: 'parasmaipada'>, <Tense.PRESENT: 'lat'>)
    """
    try:
        text, script, table_script = _clean_affix(affix)
    except InvalidInputError:
        return PadaClassification(is_valid=False, error="Invalid affix input")

    resolved = _resolve_tense(tense)
    candidates = [
        pada for pada in TABLE_PADAS if _in_table(pada, text, table_script, resolved)
    ]

    if not candidates:
        log_unknown_affix(text, script.value)
        return PadaClassification(
            is_valid=True,
            affix=text,
            script=script,
            pada=Pada.UNKNOWN,
            description=_DESCRIPTIONS[Pada.UNKNOWN],
        )

    pada = candidates[0]
    found_tense = resolved if isinstance(resolved, Tense) else _first_tense(pada, text, table_script)
    description = _DESCRIPTIONS[pada]
    if len(candidates) > 1:
        log_ambiguous_affix(text, [c.value for c in candidates])
        others = ", ".join(c.label for c in candidates[1:])
        description = f"{description}; also listed as {others}"

    return PadaClassification(
        is_valid=True,
        affix=text,
        script=script,
        pada=pada,
        tense=found_tense,
        description=description,
        candidates=candidates,
    )


def _dedupe(affixes) -> list[str]:
    return list(dict.fromkeys(affixes))


def _affix_list(pada: Optional[Pada], script: Script, tense: Union[Tense, None, _NoTense]) -> list[str]:
    if pada not in TABLE_PADAS or tense is _INVALID_TENSE:
        return []
    table = AFFIX_TABLES[pada][script]
    if tense is None:
        return _dedupe(a for affixes in table.values() for a in affixes)
    return list(table.get(tense, ()))


def get_affixes_by_pada(
    pada: Union[Pada, str],
    tense: TenseLike = None,
    script: Union[Script, str, None] = None,
) -> Union[list[str], dict[str, list[str]]]:
    """
    Dump the affixes of one pada.

    Args:
        pada: ATMANEPADA or PARASMAIPADA (enum member or name)
        tense: Optional tense restriction
        script: DEVANAGARI or IAST for a single list; None or "both" for
            a dict keyed "devanagari" and "iast"

    Returns:
        List of affixes in table order, or a dict of such lists. An unknown
        pada or tense gives empty lists.
    """
    parsed_pada = Pada.parse(pada)
    resolved = _resolve_tense(tense)
    parsed_script = Script.parse(script)

    if parsed_script in _DUMP_SCRIPTS:
        return _affix_list(parsed_pada, parsed_script, resolved)
    return {s.key: _affix_list(parsed_pada, s, resolved) for s in _DUMP_SCRIPTS}


def _shared_prefix(a: str, b: str) -> int:
    count = 0
    for x, y in zip(a, b):
        if x != y:
            break
        count += 1
    return count


def suggest_affixes(affix: str, script: Script, limit: Optional[int] = None) -> list[str]:
    """
    Known affixes resembling an unrecognized one.

    A known affix qualifies when its length is within two of the input and
    it starts with the same character or one contains the other. Matches
    are ranked by shared prefix, then by length difference. The affix itself
    is never suggested.

    Args:
        affix: Cleaned affix
        script: Table script (DEVANAGARI or IAST)
        limit: Maximum suggestions (default: the ``max_suggestions`` setting)

    Returns:
        Up to ``limit`` known affixes
    """
    if limit is None:
        limit = get_settings().max_suggestions
    if not affix or script not in _DUMP_SCRIPTS:
        return []

    known = _dedupe(
        a
        for pada in TABLE_PADAS
        for affixes in AFFIX_TABLES[pada][script].values()
        for a in affixes
    )
    similar = [
        a
        for a in known
        if a != affix
        and abs(len(a) - len(affix)) <= 2
        and (a[0] == affix[0] or affix in a or a in affix)
    ]
    similar.sort(key=lambda a: (-_shared_prefix(a, affix), abs(len(a) - len(affix))))
    return similar[:limit]


def validate_pada_analysis(
    affix: Any,
    expected_pada: Union[Pada, str, None] = None,
    *,
    tense: TenseLike = None,
) -> PadaValidationReport:
    """
    Analyze an affix and report warnings, suggestions and contradictions.

    Unknown affixes and cross-pada homonyms produce warnings, not errors.
    An error is reported only when ``expected_pada`` is given and the affix
    is known but not listed under that pada.

    Args:
        affix: Affix in Devanagari or IAST
        expected_pada: Pada the caller expects
        tense: Optional tense restriction

    Returns:
        PadaValidationReport

    Example:
        >>> report = validate_pada_analysis("ते", "parasmaipada")
        >>> report.is_valid, report.errors
        (False, ['Expected parasmaipada but found atmanepada'])
    """
    if not isinstance(affix, str):
        return PadaValidationReport(
            is_valid=False,
            errors=["Affix is required and must be a string"],
        )
    if not affix.strip():
        return PadaValidationReport(is_valid=False, errors=["Affix cannot be empty"])

    analysis = get_affix_pada(affix, tense)
    if not analysis.is_valid:
        return PadaValidationReport(
            is_valid=False,
            errors=[analysis.error or "Invalid affix input"],
        )

    errors: list[str] = []
    warnings: list[str] = []
    suggestions: list[str] = []

    unfiltered = None
    if tense is not None and analysis.pada is Pada.UNKNOWN:
        # Known affix listed only under other tenses
        unfiltered = get_affix_pada(affix)
    if unfiltered is not None and unfiltered.pada is not Pada.UNKNOWN:
        requested = Tense.parse(tense)
        label = requested.value if requested else str(tense).strip()
        warnings.append(
            f"Affix '{analysis.affix}' is not listed under tense {label}; "
            f"it is {unfiltered.pada.label} ({unfiltered.tense.value})"
        )
    elif analysis.pada is Pada.UNKNOWN:
        warnings.append(
            f"Affix '{analysis.affix}' not recognized as either Ātmanepada or Parasmaipada"
        )
        table_script = Script.DEVANAGARI if analysis.script is Script.DEVANAGARI else Script.IAST
        suggestions.extend(
            f"Did you mean '{s}'?" for s in suggest_affixes(analysis.affix, table_script)
        )
    elif analysis.is_ambiguous:
        warnings.append(
            f"Affix '{analysis.affix}' can be both Ātmanepada and Parasmaipada depending on context"
        )

    if expected_pada and analysis.pada is not Pada.UNKNOWN:
        expected = Pada.parse(expected_pada)
        if expected not in analysis.candidates:
            label = expected.value if expected else str(expected_pada).strip()
            errors.append(f"Expected {label} but found {analysis.pada.value}")

    return PadaValidationReport(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        suggestions=suggestions,
        analysis=analysis,
    )
