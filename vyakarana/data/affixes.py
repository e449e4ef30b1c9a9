"""
Verbal ending (tiṅ affix) reference tables.

Loads the bundled affixes.csv once at import time into immutable mappings
of Pada -> Script -> Tense -> affixes. The tables are never mutated after
loading, so they can be read from any thread without locking.
"""

import csv
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from vyakarana._logging import log_error, log_reference_data_loaded
from vyakarana.exceptions import ReferenceDataError
from vyakarana.models.enums import Pada, Script, Tense


AffixTable = Mapping[Script, Mapping[Tense, tuple[str, ...]]]

TABLE_PADAS = (Pada.ATMANEPADA, Pada.PARASMAIPADA)
TABLE_SCRIPTS = (Script.DEVANAGARI, Script.IAST)


def _get_data_path() -> Path:
    """Get path to the bundled data directory."""
    return Path(__file__).parent


def _get_affixes_csv_path() -> Path:
    """Get path to the affix table CSV file."""
    bundled = _get_data_path() / "affixes.csv"
    if bundled.exists():
        return bundled

    raise ReferenceDataError(
        "Affix table CSV not found. Expected at: vyakarana/data/affixes.csv",
        table="affixes",
    )


def _read_rows(csv_path: Path) -> list[tuple[Pada, Script, Tense, str]]:
    rows = []
    with open(csv_path, "r", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for line_number, row in enumerate(reader, start=2):
            pada = Pada.parse(row["pada"])
            script = Script.parse(row["script"])
            tense = Tense.parse(row["tense"])
            affix = (row["affix"] or "").strip()
            if pada not in TABLE_PADAS or script not in TABLE_SCRIPTS or tense is None or not affix:
                raise ReferenceDataError(
                    f"Malformed affix table row at line {line_number}",
                    table="affixes",
                    context={"row": dict(row)},
                )
            rows.append((pada, script, tense, affix))
    return rows


def _build_tables(
    rows: list[tuple[Pada, Script, Tense, str]],
) -> dict[Pada, AffixTable]:
    """Group rows by pada, script and tense, keeping first-seen order."""
    grouped: dict[Pada, dict[Script, dict[Tense, list[str]]]] = {
        pada: {script: {} for script in TABLE_SCRIPTS} for pada in TABLE_PADAS
    }
    for pada, script, tense, affix in rows:
        bucket = grouped[pada][script].setdefault(tense, [])
        if affix not in bucket:
            bucket.append(affix)

    tables = {}
    for pada, by_script in grouped.items():
        tables[pada] = MappingProxyType({
            script: MappingProxyType({
                tense: tuple(by_tense[tense]) for tense in Tense if tense in by_tense
            })
            for script, by_tense in by_script.items()
        })
    return tables


def _check_symmetry(tables: dict[Pada, AffixTable]) -> None:
    """Every pada and script must cover the same (complete) set of tenses."""
    expected = set(Tense)
    for pada, by_script in tables.items():
        for script, by_tense in by_script.items():
            missing = expected - set(by_tense)
            if missing:
                raise ReferenceDataError(
                    "Affix table is missing tenses",
                    table=f"{pada.value}/{script.key}",
                    context={"missing": ", ".join(sorted(t.value for t in missing))},
                )


@lru_cache(maxsize=1)
def load_affix_tables() -> Mapping[Pada, AffixTable]:
    """
    Load the affix tables from the bundled CSV file.

    Returns:
        Mapping of Pada to its per-script, per-tense affix tuples

    Raises:
        ReferenceDataError: If the CSV file is missing, malformed or incomplete
    """
    try:
        csv_path = _get_affixes_csv_path()
        rows = _read_rows(csv_path)
        tables = _build_tables(rows)
        _check_symmetry(tables)
    except ReferenceDataError as e:
        log_error("Could not load affix table", table=e.table)
        raise
    except (OSError, csv.Error, KeyError) as e:
        log_error("Could not load affix table", exc_info=True)
        raise ReferenceDataError(f"Failed to load affix table: {e}", table="affixes") from e

    log_reference_data_loaded("affixes", len(rows))
    return MappingProxyType(tables)


_TABLES = load_affix_tables()

ATMANEPADA_AFFIXES: AffixTable = _TABLES[Pada.ATMANEPADA]
PARASMAIPADA_AFFIXES: AffixTable = _TABLES[Pada.PARASMAIPADA]

AFFIX_TABLES: Mapping[Pada, AffixTable] = _TABLES

# Flattened membership sets per pada and script
AFFIX_SETS: Mapping[Pada, Mapping[Script, frozenset[str]]] = MappingProxyType({
    pada: MappingProxyType({
        script: frozenset(a for affixes in by_tense.values() for a in affixes)
        for script, by_tense in table.items()
    })
    for pada, table in _TABLES.items()
})


def affix_table_tenses(pada: Pada, script: Script) -> tuple[Tense, ...]:
    """
    Get the tense keys of one pada table for one script, in table order.

    Args:
        pada: ATMANEPADA or PARASMAIPADA
        script: DEVANAGARI or IAST

    Returns:
        Tense keys, or an empty tuple for other padas/scripts
    """
    table = AFFIX_TABLES.get(pada)
    if table is None or script not in table:
        return ()
    return tuple(table[script])


def ambiguous_affixes(script: Script) -> frozenset[str]:
    """Affixes listed in both pada tables for a script."""
    if script not in TABLE_SCRIPTS:
        return frozenset()
    return (
        AFFIX_SETS[Pada.ATMANEPADA][script] & AFFIX_SETS[Pada.PARASMAIPADA][script]
    )
