"""Tests for the bundled reference data."""

import pytest

from vyakarana.data import affixes as affix_data
from vyakarana.data.affixes import (
    AFFIX_TABLES,
    affix_table_tenses,
    ambiguous_affixes,
    load_affix_tables,
)
from vyakarana.data.inventory import CONSONANTS, INVENTORY, VOWELS, resolve_surface
from vyakarana.exceptions import ReferenceDataError
from vyakarana.models import Pada, Script, Tense


class TestInventory:
    """Tests for the phoneme inventory."""

    def test_sizes(self):
        assert len(VOWELS) == 14
        assert len(CONSONANTS) == 33

    def test_every_entry_resolves_from_both_scripts(self):
        for sound, spec in INVENTORY.items():
            assert resolve_surface(sound) == sound
            assert resolve_surface(spec.devanagari) == sound

    def test_matras_resolve_to_vowels(self):
        for spec in VOWELS:
            if spec.matra:
                assert resolve_surface(spec.matra) == spec.sound


class TestAffixTables:
    """Tests for the affix tables."""

    @pytest.mark.parametrize("pada", [Pada.ATMANEPADA, Pada.PARASMAIPADA])
    @pytest.mark.parametrize("script", [Script.DEVANAGARI, Script.IAST])
    def test_tense_keys_symmetric(self, pada, script):
        assert affix_table_tenses(pada, script) == tuple(Tense)

    def test_other_keys_have_no_tenses(self):
        assert affix_table_tenses(Pada.UNKNOWN, Script.IAST) == ()
        assert affix_table_tenses(Pada.ATMANEPADA, Script.UNKNOWN) == ()

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            AFFIX_TABLES[Pada.ATMANEPADA][Script.IAST][Tense.PRESENT] = ("x",)

    def test_documented_homonyms(self):
        assert {"ताम्", "एताम्", "एत", "त"} <= ambiguous_affixes(Script.DEVANAGARI)
        assert {"tām", "etām", "eta", "ta"} <= ambiguous_affixes(Script.IAST)
        assert ambiguous_affixes(Script.UNKNOWN) == frozenset()


class TestLoadAffixTables:
    """Tests for loading the affix CSV."""

    @pytest.fixture(autouse=True)
    def uncached(self):
        load_affix_tables.cache_clear()
        yield
        load_affix_tables.cache_clear()

    def test_cached(self):
        assert load_affix_tables() is load_affix_tables()

    def test_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(affix_data, "_get_data_path", lambda: tmp_path)
        with pytest.raises(ReferenceDataError):
            load_affix_tables()

    def test_incomplete_table(self, tmp_path, monkeypatch):
        csv_path = tmp_path / "affixes.csv"
        csv_path.write_text("pada,tense,script,affix\natmanepada,lat,devanagari,ते\n", encoding="utf-8")
        monkeypatch.setattr(affix_data, "_get_data_path", lambda: tmp_path)
        with pytest.raises(ReferenceDataError) as exc_info:
            load_affix_tables()
        assert exc_info.value.table == "atmanepada/devanagari"

    def test_malformed_row(self, tmp_path, monkeypatch):
        csv_path = tmp_path / "affixes.csv"
        csv_path.write_text("pada,tense,script,affix\nmiddle,lat,iast,te\n", encoding="utf-8")
        monkeypatch.setattr(affix_data, "_get_data_path", lambda: tmp_path)
        with pytest.raises(ReferenceDataError, match="line 2"):
            load_affix_tables()
