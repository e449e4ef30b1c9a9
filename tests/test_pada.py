"""Tests for affix pada classification."""

import pytest

from vyakarana.config import configure
from vyakarana.core.pada import (
    get_affix_pada,
    get_affixes_by_pada,
    is_atmanepada_affix,
    is_parasmaipada_affix,
    suggest_affixes,
    validate_pada_analysis,
)
from vyakarana.data.affixes import ATMANEPADA_AFFIXES, PARASMAIPADA_AFFIXES, ambiguous_affixes
from vyakarana.models import Pada, Script, Tense


def table_entries(table):
    return [
        (script, tense, affix)
        for script, by_tense in table.items()
        for tense, affixes in by_tense.items()
        for affix in affixes
    ]


class TestMembership:
    """Tests for is_atmanepada_affix() and is_parasmaipada_affix()."""

    @pytest.mark.parametrize("script, tense, affix", table_entries(ATMANEPADA_AFFIXES))
    def test_atmanepada_table(self, script, tense, affix):
        assert is_atmanepada_affix(affix, tense)
        if affix not in ambiguous_affixes(script):
            assert not is_parasmaipada_affix(affix, tense)

    @pytest.mark.parametrize("script, tense, affix", table_entries(PARASMAIPADA_AFFIXES))
    def test_parasmaipada_table(self, script, tense, affix):
        assert is_parasmaipada_affix(affix, tense)
        if affix not in ambiguous_affixes(script):
            assert not is_atmanepada_affix(affix, tense)

    def test_documented_homonyms(self):
        for affix in ["ताम्", "एताम्", "एत", "त"]:
            assert is_atmanepada_affix(affix) and is_parasmaipada_affix(affix)

    def test_tense_restriction(self):
        assert is_atmanepada_affix("ते", "lat")
        assert is_atmanepada_affix("ते", Tense.FUTURE)
        assert not is_atmanepada_affix("ते", "lot")

    def test_english_tense_names(self):
        assert is_parasmaipada_affix("ति", "present")
        assert is_parasmaipada_affix("ति", "Future")

    def test_unknown_tense_matches_nothing(self):
        assert not is_atmanepada_affix("ते", "someday")

    def test_no_cross_script_matching(self):
        assert is_atmanepada_affix("te")
        assert not is_atmanepada_affix("ति")

    def test_whitespace_and_case(self):
        assert is_parasmaipada_affix("  ति ")
        assert is_parasmaipada_affix("TI")

    @pytest.mark.parametrize("value", [None, "", "   ", 7])
    def test_invalid_input(self, value):
        assert is_atmanepada_affix(value) is False
        assert is_parasmaipada_affix(value) is False


class TestGetAffixPada:
    """Tests for get_affix_pada()."""

    def test_ti_is_parasmaipada_present(self):
        result = get_affix_pada("ति")
        assert result.pada is Pada.PARASMAIPADA
        assert result.tense is Tense.PRESENT
        assert result.tense.value == "lat"
        assert result.description == "Parasmaipada (active voice) affix"
        assert result.is_ambiguous is False

    def test_te_is_atmanepada_present(self):
        result = get_affix_pada("ते")
        assert result.pada is Pada.ATMANEPADA
        assert result.tense is Tense.PRESENT
        assert result.script is Script.DEVANAGARI
        assert result.candidates == [Pada.ATMANEPADA]

    def test_iast(self):
        result = get_affix_pada("ti")
        assert result.pada is Pada.PARASMAIPADA
        assert result.script is Script.IAST

    def test_ambiguous_is_surfaced(self):
        result = get_affix_pada("त")
        assert result.pada is Pada.ATMANEPADA
        assert result.candidates == [Pada.ATMANEPADA, Pada.PARASMAIPADA]
        assert result.is_ambiguous is True
        assert "Parasmaipada" in result.description

    def test_tense_filter_narrows_candidates(self):
        result = get_affix_pada("त", "lot")
        assert result.pada is Pada.PARASMAIPADA
        assert result.tense is Tense.IMPERATIVE
        assert result.is_ambiguous is False

    def test_tense_filter_reports_requested_tense(self):
        assert get_affix_pada("ते", "lrt").tense is Tense.FUTURE

    def test_unknown_affix(self):
        result = get_affix_pada("xyz")
        assert result.is_valid is True
        assert result.pada is Pada.UNKNOWN
        assert result.tense is None
        assert result.description == "Affix not recognized as either Ātmanepada or Parasmaipada"

    @pytest.mark.parametrize("value", [None, "", 3.5])
    def test_invalid_input(self, value):
        result = get_affix_pada(value)
        assert result.is_valid is False
        assert result.error == "Invalid affix input"
        assert result.pada is None

    def test_trims_affix(self):
        assert get_affix_pada(" ते ").affix == "ते"


class TestGetAffixesByPada:
    """Tests for get_affixes_by_pada()."""

    def test_single_tense_single_script(self):
        assert get_affixes_by_pada("atmanepada", "lat", "devanagari") == [
            "ते", "एते", "न्ते", "से", "आथे", "ध्वे", "ए", "वहे", "महे",
        ]

    def test_both_scripts_by_default(self):
        result = get_affixes_by_pada(Pada.PARASMAIPADA, Tense.PRESENT)
        assert set(result) == {"devanagari", "iast"}
        assert result["iast"][0] == "ti"

    def test_explicit_both(self):
        assert set(get_affixes_by_pada("atmanepada", script="both")) == {"devanagari", "iast"}

    def test_all_tenses_deduplicated(self):
        affixes = get_affixes_by_pada("parasmaipada", script=Script.IAST)
        assert affixes.count("ti") == 1
        assert "tām" in affixes

    def test_unknown_pada(self):
        assert get_affixes_by_pada("middle") == {"devanagari": [], "iast": []}
        assert get_affixes_by_pada("middle", script="iast") == []

    def test_unknown_tense(self):
        assert get_affixes_by_pada("atmanepada", "someday", "iast") == []

    def test_returns_copies(self):
        first = get_affixes_by_pada("atmanepada", "lat", "iast")
        first.append("bogus")
        assert "bogus" not in get_affixes_by_pada("atmanepada", "lat", "iast")


class TestValidatePadaAnalysis:
    """Tests for validate_pada_analysis()."""

    def test_homonym_warning(self):
        report = validate_pada_analysis("त")
        assert report.is_valid is True
        assert any("can be both" in w for w in report.warnings)
        assert report.errors == []

    def test_contradiction(self):
        report = validate_pada_analysis("ते", "parasmaipada")
        assert report.is_valid is False
        assert report.errors == ["Expected parasmaipada but found atmanepada"]

    def test_expectation_met(self):
        report = validate_pada_analysis("ते", Pada.ATMANEPADA)
        assert report.is_valid is True
        assert report.analysis.pada is Pada.ATMANEPADA

    def test_homonym_satisfies_either_expectation(self):
        assert validate_pada_analysis("त", "parasmaipada").is_valid is True

    def test_unknown_affix_warns_and_suggests(self):
        report = validate_pada_analysis("तै")
        assert report.is_valid is True
        assert any("not recognized" in w for w in report.warnings)
        assert len(report.suggestions) == 3
        assert report.suggestions[0] == "Did you mean 'ते'?"

    def test_unknown_affix_ignores_expectation(self):
        assert validate_pada_analysis("xyz", "atmanepada").is_valid is True

    def test_suggestion_limit_setting(self):
        configure(max_suggestions=1)
        assert len(validate_pada_analysis("तै").suggestions) == 1

    def test_tense_is_passed_through(self):
        report = validate_pada_analysis("त", tense="lot")
        assert report.warnings == []
        assert report.analysis.pada is Pada.PARASMAIPADA

    def test_affix_listed_under_other_tense(self):
        report = validate_pada_analysis("ति", tense="lot")
        assert report.is_valid is True
        assert report.warnings == ["Affix 'ति' is not listed under tense lot; it is Parasmaipada (lat)"]
        assert report.suggestions == []
        assert report.analysis.pada is Pada.UNKNOWN

    def test_non_string(self):
        report = validate_pada_analysis(None)
        assert report.is_valid is False
        assert report.errors == ["Affix is required and must be a string"]

    def test_empty(self):
        report = validate_pada_analysis("  ")
        assert report.is_valid is False
        assert report.errors == ["Affix cannot be empty"]


class TestSuggestAffixes:
    """Tests for suggest_affixes()."""

    def test_shared_prefix_ranks_first(self):
        assert suggest_affixes("eyātā", Script.IAST, limit=1) == ["eyātām"]

    def test_nothing_similar(self):
        assert suggest_affixes("zzzzzzzz", Script.IAST) == []

    def test_known_affix_is_not_suggested_to_itself(self):
        assert "ति" not in suggest_affixes("ति", Script.DEVANAGARI)
        assert "ti" not in suggest_affixes("ti", Script.IAST)
