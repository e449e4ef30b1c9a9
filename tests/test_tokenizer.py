"""Tests for the phoneme tokenizer."""

import pytest

from vyakarana.config import configure
from vyakarana.core.tokenizer import tokenize_phonemes
from vyakarana.models import PhonemeKind, Script


def sounds(word, **kwargs):
    return tokenize_phonemes(word, **kwargs).sounds


class TestDevanagari:
    """Tests for Devanagari segmentation."""

    def test_matra_yields_vowel_identity(self):
        result = tokenize_phonemes("राम")
        assert result.script is Script.DEVANAGARI
        assert result.sounds == ["r", "ā", "m", "a"]
        assert result.texts == ["र", "आ", "म", "अ"]

    def test_inherent_vowel_is_marked(self):
        result = tokenize_phonemes("राम")
        last = result.phonemes[-1]
        assert last.inherent is True
        assert last.surface == ""
        assert last.is_vowel

    def test_visarga_is_separate_phoneme(self):
        result = tokenize_phonemes("रामः")
        assert result.sounds == ["r", "ā", "m", "a", "ḥ"]
        assert result.phonemes[-1].kind is PhonemeKind.VISARGA

    def test_independent_vowel(self):
        assert sounds("अग्निः") == ["a", "g", "n", "i", "ḥ"]

    def test_final_virama_suppresses_vowel(self):
        result = tokenize_phonemes("वाक्")
        assert result.sounds == ["v", "ā", "k"]
        assert result.phonemes[-1].surface == "क्"

    def test_anusvara(self):
        assert sounds("संस्कृतम्") == ["s", "a", "ṃ", "s", "k", "ṛ", "t", "a", "m"]

    def test_candrabindu(self):
        result = tokenize_phonemes("हँस")
        assert result.phonemes[2].kind is PhonemeKind.CANDRABINDU

    def test_avagraha(self):
        result = tokenize_phonemes("सोऽहम्")
        assert [p.kind for p in result.phonemes][2] is PhonemeKind.AVAGRAHA


class TestConjuncts:
    """Tests for the conjunct policy."""

    def test_default_splits_conjuncts(self):
        result = tokenize_phonemes("कृष्ण")
        assert result.accurate is False
        assert result.sounds == ["k", "ṛ", "ṣ", "ṇ", "a"]
        assert [p.position for p in result.phonemes] == [0, 1, 2, 4, 5]

    def test_accurate_merges_conjuncts(self):
        result = tokenize_phonemes("कृष्ण", accurate=True)
        assert result.sounds == ["k", "ṛ", "ṣṇ", "a"]
        cluster = result.phonemes[2]
        assert cluster.kind is PhonemeKind.CLUSTER
        assert cluster.components == ("ṣ", "ṇ")
        assert cluster.text == "ष्ण"
        assert cluster.is_consonant

    def test_accurate_three_consonant_cluster(self):
        assert sounds("स्त्री", accurate=True) == ["str", "ī"]

    def test_accurate_keeps_final_dead_consonant(self):
        assert sounds("संस्कृतम्", accurate=True) == ["s", "a", "ṃ", "sk", "ṛ", "t", "a", "m"]

    def test_setting_provides_default(self):
        configure(accurate_tokenization=True)
        assert tokenize_phonemes("कृष्ण").accurate is True
        assert tokenize_phonemes("कृष्ण", accurate=False).accurate is False


class TestIast:
    """Tests for IAST longest-match segmentation."""

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("kṛṣṇa", ["k", "ṛ", "ṣ", "ṇ", "a"]),
            ("bhavati", ["bh", "a", "v", "a", "t", "i"]),
            ("kaivalya", ["k", "ai", "v", "a", "l", "y", "a"]),
            ("khaga", ["kh", "a", "g", "a"]),
            ("ātmā", ["ā", "t", "m", "ā"]),
            ("saṁskṛta", ["s", "a", "ṃ", "s", "k", "ṛ", "t", "a"]),
        ],
    )
    def test_segmentation(self, word, expected):
        assert sounds(word) == expected

    def test_uppercase_is_folded(self):
        result = tokenize_phonemes("Rāma")
        assert result.sounds == ["r", "ā", "m", "a"]
        assert result.phonemes[0].surface == "R"

    def test_decomposed_input(self):
        assert sounds("a\u0304tma\u0304") == ["ā", "t", "m", "ā"]


class TestDiagnostics:
    """Tests for best-effort handling of unknown code points."""

    def test_unresolved_devanagari_character(self):
        result = tokenize_phonemes("रा1म")
        assert result.sounds == ["r", "ā", "m", "a"]
        assert [(u.position, u.character) for u in result.unresolved] == [(2, "1")]
        assert result.is_complete is False

    def test_orphan_vowel_sign(self):
        result = tokenize_phonemes("िक")
        assert result.unresolved[0].position == 0
        assert result.sounds == ["k", "a"]

    def test_unresolved_iast_letter(self):
        result = tokenize_phonemes("rāxma")
        assert result.unresolved[0].character == "x"
        assert result.sounds == ["r", "ā", "m", "a"]

    @pytest.mark.parametrize("value", ["", None, 12, "123", "Привет"])
    def test_empty_results(self, value):
        result = tokenize_phonemes(value)
        assert result.phonemes == ()
        assert result.count == 0


class TestProperties:
    """Order and reconstruction properties."""

    @pytest.mark.parametrize(
        "word", ["राम", "रामः", "कृष्ण", "संस्कृतम्", "अग्निः", "kṛṣṇa", "bhavati", "ātmā"]
    )
    @pytest.mark.parametrize("accurate", [False, True])
    def test_surfaces_reconstruct_word(self, word, accurate):
        result = tokenize_phonemes(word, accurate=accurate)
        assert result.surface() == word

    @pytest.mark.parametrize("word", ["संस्कृतम्", "kaivalya"])
    def test_positions_increase(self, word):
        positions = [p.position for p in tokenize_phonemes(word).phonemes]
        assert positions == sorted(positions)

    def test_every_phoneme_has_the_word_script(self):
        result = tokenize_phonemes("रामः")
        assert {p.script for p in result.phonemes} == {Script.DEVANAGARI}

    def test_phoneme_flags(self):
        first = tokenize_phonemes("ātmā").phonemes[0]
        assert first.is_vrddhi and first.is_long and not first.is_guna
