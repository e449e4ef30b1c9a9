"""Tests for script detection."""

import pytest

from vyakarana.core.script import (
    coerce_text,
    detect_script,
    first_foreign_position,
    normalize_text,
)
from vyakarana.exceptions import InvalidInputError
from vyakarana.models import Script


class TestDetectScript:
    """Tests for detect_script()."""

    @pytest.mark.parametrize("text", ["राम", "ते", "ः", "कृष्णः", "॥"])
    def test_devanagari(self, text):
        assert detect_script(text) is Script.DEVANAGARI

    @pytest.mark.parametrize("text", ["rāma", "ātmā", "kṛṣṇaḥ", "ta", "Rāma", "mā'stu"])
    def test_iast(self, text):
        assert detect_script(text) is Script.IAST

    @pytest.mark.parametrize("text", ["", "123", "!!", "مرحبا", "Привет", "rāma!"])
    def test_unknown(self, text):
        assert detect_script(text) is Script.UNKNOWN

    @pytest.mark.parametrize("value", [None, 42, ["राम"], b"rama"])
    def test_non_string_is_unknown(self, value):
        assert detect_script(value) is Script.UNKNOWN

    def test_mixed_script_takes_first_recognized(self):
        assert detect_script("राम rāma") is Script.DEVANAGARI
        assert detect_script("rāma राम") is Script.IAST

    def test_leading_digits_are_skipped(self):
        assert detect_script("12राम") is Script.DEVANAGARI

    def test_vedic_extension_block(self):
        assert detect_script("\u1cd0") is Script.DEVANAGARI

    def test_decomposed_iast_is_normalized(self):
        assert detect_script("ra\u0304ma") is Script.IAST

    def test_deterministic(self):
        for text in ["राम", "rāma", "xyz!", ""]:
            assert len({detect_script(text) for _ in range(5)}) == 1


class TestNormalizeText:
    """Tests for normalize_text()."""

    def test_composes_diacritics(self):
        assert normalize_text("a\u0304") == "\u0101"

    def test_strips_zero_width(self):
        assert normalize_text("\u0915\u200d\u094d\u200b\u0937") == "\u0915\u094d\u0937"


class TestHelpers:
    """Tests for input coercion and foreign-character lookup."""

    def test_coerce_rejects_non_string(self):
        with pytest.raises(InvalidInputError) as exc_info:
            coerce_text(5, "word")
        assert exc_info.value.context["argument"] == "word"
        assert exc_info.value.context["type"] == "int"

    def test_coerce_rejects_blank_when_stripping(self):
        with pytest.raises(InvalidInputError):
            coerce_text("   ", "affix", strip=True)

    def test_coerce_strips(self):
        assert coerce_text("  ते ", "affix", strip=True) == "ते"

    def test_first_foreign_position(self):
        assert first_foreign_position("rāma!") == 4
        assert first_foreign_position("rāma") is None
