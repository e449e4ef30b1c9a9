"""
Basic usage example for Vyakarana library.

This example demonstrates the core workflow:
1. Validate and tokenize a word
2. Classify its first vowel
3. Classify a verbal ending by pada
4. Output the analysis as JSON
"""

import json

# Import core components
from vyakarana.core import (
    analyze_first_vowel,
    tokenize_phonemes,
    transliterate,
    validate_pada_analysis,
    validate_sanskrit_word,
)
from vyakarana.models import Script


def analyze_word(word: str, affix: str | None = None, expected_pada: str | None = None):
    """
    Analyze a single word and, optionally, its verbal ending.

    Args:
        word: Word in Devanagari or IAST
        affix: Verbal ending to classify
        expected_pada: Pada the ending is expected to have

    Returns:
        Analysis as a dictionary, or None if the word is invalid
    """
    print(f"Analyzing {word}")
    print("=" * 50)

    # Step 1: Validate
    print("\n🔎 Step 1: Validating word...")

    validation = validate_sanskrit_word(word)
    if not validation.is_valid:
        print(f"   ❌ {validation.error}")
        return None
    print(f"   ✅ {validation.script.value}, {validation.phoneme_count} phonemes")

    # Step 2: Tokenize
    print("\n🔤 Step 2: Tokenizing...")

    tokens = tokenize_phonemes(word)
    print(f"   {' · '.join(tokens.texts)}")
    print(f"   IAST: {transliterate(word, Script.IAST)}")

    # Step 3: First vowel
    print("\n📖 Step 3: Classifying first vowel...")

    vowel = analyze_first_vowel(word)
    print(
        f"   {vowel.first_vowel} at {vowel.position} "
        f"(vṛddhi: {vowel.is_vrddhi}, guṇa: {vowel.is_guna}, eṅ: {vowel.is_eng_vowel})"
    )

    output = {
        "word": validation.word,
        "script": validation.script.value,
        "phonemes": tokens.sounds,
        "first_vowel": vowel.model_dump(),
    }

    # Step 4: Affix
    if affix:
        print("\n🔗 Step 4: Classifying affix...")

        report = validate_pada_analysis(affix, expected_pada)
        analysis = report.analysis
        if analysis is not None:
            tense = analysis.tense.value if analysis.tense else "-"
            print(f"   {analysis.affix}: {analysis.pada.label} ({tense})")
        for warning in report.warnings:
            print(f"   ⚠️ {warning}")
        for error in report.errors:
            print(f"   ❌ {error}")
        for suggestion in report.suggestions:
            print(f"   💡 {suggestion}")
        output["affix"] = report.model_dump(mode="json")

    return output


# Example usage
if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python basic_usage.py <word> [affix] [expected_pada]")
        print("Example: python basic_usage.py भवति ति parasmaipada")
        sys.exit(1)

    word = sys.argv[1]
    affix = sys.argv[2] if len(sys.argv) > 2 else None
    expected_pada = sys.argv[3] if len(sys.argv) > 3 else None

    output = analyze_word(word, affix, expected_pada)
    if output is None:
        sys.exit(1)

    print("\n📄 JSON output:")
    print(json.dumps(output, ensure_ascii=False, indent=2, default=str))

    print("\n🎉 Done!")
