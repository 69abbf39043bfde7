"""
Tests for Spelling Transformations
==================================
Tests the ordered R-like spelling rules in namr/spelling.py.
"""

import pytest

from namr.settings import spelling_settings
from namr.spelling import (
    SPELLING_RULES,
    SpellingResult,
    apply_spelling_transform,
    transform_spelling,
)


class TestSpellingExamples:
    """Reference examples for each rule."""

    def test_append_r(self):
        """Test a word with no r-ending gets an r appended."""
        assert apply_spelling_transform("tidy") == "tidyr"

    def test_drop_leading_vowel(self):
        """Test a leading vowel followed by r is dropped."""
        assert apply_spelling_transform("archive") == "rchive"

    def test_drop_vowel_before_r(self):
        """Test the vowel before a final r is dropped."""
        assert apply_spelling_transform("reader") == "readr"

    def test_prepend_r(self):
        """Test consonant + r endings get an r prepended."""
        assert apply_spelling_transform("instr") == "rinstr"


class TestSpellingRules:
    """Tests for rule ordering and the tagged result."""

    def test_rule_names_in_order(self):
        """Test rules are tried in the documented order."""
        names = [r.name for r in SPELLING_RULES]
        assert names == ['drop_vowel_before_r', 'drop_leading_vowel', 'prepend_r', 'append_r']

    def test_result_records_rule(self):
        """Test transform_spelling reports which rule fired."""
        result = transform_spelling("reader")
        assert isinstance(result, SpellingResult)
        assert result.word == "readr"
        assert result.rule == 'drop_vowel_before_r'

    def test_first_rule_wins(self):
        """Test only one rule fires when several would match."""
        # "order" matches drop_vowel_before_r and drop_leading_vowel
        result = transform_spelling("order")
        assert result.rule == 'drop_vowel_before_r'
        assert result.word == "ordr"

    def test_lowercases_input(self):
        """Test the word is lowercased before rewriting."""
        assert apply_spelling_transform("Reader") == "readr"

    def test_not_idempotent(self):
        """Test applying twice keeps changing the word."""
        once = apply_spelling_transform("tidy")
        assert apply_spelling_transform(once) != once

    def test_single_letter_appends_r(self):
        """Test one-letter words fall through to append_r."""
        assert transform_spelling("x") == SpellingResult(word="xr", rule='append_r')

    def test_empty_word_raises(self):
        """Test an empty word is rejected."""
        with pytest.raises(ValueError):
            apply_spelling_transform("")

    def test_fallback_is_last_rule(self):
        """Test append_r closes the rule table and is used when nothing else matches."""
        assert SPELLING_RULES[-1].name == 'append_r'
        assert transform_spelling("tidy").rule == 'append_r'

    def test_vowels_from_settings(self):
        """Test the vowel set comes from app.yaml."""
        assert spelling_settings().vowels == frozenset("aeiou")
        # y is not a vowel: consonant + r takes the prepend_r rule
        assert transform_spelling("yr").rule == 'prepend_r'

    def test_rule_table_is_immutable(self):
        """Test the rule table cannot be changed by callers."""
        assert isinstance(SPELLING_RULES, tuple)
