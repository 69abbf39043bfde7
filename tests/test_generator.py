"""
Tests for the Name Generator
============================
Tests the full pipeline in namr/generator.py.
"""

import pytest

from namr import generate_name, suggest_name, NameSuggestion
from namr.errors import NoCandidateError, ReduplicationError


class TestGenerateName:
    """Tests for generate_name()."""

    def test_basic(self):
        """Test a plain title."""
        assert generate_name("Render Scenes in a Browser") == "browsr"

    def test_prefer_verb(self):
        """Test prefer_verb seeds the name with a verb."""
        assert generate_name("Render Scenes in a Browser", prefer_verb=True) == "rendr"

    def test_prefer_verb_everyday_vocabulary(self):
        """Test a verb outside the packaged table seeds the name."""
        title = "Genomic Variants Impute Genotypes"
        assert generate_name(title, prefer_verb=True) == "imputer"

    def test_with_suffix(self):
        """Test the affix step runs after spelling."""
        assert generate_name("Tidy Tools for Forest Weather") == "tidyweathr"

    def test_with_acronym(self):
        """Test the acronym is appended lowercased without a separator."""
        title = "Interface to the NCBI Entrez Database"
        assert generate_name(title) == "entrezr"
        assert generate_name(title, include_acronym=True) == "entrezrncbi"

    def test_acronym_requested_but_absent(self):
        """Test a missing acronym leaves the name unchanged."""
        assert generate_name("Forest Weather", include_acronym=True) == "weathr"

    def test_acronym_then_suffix(self):
        """Test the affix is added after the acronym."""
        title = "Plotting NOAA Forest Weather"
        assert generate_name(title, include_acronym=True) == "weathrnoaaplot"

    def test_reduplication(self):
        """Test a title that is only an acronym fails with acronyms on."""
        assert generate_name("NCBI") == "ncbir"
        with pytest.raises(ReduplicationError):
            generate_name("NCBI", include_acronym=True)

    def test_no_candidate(self):
        """Test titles without usable words fail instead of defaulting."""
        with pytest.raises(NoCandidateError):
            generate_name("A Package for the Data")

    @pytest.mark.parametrize("title", [
        "A Package for Displaying Visual Scenes as They May Appear to an Animal with Lower Acuity",
        "Analysis of Ecological Data : Exploratory and Euclidean Methods in Environmental Sciences",
        "Population Assignment using Genetic, Non-Genetic or Integrated Data in a Machine Learning Framework",
    ])
    def test_real_titles_give_names(self, title):
        """Test real package titles produce non-empty names."""
        name = generate_name(title)
        assert isinstance(name, str)
        assert name

    def test_injected_lexicon(self, small_lexicon):
        """Test the pipeline uses the given lexicon."""
        assert generate_name("run fast", lexicon=small_lexicon) == "fastr"
        assert generate_name("run fast", prefer_verb=True, lexicon=small_lexicon) == "runr"


class TestSuggestName:
    """Tests for suggest_name()."""

    def test_records_steps(self):
        """Test every pipeline step is recorded."""
        s = suggest_name("Plotting NOAA Forest Weather", include_acronym=True)
        assert isinstance(s, NameSuggestion)
        assert s.word == "weather"
        assert s.spelled == "weathr"
        assert s.rule == 'drop_vowel_before_r'
        assert s.acronym == "NOAA"
        assert s.affix == "plot"
        assert s.name == "weathrnoaaplot"

    def test_optional_steps_empty(self):
        """Test acronym and affix are None when unused."""
        s = suggest_name("Forest Weather")
        assert s.acronym is None
        assert s.affix is None

    def test_to_dict(self):
        """Test the suggestion converts to a plain dict."""
        d = suggest_name("Forest Weather").to_dict()
        assert d['name'] == "weathr"
        assert set(d) == {'title', 'word', 'spelled', 'rule', 'acronym', 'affix', 'name'}
