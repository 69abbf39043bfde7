#!/usr/bin/env python3
"""
namr - Package Name Suggestions
===============================

Picks a short, memorable package name from a package title or
description: an informative word from the title, an R-like spelling
("reader" -> "readr"), an optional acronym and a thematic affix.

Quick Start
-----------
    from namr import generate_name

    generate_name("A Package for Displaying Visual Scenes")
    generate_name("Interface to the NCBI Entrez Database", include_acronym=True)
    generate_name("Simulate and Track Animal Movement", prefer_verb=True)

Modules
-------
    namr.selector   - Word tokenizing, filtering and selection
    namr.spelling   - R-like spelling transformations
    namr.acronyms   - Acronym detection
    namr.suffixes   - Thematic affixes (tidy, viz, vis, plot, down)
    namr.generator  - The full pipeline
    namr.lexicon    - Stopwords and part-of-speech table
    namr.settings   - app.yaml settings

CLI Usage
---------
    python -m namr generate "A Package for Displaying Visual Scenes"
    python -m namr generate "Interface to the NCBI Entrez Database" --acronym --explain
"""

__version__ = "0.1.0"

from .errors import NamrError, NoCandidateError, ReduplicationError
from .lexicon import Lexicon, load_lexicon, part_of_speech
from .selector import tokenize_title, choose_candidate, select_word
from .spelling import SpellingResult, transform_spelling, apply_spelling_transform
from .acronyms import find_acronyms, find_acronym
from .suffixes import SuffixRule, match_suffix_rule, decorate_with_suffix
from .generator import NameSuggestion, suggest_name, generate_name

__all__ = [
    # Pipeline
    'generate_name',
    'suggest_name',
    'NameSuggestion',
    # Steps
    'tokenize_title',
    'choose_candidate',
    'select_word',
    'transform_spelling',
    'apply_spelling_transform',
    'SpellingResult',
    'find_acronyms',
    'find_acronym',
    'match_suffix_rule',
    'decorate_with_suffix',
    'SuffixRule',
    # Word lists
    'Lexicon',
    'load_lexicon',
    'part_of_speech',
    # Errors
    'NamrError',
    'NoCandidateError',
    'ReduplicationError',
]
