"""Shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namr.lexicon import Lexicon


@pytest.fixture
def small_lexicon():
    """A tiny vocabulary independent of the packaged word lists."""
    return Lexicon.build(
        english_stopwords=["the", "of", "and", "a", "for"],
        domain_stems=["data", "tool"],
        pos_entries=[
            ("run", "Verb (intransitive)"),
            ("run", "Noun"),
            ("fast", "Adjective"),
            ("gene", "Noun"),
            ("align", "Verb (transitive)"),
        ],
    )
