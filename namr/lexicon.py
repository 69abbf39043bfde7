#!/usr/bin/env python3
"""
Lexicon
=======
Static word lists consulted while picking a word:

- English stopwords (exact match): packaged list + NLTK stopwords corpus
- Domain stopword stems (substring match)
- Part-of-speech table (word -> tag, first entry wins), with WordNet
  tagging words the packaged table does not list

The default lexicon is built once per process. Every lookup function
takes an optional ``lexicon`` so callers can inject a small vocabulary
instead.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple

import nltk
import yaml

from .settings import lexicon_settings

logger = logging.getLogger(__name__)

# NLTK resource paths, by download id
NLTK_RESOURCES = {
    'stopwords': 'corpora/stopwords',
    'wordnet': 'corpora/wordnet',
}

# WordNet synset pos -> Moby-style tag
WORDNET_TAGS = {
    'n': 'Noun',
    'v': 'Verb',
    'a': 'Adjective',
    's': 'Adjective',
    'r': 'Adverb',
}

Tagger = Callable[[str], Optional[str]]


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class Lexicon:
    """Read-only stopword set and part-of-speech table."""
    english_stopwords: frozenset = frozenset()
    domain_stems: Tuple[str, ...] = ()
    parts_of_speech: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    # Consulted for words missing from parts_of_speech
    fallback_tagger: Optional[Tagger] = field(default=None, compare=False)

    @classmethod
    def build(
        cls,
        english_stopwords: Iterable[str] = (),
        domain_stems: Iterable[str] = (),
        pos_entries: Iterable[Sequence[str]] = (),
        fallback_tagger: Tagger = None,
    ) -> 'Lexicon':
        """
        Build a lexicon from plain word lists.

        Parameters
        ----------
        english_stopwords : iterable of str
            Words dropped on exact match.
        domain_stems : iterable of str
            Substrings; tokens containing any of them are dropped.
        pos_entries : iterable of (word, tag) pairs
            Ordered; when a word repeats, its first tag is kept.
        fallback_tagger : callable, optional
            ``word -> tag or None`` for words not in ``pos_entries``.
        """
        table: Dict[str, str] = {}
        for word, tag in pos_entries:
            table.setdefault(str(word).lower(), str(tag))
        return cls(
            english_stopwords=frozenset(str(w).lower() for w in english_stopwords),
            domain_stems=tuple(str(s).lower() for s in domain_stems),
            parts_of_speech=MappingProxyType(table),
            fallback_tagger=fallback_tagger,
        )

    def is_stopword(self, token: str) -> bool:
        return token in self.english_stopwords

    def has_domain_stem(self, token: str) -> bool:
        return any(stem in token for stem in self.domain_stems)

    def part_of_speech(self, word: str) -> Optional[str]:
        """Return the tag for ``word``, or None when it is unknown."""
        tag = self.parts_of_speech.get(word)
        if tag is None and self.fallback_tagger is not None:
            tag = self.fallback_tagger(word)
        return tag


# =============================================================================
# NLTK
# =============================================================================

def ensure_nltk_data(*names: str):
    """Download NLTK corpora that are not installed yet."""
    for name in names:
        try:
            nltk.data.find(NLTK_RESOURCES[name])
        except LookupError:
            logger.info(f"Downloading NLTK corpus '{name}'...")
            nltk.download(name, quiet=True)


def nltk_stopwords(language: str = 'english') -> list:
    """Stopwords from the NLTK stopwords corpus."""
    ensure_nltk_data('stopwords')
    from nltk.corpus import stopwords
    return stopwords.words(language)


@lru_cache(maxsize=4096)
def wordnet_part_of_speech(word: str) -> Optional[str]:
    """Tag ``word`` by its first WordNet synset (inflections included)."""
    from nltk.corpus import wordnet
    synsets = wordnet.synsets(word)
    if not synsets:
        return None
    return WORDNET_TAGS.get(synsets[0].pos())


# =============================================================================
# Loaders
# =============================================================================

def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        raise FileNotFoundError(f"Lexicon file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_stopwords(path: Path) -> Tuple[list, list]:
    """Load (english, domain_stems) from a stopwords YAML file."""
    raw = _load_yaml(path)
    return raw.get('english', []) or [], raw.get('domain_stems', []) or []


def load_pos_entries(path: Path) -> list:
    """Load ordered [word, tag] pairs from a part-of-speech YAML file."""
    raw = _load_yaml(path)
    entries = raw.get('entries', []) or []
    for entry in entries:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"Invalid part-of-speech entry in {path}: {entry!r}")
    return entries


@lru_cache(maxsize=1)
def load_lexicon() -> Lexicon:
    """Load the default lexicon configured in app.yaml."""
    cfg = lexicon_settings()

    english, stems = load_stopwords(cfg.stopwords_path)
    if cfg.nltk_stopwords:
        english = list(english) + nltk_stopwords(cfg.nltk_stopwords)

    tagger = None
    if cfg.use_wordnet:
        ensure_nltk_data('wordnet')
        tagger = wordnet_part_of_speech

    lexicon = Lexicon.build(english, stems, load_pos_entries(cfg.parts_of_speech_path), tagger)
    logger.debug(
        f"Loaded lexicon: {len(lexicon.english_stopwords)} stopwords, "
        f"{len(lexicon.domain_stems)} domain stems, "
        f"{len(lexicon.parts_of_speech)} tagged words"
        + (" + WordNet" if tagger else "")
    )
    return lexicon


def part_of_speech(word: str, lexicon: Lexicon = None) -> Optional[str]:
    """Look up the part of speech of ``word``."""
    if lexicon is None:
        lexicon = load_lexicon()
    return lexicon.part_of_speech(word)


__all__ = [
    'Lexicon',
    'load_lexicon',
    'load_stopwords',
    'load_pos_entries',
    'ensure_nltk_data',
    'nltk_stopwords',
    'wordnet_part_of_speech',
    'part_of_speech',
]
