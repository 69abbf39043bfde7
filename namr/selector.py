#!/usr/bin/env python3
"""
Word Selection
==============
Picks a single (hopefully informative) word from a package title or
description.

Pipeline:
    1. lowercase and split on whitespace
    2. drop English stopwords and tokens containing a domain stem
    3. length filter
    4. choose one token: first verb (if requested), else the longer of
       the first and last tokens
    5. strip punctuation
"""

import logging
from typing import List, Sequence

from .errors import NoCandidateError
from .lexicon import Lexicon, load_lexicon
from .settings import selection_settings
from .text import fold_case, split_words, strip_punctuation

logger = logging.getLogger(__name__)


def tokenize_title(title: str, lexicon: Lexicon = None) -> List[str]:
    """
    Split a title into lowercase candidate words and filter them.

    Parameters
    ----------
    title : str
        Package title or description.
    lexicon : Lexicon, optional
        Word lists to filter against. Defaults to the packaged lexicon.

    Returns
    -------
    list of str
        Surviving tokens in title order. May be empty.
    """
    if lexicon is None:
        lexicon = load_lexicon()

    tokens = split_words(fold_case(title))
    if not tokens:
        return []

    tokens = [t for t in tokens if not lexicon.is_stopword(t)]
    tokens = [t for t in tokens if not lexicon.has_domain_stem(t)]
    # With min_length < max_length this keeps every token.
    selection = selection_settings()
    tokens = [t for t in tokens if selection.keeps(t)]

    logger.debug(f"Tokens kept from {title!r}: {tokens}")
    return tokens


def choose_candidate(
    tokens: Sequence[str],
    prefer_verb: bool = False,
    lexicon: Lexicon = None,
) -> str:
    """
    Choose one word from already-filtered tokens.

    Raises
    ------
    NoCandidateError
        If ``tokens`` is empty or the chosen word is only punctuation.
    """
    if not tokens:
        raise NoCandidateError()

    if len(tokens) == 1:
        word = tokens[0]
    else:
        if lexicon is None:
            lexicon = load_lexicon()
        tags = [lexicon.part_of_speech(t) for t in tokens]
        verbs = [t for t, tag in zip(tokens, tags) if tag and 'Verb' in tag]
        first, last = tokens[0], tokens[-1]

        if prefer_verb and verbs:
            word = verbs[0]
        elif len(last) > len(first):
            word = last
        else:
            word = first

    word = strip_punctuation(word)
    if not word:
        raise NoCandidateError()

    logger.debug(f"Selected word: {word}")
    return word


def select_word(title: str, prefer_verb: bool = False, lexicon: Lexicon = None) -> str:
    """Pick a single word from ``title``."""
    tokens = tokenize_title(title, lexicon=lexicon)
    return choose_candidate(tokens, prefer_verb=prefer_verb, lexicon=lexicon)


__all__ = ['tokenize_title', 'choose_candidate', 'select_word']
