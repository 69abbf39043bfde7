#!/usr/bin/env python3
"""Find acronyms (all-caps words) in a title."""

import logging
from typing import List, Optional

from .errors import ReduplicationError
from .lexicon import Lexicon
from .selector import select_word
from .settings import acronym_settings
from .text import split_on_spaces

logger = logging.getLogger(__name__)


def find_acronyms(title: str) -> List[str]:
    """Return every space-separated token that is only uppercase letters."""
    pattern = acronym_settings().pattern
    return [t for t in split_on_spaces(title) if pattern.fullmatch(t)]


def find_acronym(title: str, lexicon: Lexicon = None) -> Optional[str]:
    """
    Return the first acronym in ``title``, case preserved.

    Returns None when the title has no acronym.

    Raises
    ------
    ReduplicationError
        If the word picked from the title is itself one of its acronyms.
    NoCandidateError
        If no word can be picked from the title at all.
    """
    acronyms = find_acronyms(title)

    word = select_word(title, lexicon=lexicon)
    if word in {a.lower() for a in acronyms}:
        raise ReduplicationError(word)

    if not acronyms:
        return None
    logger.debug(f"Acronyms in {title!r}: {acronyms}")
    return acronyms[0]


__all__ = ['find_acronyms', 'find_acronym']
