#!/usr/bin/env python3
"""
Name Generator
==============
Suggests a package name from its title:

    word     <- pick a word from the title
    name     <- make its spelling R-like
    name     <- name + acronym (optional)
    name     <- add a common affix (tidy, viz, vis, plot, down)

Example
-------
    >>> generate_name("Render Scenes in a Browser")
    'browsr'
"""

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from .acronyms import find_acronym
from .lexicon import Lexicon
from .selector import select_word
from .spelling import transform_spelling
from .suffixes import match_suffix_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameSuggestion:
    """A generated name together with the steps that produced it."""
    title: str
    word: str
    spelled: str
    rule: str
    acronym: Optional[str]
    affix: Optional[str]
    name: str

    def to_dict(self) -> dict:
        return asdict(self)


def suggest_name(
    title: str,
    include_acronym: bool = False,
    prefer_verb: bool = False,
    lexicon: Lexicon = None,
) -> NameSuggestion:
    """
    Suggest a package name and record how it was built.

    Parameters
    ----------
    title : str
        Package title or description.
    include_acronym : bool
        Append the first acronym of the title (lowercased), if there is one.
    prefer_verb : bool
        Prefer the first verb in the title as the seed word.
    lexicon : Lexicon, optional
        Word lists to use instead of the packaged ones.

    Raises
    ------
    NoCandidateError
        If no usable word is left in the title.
    ReduplicationError
        If ``include_acronym`` is set and the picked word is the acronym.
    """
    word = select_word(title, prefer_verb=prefer_verb, lexicon=lexicon)
    spelling = transform_spelling(word)
    name = spelling.word

    acronym = None
    if include_acronym:
        acronym = find_acronym(title, lexicon=lexicon)
        if acronym:
            name = name + acronym.lower()

    rule = match_suffix_rule(title)
    affix = None
    if rule is not None:
        name = rule.apply(name)
        affix = rule.affix

    logger.debug(f"Generated '{name}' from {title!r}")
    return NameSuggestion(
        title=title,
        word=word,
        spelled=spelling.word,
        rule=spelling.rule,
        acronym=acronym,
        affix=affix,
        name=name,
    )


def generate_name(
    title: str,
    include_acronym: bool = False,
    prefer_verb: bool = False,
    lexicon: Lexicon = None,
) -> str:
    """Suggest a package name for ``title``."""
    return suggest_name(
        title,
        include_acronym=include_acronym,
        prefer_verb=prefer_verb,
        lexicon=lexicon,
    ).name


__all__ = ['NameSuggestion', 'suggest_name', 'generate_name']
