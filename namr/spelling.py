#!/usr/bin/env python3
"""
Spelling Transformations
========================
Rewrites a word so it reads like a terse, R-style package name
("reader" -> "readr", "tidy" -> "tidyr").

Rules are tried in order and the first one that matches is applied.
Every rule looks at the original (lowercased) word.
"""

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Tuple

from .settings import spelling_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpellingRule:
    """A guarded rewrite: ``applies`` decides, ``rewrite`` transforms."""
    name: str
    description: str
    applies: Callable[[str, FrozenSet[str]], bool]
    rewrite: Callable[[str], str]


@dataclass(frozen=True)
class SpellingResult:
    """Transformed word and the rule that produced it."""
    word: str
    rule: str


def _vowel_before_final_r(w: str, vowels: FrozenSet[str]) -> bool:
    return len(w) >= 2 and w[-2] in vowels and w[-1] == 'r'


def _leading_vowel_then_r(w: str, vowels: FrozenSet[str]) -> bool:
    return len(w) >= 2 and w[0] in vowels and w[1] == 'r'


def _consonant_before_final_r(w: str, vowels: FrozenSet[str]) -> bool:
    return len(w) >= 2 and w[-2] not in vowels and w[-1] == 'r'


SPELLING_RULES: Tuple[SpellingRule, ...] = (
    SpellingRule(
        'drop_vowel_before_r',
        'drop the vowel before a final r',
        _vowel_before_final_r,
        lambda w: w[:-2] + w[-1],
    ),
    SpellingRule(
        'drop_leading_vowel',
        'drop a leading vowel followed by r',
        _leading_vowel_then_r,
        lambda w: w[1:],
    ),
    SpellingRule(
        'prepend_r',
        'prepend r to a word ending in consonant + r',
        _consonant_before_final_r,
        lambda w: 'r' + w,
    ),
    SpellingRule(
        'append_r',
        'append r',
        lambda w, vowels: True,
        lambda w: w + 'r',
    ),
)


def transform_spelling(word: str) -> SpellingResult:
    """
    Apply the first matching spelling rule to ``word``.

    The last rule (append_r) is the fallback and always applies.

    Raises
    ------
    ValueError
        If ``word`` is empty.
    """
    if not word:
        raise ValueError("word must not be empty")

    w = word.lower()
    vowels = spelling_settings().vowels
    *guarded, fallback = SPELLING_RULES
    rule = next((r for r in guarded if r.applies(w, vowels)), fallback)

    result = SpellingResult(word=rule.rewrite(w), rule=rule.name)
    logger.debug(f"Spelling rule {rule.name}: {w} -> {result.word}")
    return result


def apply_spelling_transform(word: str) -> str:
    """Make ``word`` more R-like."""
    return transform_spelling(word).word


__all__ = [
    'SpellingRule',
    'SpellingResult',
    'SPELLING_RULES',
    'transform_spelling',
    'apply_spelling_transform',
]
