#!/usr/bin/env python3
"""
Common Suffixes
===============
Adds an informative affix when the title mentions tidy data,
visualisation, plotting or markdown.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence, Tuple

from .settings import require_setting
from .text import starts_word

logger = logging.getLogger(__name__)

POSITIONS = ('prefix', 'suffix')


@dataclass(frozen=True)
class SuffixRule:
    """Affix added when some title word starts with ``keyword``."""
    keyword: str
    affix: str
    position: str  # 'prefix' or 'suffix'

    def apply(self, name: str) -> str:
        if self.position == 'prefix':
            return self.affix + name
        return name + self.affix


@lru_cache(maxsize=1)
def load_suffix_rules() -> Tuple[SuffixRule, ...]:
    """Load the ordered rule table from app.yaml."""
    rules = []
    for raw in require_setting('suffixes.rules'):
        position = raw.get('position', 'suffix')
        if position not in POSITIONS:
            raise ValueError(f"suffixes.rules: invalid position '{position}'")
        rules.append(SuffixRule(
            keyword=str(raw['prefix']),
            affix=str(raw['affix']),
            position=position,
        ))
    return tuple(rules)


def match_suffix_rule(title: str, rules: Sequence[SuffixRule] = None) -> Optional[SuffixRule]:
    """Return the first rule whose keyword starts a word of ``title``."""
    if rules is None:
        rules = load_suffix_rules()
    for rule in rules:
        if starts_word(title, rule.keyword):
            return rule
    return None


def decorate_with_suffix(title: str, name: str, rules: Sequence[SuffixRule] = None) -> str:
    """Add the affix matching ``title`` to ``name``, if any."""
    rule = match_suffix_rule(title, rules)
    if rule is None:
        return name
    logger.debug(f"Title matches '{rule.keyword}', adding {rule.position} '{rule.affix}'")
    return rule.apply(name)


__all__ = ['SuffixRule', 'load_suffix_rules', 'match_suffix_rule', 'decorate_with_suffix']
