#!/usr/bin/env python3
"""
Text Utilities
==============
Small pure string helpers shared by the selector, the acronym finder
and the suffix decorator.
"""

import re
import string
from typing import List

# ASCII punctuation, same set as POSIX [[:punct:]]
PUNCTUATION_RE = re.compile(f"[{re.escape(string.punctuation)}]")
WHITESPACE_RE = re.compile(r"\s+")


def fold_case(text: str) -> str:
    return text.lower()


def strip_punctuation(text: str) -> str:
    """Remove every ASCII punctuation character."""
    return PUNCTUATION_RE.sub("", text)


def split_words(text: str) -> List[str]:
    """Split on runs of whitespace, dropping empty pieces."""
    return [w for w in WHITESPACE_RE.split(text) if w]


def split_on_spaces(text: str) -> List[str]:
    """Split on single spaces only (tabs and newlines stay inside tokens)."""
    return text.split(" ")


def starts_word(text: str, prefix: str) -> bool:
    """True if some word in ``text`` starts with ``prefix`` (case-insensitive)."""
    return re.search(rf"\b{re.escape(prefix)}", text, re.IGNORECASE) is not None
