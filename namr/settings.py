#!/usr/bin/env python3
"""
Settings
========
Reads ``namr/configs/app.yaml`` once and exposes each section as a
small frozen dataclass, validated when it is first requested:

    selection_settings()  - length filter bounds
    lexicon_settings()    - word list paths and NLTK corpora
    spelling_settings()   - vowels used by the spelling rules
    acronym_settings()    - compiled acronym pattern

``get_setting`` / ``require_setting`` give raw dotted-path access for
anything else (e.g. the suffix rule table).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
APP_CONFIG_PATH = PACKAGE_ROOT / "configs" / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text(encoding="utf-8"))
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def require_setting(path: str) -> Any:
    value = get_setting(path)
    if value is None:
        raise ValueError(f"{path} must be set in app.yaml")
    return value


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to the package (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = ((base or PACKAGE_ROOT) / path).resolve()
    return path


def _require(raw: dict, key: str, section: str) -> Any:
    value = raw.get(key)
    if value is None:
        raise ValueError(f"{section}.{key} must be set in app.yaml")
    return value


def _require_int(raw: dict, key: str, section: str) -> int:
    value = _require(raw, key, section)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{section}.{key} must be a non-negative integer, got {value!r}")
    return value


# =============================================================================
# Sections
# =============================================================================

@dataclass(frozen=True)
class SelectionSettings:
    """Length filter bounds: tokens are kept when len < max or len > min."""
    min_length: int
    max_length: int

    @classmethod
    def from_config(cls, raw: dict) -> SelectionSettings:
        raw = raw or {}
        min_length = _require_int(raw, 'min_length', 'selection')
        max_length = _require_int(raw, 'max_length', 'selection')
        if min_length >= max_length:
            raise ValueError(
                f"selection.min_length ({min_length}) must be below "
                f"selection.max_length ({max_length})"
            )
        return cls(min_length=min_length, max_length=max_length)

    def keeps(self, token: str) -> bool:
        return len(token) < self.max_length or len(token) > self.min_length


@dataclass(frozen=True)
class LexiconSettings:
    """Where the word lists come from."""
    stopwords_path: Path
    parts_of_speech_path: Path
    nltk_stopwords: Optional[str]  # NLTK stopword language, None to skip
    use_wordnet: bool

    @classmethod
    def from_config(cls, raw: dict, base: Path | None = None) -> LexiconSettings:
        raw = raw or {}
        language = raw.get('nltk_stopwords')
        if language is not None and not isinstance(language, str):
            raise ValueError(f"lexicon.nltk_stopwords must be a language name, got {language!r}")
        use_wordnet = raw.get('use_wordnet', False)
        if not isinstance(use_wordnet, bool):
            raise ValueError(f"lexicon.use_wordnet must be true or false, got {use_wordnet!r}")
        return cls(
            stopwords_path=resolve_path(_require(raw, 'stopwords_path', 'lexicon'), base),
            parts_of_speech_path=resolve_path(_require(raw, 'parts_of_speech_path', 'lexicon'), base),
            nltk_stopwords=language,
            use_wordnet=use_wordnet,
        )


@dataclass(frozen=True)
class SpellingSettings:
    vowels: frozenset

    @classmethod
    def from_config(cls, raw: dict) -> SpellingSettings:
        vowels = _require(raw or {}, 'vowels', 'spelling')
        if not isinstance(vowels, str) or not vowels.isalpha():
            raise ValueError(f"spelling.vowels must be a string of letters, got {vowels!r}")
        return cls(vowels=frozenset(vowels.lower()))


@dataclass(frozen=True)
class AcronymSettings:
    pattern: re.Pattern

    @classmethod
    def from_config(cls, raw: dict) -> AcronymSettings:
        pattern = _require(raw or {}, 'pattern', 'acronyms')
        try:
            return cls(pattern=re.compile(pattern))
        except re.error as e:
            raise ValueError(f"acronyms.pattern is not a valid regex: {e}") from e


@lru_cache(maxsize=1)
def selection_settings() -> SelectionSettings:
    return SelectionSettings.from_config(get_setting('selection'))


@lru_cache(maxsize=1)
def lexicon_settings() -> LexiconSettings:
    return LexiconSettings.from_config(get_setting('lexicon'))


@lru_cache(maxsize=1)
def spelling_settings() -> SpellingSettings:
    return SpellingSettings.from_config(get_setting('spelling'))


@lru_cache(maxsize=1)
def acronym_settings() -> AcronymSettings:
    return AcronymSettings.from_config(get_setting('acronyms'))


__all__ = [
    "load_app_config",
    "get_setting",
    "require_setting",
    "resolve_path",
    "SelectionSettings",
    "LexiconSettings",
    "SpellingSettings",
    "AcronymSettings",
    "selection_settings",
    "lexicon_settings",
    "spelling_settings",
    "acronym_settings",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
