#!/usr/bin/env python3
"""Exceptions raised while generating a name."""


class NamrError(Exception):
    """Base class for name generation failures."""


class NoCandidateError(NamrError):
    """No usable word survived filtering."""

    def __init__(self, message: str = None):
        super().__init__(
            message
            or "Sorry, we couldn't make a good name from your title. "
               "Try using more specific words in your description."
        )


class ReduplicationError(NamrError):
    """The selected word is itself an acronym from the title."""

    def __init__(self, word: str = None):
        self.word = word
        message = "Title is already an acronym."
        if word:
            message = f"Title is already an acronym ('{word}')."
        super().__init__(message)


__all__ = ['NamrError', 'NoCandidateError', 'ReduplicationError']
