"""Word splitter that cuts text on runs of whitespace."""
from __future__ import annotations

import re

from domain.interfaces import WordSplitter

_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")
_CONTROL_CHARACTER_LIMIT = 32


def split_into_words(text: str) -> list[str]:
    """Split ``text`` on whitespace runs, dropping empty pieces."""
    if not text:
        return []
    return [word for word in _WHITESPACE_RE.split(text) if word]


def is_valid_word(word: str) -> bool:
    """A word is valid when none of its code points lies in [0, 31]."""
    return all(ord(char) >= _CONTROL_CHARACTER_LIMIT for char in word)


class WhitespaceSplitter(WordSplitter):
    """Default splitter used by the search server."""

    def split(self, text: str) -> list[str]:
        return split_into_words(text)

    def is_valid_word(self, word: str) -> bool:
        return is_valid_word(word)


__all__ = ["WhitespaceSplitter", "split_into_words", "is_valid_word"]
