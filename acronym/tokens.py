"""
tokens.py

Splits free-form input into whitespace-delimited tokens and reduces each one
to its lowercase ASCII letters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Set

from acronym.errors import NoInputLetters

_NON_LETTERS = re.compile(r"[^A-Za-z]+")


def sanitize(text: str) -> str:
    """Drop everything that is not an ASCII letter and lowercase the rest."""
    if not isinstance(text, str):
        raise TypeError("text must be a str")
    return _NON_LETTERS.sub("", text).lower()


@dataclass(frozen=True)
class Token:
    text: str
    letters: str

    def __len__(self) -> int:
        return len(self.letters)

    @classmethod
    def from_text(cls, text: str) -> "Token":
        return cls(text=text, letters=sanitize(text))


def tokenize(text: str) -> List[Token]:
    """
    Split `text` on runs of whitespace.

    Order and count are preserved; tokens that sanitize to "" are kept so
    callers can see where they were. Empty or blank input gives [].
    """
    if not isinstance(text, str):
        raise TypeError("text must be a str")
    return [Token.from_text(part) for part in text.split()]


def needed_letters(tokens: Iterable[Token]) -> Set[str]:
    out: Set[str] = set()
    for tok in tokens:
        out.update(tok.letters)
    return out


def total_letters(tokens: Iterable[Token]) -> int:
    return sum(len(tok) for tok in tokens)


def require_letters(tokens: List[Token]) -> List[Token]:
    """Return `tokens` unchanged; raise NoInputLetters if they hold no letters at all."""
    if total_letters(tokens) == 0:
        raise NoInputLetters()
    return tokens
