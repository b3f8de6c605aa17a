"""
errors.py

Exceptions raised by the acronym pipeline. The CLI maps them to exit codes.
"""

from __future__ import annotations


class AcronymError(Exception):
    """Base class for all acronym expansion errors."""


class UsageError(AcronymError, ValueError):
    """No usable input text was given (exit code 2)."""

    exit_code = 2


class NoInputLetters(UsageError):
    def __init__(self, message: str = "No alphabetic characters found in input.") -> None:
        super().__init__(message)


class WordlistUnreadable(AcronymError, OSError):
    """The configured wordlist could not be opened for reading (exit code 1)."""

    exit_code = 1

    def __init__(self, path: str) -> None:
        super().__init__(f"Wordlist not readable: {path}")
        self.path = path
