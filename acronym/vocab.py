from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Set, TextIO
import pandas as pd


POSSESSIVE_SUFFIX = "'s"


def trim_possessive(word: str) -> str:
    """Remove one trailing apostrophe+s ("dog's" -> "dog"); never recurses."""
    if word.endswith(POSSESSIVE_SUFFIX):
        return word[: -len(POSSESSIVE_SUFFIX)]
    return word


class LetterVocab:
    def __init__(self, buckets: Dict[str, List[str]]) -> None:
        if not isinstance(buckets, dict):
            raise TypeError("`buckets` must be a dict of letter -> list of words")
        for letter, words in buckets.items():
            if not isinstance(letter, str) or not letter:
                raise TypeError("bucket keys must be non-empty str")
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                raise TypeError(f"bucket {letter!r} must be a list of str")

        # Empty buckets are dropped; a missing letter is the no-match state
        self._buckets: Dict[str, List[str]] = {k: list(v) for k, v in buckets.items() if v}

    # ---------- Construction helpers ----------

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        needed: Optional[Set[str]] = None,
    ) -> "LetterVocab":
        """
        Index a line-oriented wordlist by lowercase first letter.

        Parameters
        ----------
        lines : iterable of str
            One candidate word per line; line terminators are ignored.
        needed : set of str, optional
            If given, only words whose key is in this set are kept.

        Each line has one trailing "'s" removed, empty results are skipped,
        and words keep their original case and file order within a bucket.
        """
        series = pd.Series(list(lines), dtype=object)
        series = series.str.rstrip("\r\n")
        series = series.map(trim_possessive)
        series = series[series.str.len() > 0]

        keys = series.str[0].str.lower()
        if needed is not None:
            keep = keys.isin(list(needed))
            series = series[keep]
            keys = keys[keep]

        buckets: Dict[str, List[str]] = {}
        for letter, group in series.groupby(keys, sort=False):
            buckets[letter] = group.tolist()
        return cls(buckets)

    @classmethod
    def from_stream(cls, stream: TextIO, needed: Optional[Set[str]] = None) -> "LetterVocab":
        """Read an open text stream to the end and index it."""
        return cls.from_lines(stream, needed=needed)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Total number of indexed words across all letters."""
        return sum(len(words) for words in self._buckets.values())

    def __contains__(self, letter: object) -> bool:
        return letter in self._buckets

    def letters(self) -> List[str]:
        return sorted(self._buckets)

    def count(self, letter: str) -> int:
        return len(self._buckets.get(letter, ()))

    def words_for(self, letter: str) -> List[str]:
        """Return a copy of the candidates for `letter` ([] when there are none)."""
        return list(self._buckets.get(letter, ()))
