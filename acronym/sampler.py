from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional

from acronym.vocab import LetterVocab


class LetterBucket:
    """
    Candidates for one letter, handed out in a shuffled order.

    Every word is produced once per pass; when the pass is used up a fresh
    permutation is drawn. The last word of one pass may equal the first of
    the next.
    """

    def __init__(self, words: List[str], rng: random.Random) -> None:
        self.words: List[str] = list(words)
        self._rng = rng
        self.perm: List[int] = []
        self.cursor = 0

    def __len__(self) -> int:
        return len(self.words)

    def shuffle(self) -> None:
        # Fisher-Yates, end to start
        perm = list(range(len(self.words)))
        for j in range(len(perm) - 1, 0, -1):
            k = self._rng.randrange(j + 1)
            perm[j], perm[k] = perm[k], perm[j]
        self.perm = perm
        self.cursor = 0

    def next_word(self) -> Optional[str]:
        if not self.words:
            return None
        if not self.perm:
            self.shuffle()
        word = self.words[self.perm[self.cursor]]
        self.cursor += 1
        if self.cursor >= len(self.perm):
            self.shuffle()
        return word


class LetterSampler:
    def __init__(self, vocab: LetterVocab, seed: int | None = None, rng: random.Random | None = None) -> None:
        # Validate vocab
        if not isinstance(vocab, LetterVocab):
            raise TypeError("vocab must be a LetterVocab")

        self._vocab = vocab

        # Create RNG (deterministic if seed provided)
        self._rng = rng if rng is not None else random.Random(seed)
        self._seed = seed
        self._buckets: Dict[str, LetterBucket] = {}

    def set_seed(self, seed: int) -> None:
        """Re-seed and forget all shuffle state."""
        self._rng = random.Random(seed)
        self._seed = seed
        self._buckets = {}

    def bucket(self, letter: str) -> LetterBucket:
        if not isinstance(letter, str) or len(letter) != 1:
            raise ValueError(f"letter must be a single character, got {letter!r}")
        try:
            return self._buckets[letter]
        except KeyError:
            b = self._buckets[letter] = LetterBucket(self._vocab.words_for(letter), self._rng)
            return b

    def draw(self, letter: str) -> Optional[str]:
        """Next word for `letter`, or None when the wordlist has nothing starting with it."""
        return self.bucket(letter).next_word()

    def draw_many(self, letters: Iterable[str]) -> List[Optional[str]]:
        return [self.draw(c) for c in letters]
