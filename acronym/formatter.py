"""
formatter.py

Turns sanitized tokens into output lines: one draw per letter, title-cased,
space-joined, one line per token that still has letters.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from acronym.sampler import LetterSampler
from acronym.tokens import Token, require_letters, tokenize
from acronym.vocab import LetterVocab


def title_case(word: str) -> str:
    # Only the first character changes; "McDonald" stays "McDonald"
    if not word:
        return word
    return word[0].upper() + word[1:]


def placeholder(letter: str) -> str:
    return f"(no-match:{letter})"


def format_token(token: Token, sampler: LetterSampler) -> str:
    out: List[str] = []
    for c in token.letters:
        word = sampler.draw(c)
        if word is None:
            word = placeholder(c)
        out.append(title_case(word))
    return " ".join(out)


def expand_tokens(tokens: Iterable[Token], sampler: LetterSampler) -> List[str]:
    """One line per token with letters; tokens that sanitized to "" produce nothing."""
    return [format_token(tok, sampler) for tok in tokens if len(tok) > 0]


def expand_text(
    text: str,
    vocab: LetterVocab,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Full pipeline for an in-memory vocab.

    Raises NoInputLetters if `text` has no ASCII letters.
    """
    tokens = require_letters(tokenize(text))
    sampler = LetterSampler(vocab, seed=seed, rng=rng)
    return expand_tokens(tokens, sampler)


def render(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)
