from __future__ import annotations

import os
from typing import Mapping, Optional, Set

from acronym.errors import WordlistUnreadable
from acronym.vocab import LetterVocab

DEFAULT_WORDLIST = "/usr/share/dict/words"
WORDLIST_ENV = "WORDLIST"


def resolve_wordlist_path(option: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Pick the wordlist path: explicit option, then $WORDLIST, then the system dictionary.
    """
    if option:
        return option
    env = os.environ if environ is None else environ
    return env.get(WORDLIST_ENV) or DEFAULT_WORDLIST


def load_letter_vocab(path: str, needed: Optional[Set[str]] = None) -> LetterVocab:
    """
    Open the wordlist at `path` and index it by first letter.
    Undecodable bytes are kept as surrogate escapes so they round-trip to stdout.
    Raises WordlistUnreadable if the file cannot be opened; nothing is indexed in that case.
    """
    try:
        fh = open(path, "r", encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise WordlistUnreadable(path) from e
    with fh:
        return LetterVocab.from_stream(fh, needed=needed)
