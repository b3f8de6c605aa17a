"""
expander/expander_cli.py

Acronym expander: every letter of every input word becomes a random
dictionary word starting with that letter, one output line per input word.

Run:
  python -m expander.expander_cli "NASA"
  python -m expander.expander_cli -w ./words.txt Make Acronyms Great Again
  WORDLIST=./words.txt python -m expander.expander_cli hello world

Exit codes:
  0 -> success
  1 -> wordlist not readable
  2 -> usage error (no input, or no letters in the input)
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from acronym.data_utils import DEFAULT_WORDLIST, WORDLIST_ENV, load_letter_vocab, resolve_wordlist_path
from acronym.errors import UsageError, WordlistUnreadable
from acronym.formatter import expand_text, render
from acronym.tokens import needed_letters, tokenize

EPILOG = f"""\
environment:
  {WORDLIST_ENV}  alternative way to set the wordlist path (overridden by -w)

notes:
  - Non-alphabetic characters are ignored.
  - Output is one line per input word.
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="acronymize",
        description="Expand text into a random acronym, one dictionary word per letter",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("-w", "--wordlist", metavar="PATH", default=None,
                    help=f"use a custom wordlist (default: {DEFAULT_WORDLIST})")
    ap.add_argument("--seed", type=int, default=None,
                    help="fix the random seed for reproducible output")
    ap.add_argument("text", nargs=argparse.REMAINDER,
                    help="input text (quotes optional); everything from the first word on is text")
    return ap


def run(text: str, wordlist: str, seed: Optional[int] = None) -> List[str]:
    """
    Expand `text` against the wordlist at `wordlist`.
    Raises UsageError for blank/letterless input and WordlistUnreadable for a bad path.
    """
    if not text.strip():
        raise UsageError("no input text given")

    # Readability is checked before the letter count, so a bad path wins over "!!!"
    vocab = load_letter_vocab(wordlist, needed=needed_letters(tokenize(text)))
    return expand_text(text, vocab, seed=seed)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    text = " ".join(args.text)
    wordlist = resolve_wordlist_path(args.wordlist)

    try:
        lines = run(text, wordlist, seed=args.seed)
    except WordlistUnreadable as e:
        print(e, file=sys.stderr)
        return e.exit_code
    except UsageError as e:
        if not text.strip():
            ap.print_usage(sys.stderr)
        print(e, file=sys.stderr)
        return e.exit_code

    # Wordlist bytes that were not UTF-8 go back out unchanged
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")
    sys.stdout.write(render(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
