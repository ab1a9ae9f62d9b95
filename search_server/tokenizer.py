"""
Tokenizer for the search server index.
Splits raw text into space-delimited words and validates them.
No stemming or case folding: a term is exactly what appears between spaces.
"""

from typing import Iterable

from nltk.tokenize import SpaceTokenizer

_TOKENIZER = SpaceTokenizer()

# Characters below this code point (tab, newline, ...) make a word invalid.
_FIRST_PRINTABLE = 0x20


def split_into_words(text: str) -> list[str]:
    """
    Split text on single spaces. Runs of spaces do not produce empty words.
    """
    if not text:
        return []
    return [word for word in _TOKENIZER.tokenize(text) if word]


def is_valid_word(word: str) -> bool:
    """Return False if the word contains a control character."""
    return all(ord(c) >= _FIRST_PRINTABLE for c in word)


def is_malformed_hyphen_token(token: str) -> bool:
    """A lone '-', a '--' anywhere, or a trailing '-'."""
    return token == "-" or "--" in token or token.endswith("-")


def split_stop_words(stop_words: str | Iterable[str] | None) -> list[str]:
    """
    Normalize a stop-word source to a list of words.
    Accepts a single space-separated string, any iterable of strings, or None.
    """
    if stop_words is None:
        return []
    if isinstance(stop_words, str):
        return split_into_words(stop_words)
    return [word for word in stop_words if word]
