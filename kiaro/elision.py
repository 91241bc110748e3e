"""
Token-shape helpers for the text scanner: letters and fixed elisions.

A fixed elision ("l'", "dell'", "gliel'" ...) is copied through untouched;
only the word that follows it is transformed.
"""
import re
from typing import Optional

from .normalizer import APOSTROPHE, CURLY_APOSTROPHE, unify_apostrophes

FIXED_ELISION_PREFIXES = frozenset({
    "l'", "un'", "d'",
    "all'", "dall'", "dell'", "nell'", "sull'", "coll'", "pell'",
    "gliel'",
    "m'", "t'", "s'", "c'", "v'",
})

_VOWEL_OR_H_START = re.compile(r"^[aeiouàèéìòóùh]", re.IGNORECASE)


def is_letter(ch: str) -> bool:
    """ASCII letters plus the Latin-1 / Latin Extended block (U+00C0-U+02AF)."""
    code = ord(ch)
    if 65 <= code <= 90 or 97 <= code <= 122:
        return True
    return 192 <= code <= 687


def is_apostrophe(ch: str) -> bool:
    return ch == APOSTROPHE or ch == CURLY_APOSTROPHE


def read_letters(text: str, start: int) -> int:
    """Index just past the run of letters starting at `start`."""
    end = start
    while end < len(text) and is_letter(text[end]):
        end += 1
    return end


def read_elision_prefix(text: str, start: int) -> Optional[str]:
    """
    Recognize a fixed elision at `start`.

    Returns:
        The prefix as written (apostrophe unified), or None.
    """
    if start >= len(text) or not is_letter(text[start]):
        return None
    end = read_letters(text, start)
    if end >= len(text) or not is_apostrophe(text[end]):
        return None

    prefix = unify_apostrophes(text[start:end + 1])
    if prefix.lower() in FIXED_ELISION_PREFIXES:
        return prefix
    return None


def starts_with_vowel_or_h(word: str) -> bool:
    return bool(_VOWEL_OR_H_START.match(word))
