"""
Clitic pronoun splitting ("lasciatemi" -> "lasciate" + "mi").

Also handles the poetic truncated infinitive in front of a clitic
("andarci" -> "andar" + "ci"), which is looked up as the full infinitive
("andare") and truncated again after mapping.
"""
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from .normalizer import normalize_key

DEFAULT_CLITICS = frozenset({
    "mi", "ti", "si", "ci", "vi", "ne",
    "lo", "la", "li", "le",
    "gli", "glie",
    "melo", "mela", "meli", "mele",
    "telo", "tela", "teli", "tele",
    "selo", "sela", "seli", "sele",
    "celo", "cela", "celi", "cele",
    "velo", "vela", "veli", "vele",
    "glielo", "gliela", "glieli", "gliele",
})

# Truncated infinitives short enough to need an explicit licence.
ALLOWED_TRUNCATED_INFINITIVES = frozenset({
    "far", "dar", "dir", "star", "andar", "esser",
    "aver", "venir", "tener", "poter", "voler", "saper",
})

_VOWEL_END = re.compile(r"[aeiouàèéìòóù]$", re.IGNORECASE)


@dataclass(frozen=True)
class CliticSplit:
    base: str
    clitic: Optional[str] = None


@dataclass(frozen=True)
class LemmaLookup:
    """A clitic base prepared for lexicon lookup."""

    original: str
    lookup: str
    truncated_infinitive: bool = False


def is_attachable_base(base: str) -> bool:
    """Whether a clitic could plausibly hang off this base."""
    if not base:
        return False
    if base.endswith("'"):
        return True
    if _VOWEL_END.search(base):
        return True
    if base.endswith("r"):
        return len(base) >= 4 or base in ALLOWED_TRUNCATED_INFINITIVES
    return False


class CliticSplitter:
    """Longest-match clitic splitter over a fixed clitic set."""

    def __init__(self, clitics: Optional[Iterable[str]] = None):
        normalized = {normalize_key(c) for c in (DEFAULT_CLITICS if clitics is None else clitics)}
        normalized.discard("")
        self.clitics: Tuple[str, ...] = tuple(sorted(normalized, key=lambda c: (-len(c), c)))

    def split(self, word: str) -> CliticSplit:
        """
        Split off the longest clitic that leaves an attachable base.

        Returns:
            CliticSplit with clitic None when nothing applies.
        """
        for clitic in self.clitics:
            if len(word) <= len(clitic) or not word.endswith(clitic):
                continue
            base = word[:-len(clitic)]
            if is_attachable_base(base):
                return CliticSplit(base=base, clitic=clitic)
        return CliticSplit(base=word)


def prepare_lemma(base: str, is_infinitive: Callable[[str], bool]) -> LemmaLookup:
    """Expand a truncated infinitive ("andar" -> "andare") when it is a known verb."""
    if base.endswith("r") and not base.endswith("re"):
        expanded = base + "e"
        if is_infinitive(expanded):
            return LemmaLookup(original=base, lookup=expanded, truncated_infinitive=True)
    return LemmaLookup(original=base, lookup=base)


def retruncate(lemma: str, is_infinitive: Callable[[str], bool]) -> str:
    """Drop the final "e" of an infinitive (andare -> andar); other words pass through."""
    if is_infinitive(lemma):
        return lemma[:-1]
    return lemma
