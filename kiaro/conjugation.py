"""
Italian conjugation classes.

Regular infinitives are classified by their ending (-are, -ere, -ire). A
fixed set of common irregular verbs is kept apart: they are only ever
conjugated through the inflection dictionary, never by rule.
"""
from enum import Enum
from typing import Optional


class ConjugationClass(Enum):
    ARE = "are"
    ERE = "ere"
    IRE = "ire"
    IRREGULAR = "irregular"


KNOWN_IRREGULAR_INFINITIVES = frozenset({
    "essere",
    "avere",
    "fare",
    "dare",
    "dire",
    "stare",
    "andare",
    "venire",
    "tenere",
    "potere",
    "volere",
    "sapere",
    "dovere",
})

_SUFFIX_CLASSES = (
    ("are", ConjugationClass.ARE),
    ("ere", ConjugationClass.ERE),
    ("ire", ConjugationClass.IRE),
)


def suffix_class(word: str) -> Optional[ConjugationClass]:
    """Conjugation class implied by the ending alone, or None."""
    for ending, conj in _SUFFIX_CLASSES:
        if word.endswith(ending):
            return conj
    return None


def is_known_irregular(word: str) -> bool:
    return word in KNOWN_IRREGULAR_INFINITIVES


def classify(infinitive: str, has_dictionary_forms: bool) -> Optional[ConjugationClass]:
    """
    Bin an infinitive for the verb permutation.

    Irregular status wins over the suffix, but only when the inflection
    dictionary covers the verb; an uncovered irregular gets no bin at all.

    Args:
        infinitive: Normalized infinitive.
        has_dictionary_forms: Whether the inflection dictionary lists it.

    Returns:
        The bin, or None when the word belongs to no bin.
    """
    conj = suffix_class(infinitive)
    if conj is None:
        return None
    if is_known_irregular(infinitive):
        return ConjugationClass.IRREGULAR if has_dictionary_forms else None
    return conj
