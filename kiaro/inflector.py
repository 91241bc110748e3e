"""
Rule-based conjugation of regular Italian verbs.

Used when the inflection dictionary has no form for a (lemma, tag) pair.
Only the regular -are/-ere/-ire paradigms are covered; irregular verbs are
left to the dictionary.
"""
from typing import Dict, Optional, Tuple

from .conjugation import ConjugationClass, is_known_irregular, suffix_class
from .morphology import VerbTag

ARE = ConjugationClass.ARE
ERE = ConjugationClass.ERE
IRE = ConjugationClass.IRE

Endings = Tuple[str, str, str, str, str, str]

# Endings attached to the plain stem (infinitive minus its 3-letter ending),
# indexed by (mood, tense) then conjugation class. Slots: S1 S2 S3 P1 P2 P3.
STEM_ENDINGS: Dict[Tuple[str, str], Dict[ConjugationClass, Endings]] = {
    ("ind", "pres"): {
        ARE: ("o", "i", "a", "iamo", "ate", "ano"),
        ERE: ("o", "i", "e", "iamo", "ete", "ono"),
        IRE: ("o", "i", "e", "iamo", "ite", "ono"),
    },
    ("ind", "impf"): {
        ARE: ("avo", "avi", "ava", "avamo", "avate", "avano"),
        ERE: ("evo", "evi", "eva", "evamo", "evate", "evano"),
        IRE: ("ivo", "ivi", "iva", "ivamo", "ivate", "ivano"),
    },
    ("sub", "pres"): {
        ARE: ("i", "i", "i", "iamo", "iate", "ino"),
        ERE: ("a", "a", "a", "iamo", "iate", "ano"),
        IRE: ("a", "a", "a", "iamo", "iate", "ano"),
    },
    ("sub", "impf"): {
        ARE: ("assi", "assi", "asse", "assimo", "aste", "assero"),
        ERE: ("essi", "essi", "esse", "essimo", "este", "essero"),
        IRE: ("issi", "issi", "isse", "issimo", "iste", "issero"),
    },
    # Only the second persons exist; an empty slot means no form.
    ("impr", "pres"): {
        ARE: ("", "a", "", "", "ate", ""),
        ERE: ("", "i", "", "", "ete", ""),
        IRE: ("", "i", "", "", "ite", ""),
    },
}

# Endings attached to the future/conditional stem, shared by all classes.
FUTURE_STEM_ENDINGS: Dict[Tuple[str, str], Endings] = {
    ("ind", "fut"): ("ò", "ai", "à", "emo", "ete", "anno"),
    ("cond", "pres"): ("ei", "esti", "ebbe", "emmo", "este", "ebbero"),
}


def future_stem(infinitive: str, conj: ConjugationClass) -> str:
    """parlare -> parler, temere -> temer, finire -> finir."""
    if conj is ConjugationClass.ARE:
        return infinitive[:-3] + "er"
    return infinitive[:-1]


def inflect_regular(infinitive: str, tag: str) -> Optional[str]:
    """
    Conjugate a regular infinitive for a verb tag.

    Args:
        infinitive: Normalized infinitive, e.g. "parlare".
        tag: Verb tag, e.g. "VER:ind:pres:S3".

    Returns:
        The conjugated form ("parla"), or None for irregular verbs, malformed
        tags, unsupported mood/tense pairs and empty imperative slots.
    """
    if is_known_irregular(infinitive):
        return None
    conj = suffix_class(infinitive)
    if conj is None:
        return None

    verb_tag = VerbTag.parse(tag)
    if verb_tag is None:
        return None
    slot = verb_tag.slot
    if slot is None:
        return None

    key = (verb_tag.mood, verb_tag.tense)
    if key in FUTURE_STEM_ENDINGS:
        return future_stem(infinitive, conj) + FUTURE_STEM_ENDINGS[key][slot]

    table = STEM_ENDINGS.get(key)
    if table is None:
        return None
    ending = table[conj][slot]
    if not ending:
        return None
    return infinitive[:-3] + ending
