"""
Morphology tables: surface form -> analyses, and lemma + tag -> surface form.

Analyses keep their input order. Resolution always commits to the first
viable analysis, so the order supplied by the lexicon provider matters.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .normalizer import normalize_key

VERB_TAG_PREFIX = "VER:"

PERSON_NUMBERS = ("S1", "S2", "S3", "P1", "P2", "P3")

RawAnalysis = Union["MorphAnalysis", Mapping[str, str]]


@dataclass(frozen=True)
class MorphAnalysis:
    """One reading of a surface form."""

    lemma: str
    tag: str

    @property
    def is_verb(self) -> bool:
        return self.tag.startswith(VERB_TAG_PREFIX)

    @classmethod
    def from_raw(cls, raw: RawAnalysis) -> Optional["MorphAnalysis"]:
        """
        Build a normalized analysis from provider input.

        Dict input carries 'lemma' and 'tag' (or the alias 'tags'). Entries
        without a lemma or with a blank tag yield None.
        """
        if isinstance(raw, MorphAnalysis):
            lemma, tag = raw.lemma, raw.tag
        else:
            lemma = raw.get("lemma")
            tag = raw.get("tag")
            if tag is None:
                tag = raw.get("tags")
        if lemma is None or tag is None:
            return None
        tag = str(tag).strip()
        if not tag:
            return None
        return cls(lemma=normalize_key(str(lemma)), tag=tag)


@dataclass(frozen=True)
class VerbTag:
    """Parsed `VER:<mood>:<tense>:<personNumber>` tag."""

    mood: str
    tense: str
    person_number: str

    @property
    def slot(self) -> Optional[int]:
        """Index 0-5 for S1..S3, P1..P3; None when the person is unknown."""
        try:
            return PERSON_NUMBERS.index(self.person_number)
        except ValueError:
            return None

    @classmethod
    def parse(cls, tag: str) -> Optional["VerbTag"]:
        parts = tag.split(":")
        if len(parts) != 4 or parts[0] != "VER":
            return None
        return cls(mood=parts[1], tense=parts[2], person_number=parts[3])


class MorphologyTables:
    """
    Read-only morphology dictionary.

    Args:
        form_to_lemma_tags: surface form -> ordered analyses.
        lemma_tag_to_form: lemma -> {tag -> surface form}.
    """

    def __init__(
        self,
        form_to_lemma_tags: Optional[Mapping[str, Iterable[RawAnalysis]]] = None,
        lemma_tag_to_form: Optional[Mapping[str, Mapping[str, str]]] = None,
    ):
        analyses: Dict[str, Tuple[MorphAnalysis, ...]] = {}
        for form, raw_list in (form_to_lemma_tags or {}).items():
            parsed = [MorphAnalysis.from_raw(raw) for raw in raw_list]
            analyses[normalize_key(form)] = tuple(a for a in parsed if a is not None)

        forms: Dict[str, Mapping[str, str]] = {}
        for lemma, tag_map in (lemma_tag_to_form or {}).items():
            inner = {str(tag).strip(): normalize_key(str(form)) for tag, form in tag_map.items()}
            forms[normalize_key(lemma)] = MappingProxyType(inner)

        self._analyses = MappingProxyType(analyses)
        self._forms = MappingProxyType(forms)

    def analyses(self, form: str) -> Tuple[MorphAnalysis, ...]:
        return self._analyses.get(form, ())

    def form_for(self, lemma: str, tag: str) -> Optional[str]:
        """Dictionary surface form for lemma + tag; None on miss or empty entry."""
        tag_map = self._forms.get(lemma)
        if tag_map is None:
            return None
        return tag_map.get(tag) or None

    def has_lemma(self, lemma: str) -> bool:
        return lemma in self._forms

    def lemmas(self) -> Iterator[str]:
        return iter(self._forms)

    def iter_analyses(self) -> Iterator[MorphAnalysis]:
        for analysis_list in self._analyses.values():
            yield from analysis_list

    def verb_lemmas(self) -> List[str]:
        """Lemmas of every verb analysis, in table order (with repeats)."""
        return [a.lemma for a in self.iter_analyses() if a.is_verb]
