"""
Morphological resolution: form -> (lemma, tag) -> mapped lemma -> form.

Two modes:
- verb-preferring: only verb analyses count; the lemma goes through the
  verb permutation and the result is re-inflected for the same tag.
- generic: verb analyses are skipped; the lemma goes through the
  whole-word lexicon.
"""
from typing import Optional

from .conjugation import suffix_class
from .direction import Direction
from .inflector import inflect_regular
from .lexicon import WholeWordLexicon
from .logging_config import DiagnosticLogger
from .morphology import MorphologyTables
from .normalizer import normalize_key
from .verb_permutation import VerbPermutationIndex


class LemmaMapper:
    """Maps words through their lemmas, using the shared cipher tables."""

    def __init__(
        self,
        lexicon: WholeWordLexicon,
        morphology: MorphologyTables,
        permutation: VerbPermutationIndex,
        diagnostics: Optional[DiagnosticLogger] = None,
    ):
        self.lexicon = lexicon
        self.morphology = morphology
        self.permutation = permutation
        self.diagnostics = diagnostics or DiagnosticLogger()

    def map_verb_lemma(self, infinitive: str, direction: Direction) -> Optional[str]:
        """
        Map an infinitive to an infinitive.

        A direct lexicon entry wins when it points at an infinitive of the
        same conjugation; otherwise the permutation decides.

        Returns:
            The mapped infinitive, or None when `infinitive` is not a verb.
        """
        if not self.permutation.is_infinitive(infinitive):
            return None

        direct = self.lexicon.direct(infinitive, direction)
        if direct is not None:
            direct = normalize_key(direct)
            if (self.permutation.is_infinitive(direct)
                    and suffix_class(direct) == suffix_class(infinitive)):
                return direct

        return self.permutation.map(infinitive, direction)

    def map_prefer_verbs(self, key: str, direction: Direction) -> Optional[str]:
        """
        Resolve a form through its first verb analysis.

        The first analysis whose lemma is a known infinitive is committed to:
        dictionary form, then rule-based inflection, then the bare mapped
        lemma. Later analyses are not tried.

        Returns:
            The mapped form, or None when no verb analysis qualifies.
        """
        for analysis in self.morphology.analyses(key):
            if not analysis.is_verb:
                continue
            lemma = analysis.lemma
            if not self.permutation.is_infinitive(lemma):
                continue

            mapped_lemma = self.map_verb_lemma(lemma, direction) or lemma

            form = self.morphology.form_for(mapped_lemma, analysis.tag)
            if form:
                self.diagnostics.emit(
                    "map_prefer_verbs",
                    f'VER "{key}" ({lemma},{analysis.tag}) -> "{form}" via dict (mappedLemma="{mapped_lemma}")',
                )
                return form

            form = inflect_regular(mapped_lemma, analysis.tag)
            if form:
                self.diagnostics.emit(
                    "map_prefer_verbs",
                    f'VER "{key}" ({lemma},{analysis.tag}) -> "{form}" via rules (mappedLemma="{mapped_lemma}")',
                )
                return form

            self.diagnostics.emit(
                "map_prefer_verbs",
                f'VER "{key}" ({lemma},{analysis.tag}) fallback -> "{mapped_lemma}"',
            )
            return mapped_lemma

        return None

    def map_generic(self, key: str, direction: Direction) -> Optional[str]:
        """Resolve a form through its non-verb analyses; None on miss."""
        for analysis in self.morphology.analyses(key):
            if analysis.is_verb:
                continue

            mapped_lemma = analysis.lemma
            direct = self.lexicon.resolve(analysis.lemma, direction)
            if direct:
                mapped_lemma = normalize_key(direct)

            form = self.morphology.form_for(mapped_lemma, analysis.tag)
            if form:
                return form

        return None
