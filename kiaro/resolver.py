"""
Per-word decision: which strategy transforms this word, and into what.

Strategies run in a fixed order and the first one that changes the word
wins:

1. verb-preferring morphology (conjugated verb forms)
2. infinitive permutation (the word is itself an infinitive)
3. whole-word lexicon
4. generic morphology (non-verb lemmas)
5. clitic split, resolving the base with steps 2-4
6. the word unchanged
"""
from typing import Optional

from .case_adjuster import adjust_case_like
from .clitics import CliticSplitter, prepare_lemma, retruncate
from .direction import Direction
from .lemma_mapper import LemmaMapper
from .lexicon import WholeWordLexicon
from .logging_config import DiagnosticLogger
from .normalizer import normalize_key
from .verb_permutation import VerbPermutationIndex


class WordResolver:
    """Resolves single words in either direction over shared, read-only tables."""

    def __init__(
        self,
        lexicon: WholeWordLexicon,
        permutation: VerbPermutationIndex,
        mapper: LemmaMapper,
        splitter: CliticSplitter,
        diagnostics: Optional[DiagnosticLogger] = None,
    ):
        self.lexicon = lexicon
        self.permutation = permutation
        self.mapper = mapper
        self.splitter = splitter
        self.diagnostics = diagnostics or DiagnosticLogger()

    def resolve(self, word: str, direction: Direction) -> str:
        """
        Transform one word, keeping its casing.

        Args:
            word: A letters-only surface token.
            direction: Direction.ENCRYPT or Direction.DECRYPT.

        Returns:
            The transformed word, or `word` itself when nothing applies.
        """
        if not word:
            return word

        key = normalize_key(word)
        where = f"{direction.value}_word"

        verb_form = self.mapper.map_prefer_verbs(key, direction)
        if verb_form is not None and verb_form != key:
            return adjust_case_like(word, verb_form)

        # Infinitives only ever map to infinitives, never through the lexicon.
        if self.permutation.is_infinitive(key):
            mapped = self.mapper.map_verb_lemma(key, direction) or key
            if mapped != key:
                self.diagnostics.emit(where, f'Verb INFI forced "{key}" -> "{mapped}"')
            return adjust_case_like(word, mapped)

        whole = self.lexicon.resolve(key, direction)
        if whole is not None and whole != key:
            self.diagnostics.emit(where, f'Direct WHOLE map "{key}" -> "{whole}"')
            return adjust_case_like(word, whole)

        morph = self.mapper.map_generic(key, direction)
        if morph is not None and morph != key:
            self.diagnostics.emit(where, f'Morph-based map "{key}" -> "{morph}"')
            return adjust_case_like(word, morph)

        split = self.splitter.split(key)
        if split.clitic is None:
            return word

        base_out = self._resolve_clitic_base(split.base, direction)
        return adjust_case_like(word, base_out + split.clitic)

    def _resolve_clitic_base(self, base: str, direction: Direction) -> str:
        prep = prepare_lemma(base, self.permutation.is_infinitive)
        lookup = prep.lookup

        mapped_lemma = lookup
        if self.permutation.is_infinitive(lookup):
            mapped_lemma = self.mapper.map_verb_lemma(lookup, direction) or lookup
        else:
            whole = self.lexicon.resolve(lookup, direction)
            if whole is not None and whole != lookup:
                mapped_lemma = whole
            else:
                morph = self.mapper.map_generic(lookup, direction)
                if morph is not None and morph != lookup:
                    mapped_lemma = morph

        if not prep.truncated_infinitive:
            return mapped_lemma
        if mapped_lemma == lookup:
            return prep.original
        return retruncate(mapped_lemma, self.permutation.is_infinitive)
