"""
The text pipeline: tokenize raw text and transform it word by word.

Everything that is not a letter (punctuation, digits, whitespace) is copied
verbatim, fixed elisions are copied verbatim, and every letters run goes
through the WordResolver.
"""
from typing import Iterable, List, Mapping, Optional

from .clitics import CliticSplitter
from .config import CipherConfig
from .direction import Direction
from .elision import is_letter, read_elision_prefix, read_letters, starts_with_vowel_or_h
from .lemma_mapper import LemmaMapper
from .lexicon import WholeWordLexicon
from .logging_config import DiagnosticLogger, DiagnosticSink, log_with_context
from .morphology import MorphologyTables, RawAnalysis
from .normalizer import strip_invisibles, unify_apostrophes
from .resolver import WordResolver
from .verb_permutation import VerbPermutationIndex


class KiaroCipher:
    """
    Reversible, morphology-aware word substitution for Italian text.

    Usage:
        cipher = KiaroCipher(encrypt_map, decrypt_map,
                             form_to_lemma_tags=forms, lemma_tag_to_form=lemmas)
        secret = cipher.encrypt("Lasciatemi andare.")
        cipher.decrypt(secret)   # -> "Lasciatemi andare."
    """

    def __init__(
        self,
        encrypt_map: Mapping[str, str],
        decrypt_map: Mapping[str, str],
        clitics: Optional[Iterable[str]] = None,
        form_to_lemma_tags: Optional[Mapping[str, Iterable[RawAnalysis]]] = None,
        lemma_tag_to_form: Optional[Mapping[str, Mapping[str, str]]] = None,
        debug_truncate: Optional[int] = None,
        config: Optional[CipherConfig] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        """
        Build every lookup table once; the instance never mutates them.

        Args:
            encrypt_map: plain word -> cipher word.
            decrypt_map: cipher word -> plain word.
            clitics: Clitic suffixes (default: the Italian pronoun set).
            form_to_lemma_tags: surface form -> ordered [{lemma, tag}].
            lemma_tag_to_form: lemma -> {tag -> surface form}.
            debug_truncate: Maximum diagnostic message length (default 120).
            config: Base options; explicit arguments above override it.
            sink: Diagnostic sink receiving (where, message). Defaults to
                  DEBUG records on the 'kiaro' logger.
        """
        base_config = config or CipherConfig()
        self.config = base_config.with_overrides(
            clitics=frozenset(clitics) if clitics is not None else None,
            debug_truncate=debug_truncate,
        )
        self.diagnostics = DiagnosticLogger(self.config.debug_truncate, sink)

        self.lexicon = WholeWordLexicon(encrypt_map, decrypt_map, self.diagnostics)
        self.morphology = MorphologyTables(form_to_lemma_tags, lemma_tag_to_form)
        self.permutation = VerbPermutationIndex.from_morphology(self.morphology, self.diagnostics)
        self.splitter = CliticSplitter(self.config.clitics)
        self.mapper = LemmaMapper(self.lexicon, self.morphology, self.permutation, self.diagnostics)
        self.resolver = WordResolver(
            self.lexicon, self.permutation, self.mapper, self.splitter, self.diagnostics
        )

        log_with_context("KiaroCipher ready", {
            "lexicon entries": len(self.lexicon),
            "infinitives": len(self.permutation.infinitives),
            "clitics": len(self.splitter.clitics),
            "strict elision": self.config.strict_elision,
        })

    # --- Public API ---

    def encrypt(self, text: str) -> str:
        return self.transform(text, Direction.ENCRYPT)

    def decrypt(self, text: str) -> str:
        return self.transform(text, Direction.DECRYPT)

    def encrypt_times(self, text: str, times: int = 1) -> str:
        """Apply `encrypt` `times` times in sequence (values below 1 count as 1)."""
        return self._repeat(text, times, Direction.ENCRYPT)

    def decrypt_times(self, text: str, times: int = 1) -> str:
        """Apply `decrypt` `times` times in sequence (values below 1 count as 1)."""
        return self._repeat(text, times, Direction.DECRYPT)

    def resolve_word(self, word: str, direction: Direction) -> str:
        """Transform a single word without tokenizing."""
        return self.resolver.resolve(strip_invisibles(unify_apostrophes(word)), direction)

    # --- Scanner ---

    def _repeat(self, text: str, times: int, direction: Direction) -> str:
        out = text
        for _ in range(max(1, times)):
            out = self.transform(out, direction)
        return out

    def transform(self, text: str, direction: Direction) -> str:
        """
        Transform a whole text in one left-to-right pass.

        Raises:
            TypeError: If `text` is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"Input must be a string, got {type(text).__name__}.")
        if not text:
            return text

        text = strip_invisibles(unify_apostrophes(text), keep_layout=True)
        out: List[str] = []
        i = 0

        while i < len(text):
            prefix = read_elision_prefix(text, i)
            if prefix is not None:
                out.append(prefix)
                i += len(prefix)
                end = read_letters(text, i)
                if end > i:
                    out.append(self._after_elision(text[i:end], direction))
                    i = end
                continue

            if is_letter(text[i]):
                end = read_letters(text, i)
                out.append(self.resolver.resolve(text[i:end], direction))
                i = end
                continue

            out.append(text[i])
            i += 1

        return "".join(out)

    def _after_elision(self, word: str, direction: Direction) -> str:
        mapped = self.resolver.resolve(word, direction)
        if (self.config.strict_elision and direction.is_encrypt
                and not starts_with_vowel_or_h(mapped.lower())):
            self.diagnostics.emit(direction.value, f'Elision check failed for "{word}" -> "{mapped}"')
            return word
        return mapped


if __name__ == '__main__':
    from kiaro.logging_config import setup_logging
    from kiaro.sample_lexicon import build_sample_cipher

    setup_logging(debug=True)
    cipher = build_sample_cipher()

    sentence = "Lasciatemi andare: l'amico parla con la CASA, 3 volte!"
    secret = cipher.encrypt(sentence)
    print(f"Original:  {sentence}")
    print(f"Encrypted: {secret}")
    print(f"Decrypted: {cipher.decrypt(secret)}")
