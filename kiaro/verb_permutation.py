"""
Deterministic infinitive -> infinitive permutation.

Every known infinitive is put in one of four bins (are, ere, ire,
irregular). Each bin is sorted and rotated by one position, so the mapping
is reproducible whatever order the tables were supplied in, never maps a
verb to itself inside a bin of two or more, and has an exact inverse.
"""
import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .conjugation import ConjugationClass, classify, is_known_irregular, suffix_class
from .direction import Direction
from .logging_config import DiagnosticLogger
from .morphology import MorphologyTables

logger = logging.getLogger(__name__)


class VerbPermutationIndex:
    """
    Forward (plain -> cipher) and inverse (cipher -> plain) infinitive maps.

    Args:
        infinitives: Every infinitive the morphology knows about.
        covered: Infinitives listed as lemmas in the inflection dictionary;
                 decides whether a known irregular gets a bin.
        diagnostics: Sink for collision warnings.
    """

    def __init__(
        self,
        infinitives: Iterable[str],
        covered: Iterable[str] = (),
        diagnostics: Optional[DiagnosticLogger] = None,
    ):
        self.diagnostics = diagnostics or DiagnosticLogger()
        self.infinitives: FrozenSet[str] = frozenset(infinitives)
        covered = frozenset(covered)

        bins: Dict[ConjugationClass, List[str]] = {conj: [] for conj in ConjugationClass}
        for inf in self.infinitives:
            conj = classify(inf, inf in covered)
            if conj is not None:
                bins[conj].append(inf)

        self.bins: Mapping[ConjugationClass, Tuple[str, ...]] = MappingProxyType(
            {conj: tuple(sorted(members)) for conj, members in bins.items()}
        )

        forward: Dict[str, str] = {}
        inverse: Dict[str, str] = {}
        for members in self.bins.values():
            self._fill_rotation(members, forward, inverse)
        self._forward = MappingProxyType(forward)
        self._inverse = MappingProxyType(inverse)

        self.diagnostics.emit(
            "build_permutation",
            "Verb groups: " + ", ".join(
                f"{conj.value}={len(members)}" for conj, members in self.bins.items()
            ),
        )

    @classmethod
    def from_morphology(
        cls,
        tables: MorphologyTables,
        diagnostics: Optional[DiagnosticLogger] = None,
    ) -> "VerbPermutationIndex":
        """Collect infinitives from verb analyses and dictionary lemma keys."""
        candidates = list(tables.verb_lemmas()) + list(tables.lemmas())
        infinitives = {
            word for word in candidates
            if suffix_class(word) is not None or is_known_irregular(word)
        }
        covered = {lemma for lemma in tables.lemmas() if lemma in infinitives}
        return cls(infinitives, covered=covered, diagnostics=diagnostics)

    def _fill_rotation(self, group: Tuple[str, ...], forward: Dict[str, str], inverse: Dict[str, str]):
        if len(group) < 2:
            return
        for i, plain in enumerate(group):
            cipher = group[(i + 1) % len(group)]

            old_forward = forward.get(plain)
            if old_forward is not None and old_forward != cipher:
                self.diagnostics.emit(
                    "fill_rotation",
                    f'WARNING: forward verb collision "{plain}": "{old_forward}" vs "{cipher}"',
                )
            forward[plain] = cipher

            old_inverse = inverse.get(cipher)
            if old_inverse is not None and old_inverse != plain:
                self.diagnostics.emit(
                    "fill_rotation",
                    f'WARNING: inverse verb collision "{cipher}": "{old_inverse}" vs "{plain}"',
                )
            inverse[cipher] = plain

    def is_infinitive(self, word: str) -> bool:
        """A suffix-classified word that is a fixed irregular or a collected infinitive."""
        if suffix_class(word) is None:
            return False
        return is_known_irregular(word) or word in self.infinitives

    def forward(self, infinitive: str) -> str:
        return self._forward.get(infinitive, infinitive)

    def inverse(self, infinitive: str) -> str:
        back = self._inverse.get(infinitive)
        if back is not None:
            return back

        # The inverse is built alongside the forward map, so this scan only
        # matters if the two ever disagree.
        for plain, cipher in self._forward.items():
            if cipher == infinitive:
                logger.warning(f'Inverse verb map missing "{infinitive}", recovered "{plain}"')
                return plain
        return infinitive

    def map(self, infinitive: str, direction: Direction) -> Optional[str]:
        """Permute an infinitive; None when the word is not an infinitive."""
        if not self.is_infinitive(infinitive):
            return None
        if direction.is_encrypt:
            return self.forward(infinitive)
        return self.inverse(infinitive)

    def __len__(self):
        return len(self._forward)
