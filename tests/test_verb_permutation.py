"""
Tests for the deterministic infinitive permutation.
"""
import random
import unittest
from unittest.mock import MagicMock

from kiaro.conjugation import ConjugationClass, classify, suffix_class
from kiaro.direction import Direction
from kiaro.logging_config import DiagnosticLogger
from kiaro.morphology import MorphologyTables
from kiaro.verb_permutation import VerbPermutationIndex

ARE_VERBS = ["parlare", "amare", "lasciare", "cantare"]
ERE_VERBS = ["vedere", "credere"]
IRE_VERBS = ["dormire"]


class TestConjugation(unittest.TestCase):

    def test_suffix_class(self):
        self.assertIs(suffix_class("parlare"), ConjugationClass.ARE)
        self.assertIs(suffix_class("temere"), ConjugationClass.ERE)
        self.assertIs(suffix_class("finire"), ConjugationClass.IRE)
        self.assertIsNone(suffix_class("casa"))

    def test_irregular_wins_only_with_dictionary_coverage(self):
        self.assertIs(classify("andare", True), ConjugationClass.IRREGULAR)
        self.assertIsNone(classify("andare", False))
        self.assertIs(classify("parlare", False), ConjugationClass.ARE)


class TestVerbPermutationIndex(unittest.TestCase):

    def setUp(self):
        self.index = VerbPermutationIndex(
            ARE_VERBS + ERE_VERBS + IRE_VERBS + ["andare", "essere", "fare"],
            covered=["andare", "essere"],
        )

    def test_bins_are_sorted_and_disjoint(self):
        self.assertEqual(self.index.bins[ConjugationClass.ARE],
                         ("amare", "cantare", "lasciare", "parlare"))
        self.assertEqual(self.index.bins[ConjugationClass.ERE], ("credere", "vedere"))
        self.assertEqual(self.index.bins[ConjugationClass.IRE], ("dormire",))
        self.assertEqual(self.index.bins[ConjugationClass.IRREGULAR], ("andare", "essere"))

    def test_cyclic_successor(self):
        self.assertEqual(self.index.forward("amare"), "cantare")
        self.assertEqual(self.index.forward("parlare"), "amare")
        self.assertEqual(self.index.forward("credere"), "vedere")
        self.assertEqual(self.index.forward("andare"), "essere")

    def test_derangement_and_exact_inverse(self):
        for conj, members in self.index.bins.items():
            if len(members) < 2:
                continue
            for verb in members:
                mapped = self.index.forward(verb)
                self.assertNotEqual(mapped, verb)
                self.assertIn(mapped, members)
                self.assertEqual(self.index.inverse(mapped), verb)

    def test_singleton_bin_has_no_mapping(self):
        self.assertEqual(self.index.forward("dormire"), "dormire")
        self.assertEqual(self.index.inverse("dormire"), "dormire")

    def test_uncovered_irregular_is_known_but_not_permuted(self):
        self.assertTrue(self.index.is_infinitive("fare"))
        self.assertEqual(self.index.map("fare", Direction.ENCRYPT), "fare")

    def test_fixed_irregulars_are_always_infinitives(self):
        self.assertTrue(self.index.is_infinitive("dovere"))
        self.assertFalse(self.index.is_infinitive("temere"))
        self.assertFalse(self.index.is_infinitive("casa"))

    def test_map_by_direction(self):
        self.assertEqual(self.index.map("amare", Direction.ENCRYPT), "cantare")
        self.assertEqual(self.index.map("cantare", Direction.DECRYPT), "amare")
        self.assertIsNone(self.index.map("casa", Direction.ENCRYPT))

    def test_independent_of_input_order(self):
        shuffled = list(ARE_VERBS)
        random.Random(7).shuffle(shuffled)
        other = VerbPermutationIndex(shuffled)

        for verb in ARE_VERBS:
            self.assertEqual(other.forward(verb), self.index.forward(verb))

    def test_inverse_falls_back_to_forward_scan(self):
        self.index._inverse = {}

        self.assertEqual(self.index.inverse("cantare"), "amare")
        self.assertEqual(self.index.inverse("sconosciuto"), "sconosciuto")

    def test_group_sizes_reported(self):
        sink = MagicMock()
        VerbPermutationIndex(ARE_VERBS, diagnostics=DiagnosticLogger(sink=sink))

        messages = [call[0][1] for call in sink.call_args_list]
        self.assertTrue(any("are=4" in m for m in messages))

    def test_empty(self):
        index = VerbPermutationIndex([])

        self.assertEqual(len(index), 0)
        self.assertEqual(index.forward("amare"), "amare")


class TestFromMorphology(unittest.TestCase):

    def test_collects_from_analyses_and_lemma_keys(self):
        tables = MorphologyTables(
            {
                "parla": [{"lemma": "parlare", "tag": "VER:ind:pres:S3"}],
                "porta": [{"lemma": "porta", "tag": "NOUN-F:s"}],
                "va": [{"lemma": "andare", "tag": "VER:ind:pres:S3"}],
            },
            {
                "amare": {"VER:ind:pres:S3": "ama"},
                "essere": {"VER:ind:pres:S3": "è"},
                "casa": {"NOUN-F:s": "casa"},
            },
        )
        index = VerbPermutationIndex.from_morphology(tables)

        self.assertEqual(index.infinitives, frozenset({"parlare", "amare", "andare", "essere"}))
        self.assertEqual(index.bins[ConjugationClass.ARE], ("amare", "parlare"))
        # andare has no dictionary forms, so only essere is binned.
        self.assertEqual(index.bins[ConjugationClass.IRREGULAR], ("essere",))


if __name__ == "__main__":
    unittest.main()
