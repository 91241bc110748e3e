"""
Tests for rule-based conjugation of regular verbs.
"""
import unittest

from kiaro.conjugation import ConjugationClass
from kiaro.inflector import future_stem, inflect_regular
from kiaro.morphology import VerbTag


class TestPersonSlot(unittest.TestCase):

    def test_slots(self):
        tags = ["VER:ind:pres:" + pn for pn in ("S1", "S2", "S3", "P1", "P2", "P3")]
        self.assertEqual([VerbTag.parse(t).slot for t in tags], [0, 1, 2, 3, 4, 5])

    def test_unknown(self):
        for pn in ("S0", "P4", "X1", "S12"):
            self.assertIsNone(VerbTag.parse("VER:ind:pres:" + pn).slot)


class TestFutureStem(unittest.TestCase):

    def test_future_stems(self):
        self.assertEqual(future_stem("parlare", ConjugationClass.ARE), "parler")
        self.assertEqual(future_stem("temere", ConjugationClass.ERE), "temer")
        self.assertEqual(future_stem("finire", ConjugationClass.IRE), "finir")


class TestInflectRegular(unittest.TestCase):

    def test_indicative_present(self):
        self.assertEqual(inflect_regular("parlare", "VER:ind:pres:S1"), "parlo")
        self.assertEqual(inflect_regular("temere", "VER:ind:pres:S3"), "teme")
        self.assertEqual(inflect_regular("dormire", "VER:ind:pres:P2"), "dormite")
        self.assertEqual(inflect_regular("parlare", "VER:ind:pres:P3"), "parlano")

    def test_imperfect(self):
        self.assertEqual(inflect_regular("parlare", "VER:ind:impf:S3"), "parlava")
        self.assertEqual(inflect_regular("temere", "VER:ind:impf:P1"), "temevamo")
        self.assertEqual(inflect_regular("dormire", "VER:ind:impf:P3"), "dormivano")

    def test_future(self):
        self.assertEqual(inflect_regular("parlare", "VER:ind:fut:S1"), "parlerò")
        self.assertEqual(inflect_regular("temere", "VER:ind:fut:S3"), "temerà")
        self.assertEqual(inflect_regular("dormire", "VER:ind:fut:P3"), "dormiranno")

    def test_conditional(self):
        self.assertEqual(inflect_regular("parlare", "VER:cond:pres:S1"), "parlerei")
        self.assertEqual(inflect_regular("dormire", "VER:cond:pres:P3"), "dormirebbero")

    def test_subjunctive(self):
        self.assertEqual(inflect_regular("parlare", "VER:sub:pres:S3"), "parli")
        self.assertEqual(inflect_regular("temere", "VER:sub:pres:P3"), "temano")
        self.assertEqual(inflect_regular("parlare", "VER:sub:impf:P1"), "parlassimo")
        self.assertEqual(inflect_regular("dormire", "VER:sub:impf:S3"), "dormisse")

    def test_imperative_second_persons_only(self):
        self.assertEqual(inflect_regular("parlare", "VER:impr:pres:S2"), "parla")
        self.assertEqual(inflect_regular("temere", "VER:impr:pres:S2"), "temi")
        self.assertEqual(inflect_regular("dormire", "VER:impr:pres:P2"), "dormite")
        for pn in ("S1", "S3", "P1", "P3"):
            self.assertIsNone(inflect_regular("parlare", f"VER:impr:pres:{pn}"))

    def test_irregular_verbs_are_not_inflected(self):
        self.assertIsNone(inflect_regular("andare", "VER:ind:pres:S3"))
        self.assertIsNone(inflect_regular("essere", "VER:ind:impf:S1"))

    def test_unsupported_or_malformed(self):
        self.assertIsNone(inflect_regular("parlare", "VER:ind:past:S1"))
        self.assertIsNone(inflect_regular("parlare", "VER:infi"))
        self.assertIsNone(inflect_regular("parlare", "VER:ind:pres:S7"))
        self.assertIsNone(inflect_regular("parlare", "NOUN:ind:pres:S1"))
        self.assertIsNone(inflect_regular("casa", "VER:ind:pres:S1"))


if __name__ == "__main__":
    unittest.main()
