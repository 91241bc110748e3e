"""
Tests for the morphology tables and verb tag parsing.
"""
import unittest

from kiaro.morphology import MorphAnalysis, MorphologyTables, VerbTag


class TestMorphAnalysis(unittest.TestCase):

    def test_from_dict_normalizes_lemma_and_trims_tag(self):
        analysis = MorphAnalysis.from_raw({"lemma": " Parlare", "tag": " VER:ind:pres:S3 "})

        self.assertEqual(analysis, MorphAnalysis("parlare", "VER:ind:pres:S3"))
        self.assertTrue(analysis.is_verb)

    def test_tags_alias(self):
        analysis = MorphAnalysis.from_raw({"lemma": "casa", "tags": "NOUN-F:s"})

        self.assertEqual(analysis.tag, "NOUN-F:s")
        self.assertFalse(analysis.is_verb)

    def test_incomplete_entries_are_dropped(self):
        self.assertIsNone(MorphAnalysis.from_raw({"tag": "NOUN-F:s"}))
        self.assertIsNone(MorphAnalysis.from_raw({"lemma": "casa"}))
        self.assertIsNone(MorphAnalysis.from_raw({"lemma": "casa", "tag": "  "}))


class TestVerbTag(unittest.TestCase):

    def test_parse(self):
        tag = VerbTag.parse("VER:sub:impf:P3")

        self.assertEqual((tag.mood, tag.tense, tag.person_number), ("sub", "impf", "P3"))
        self.assertEqual(tag.slot, 5)

    def test_malformed(self):
        self.assertIsNone(VerbTag.parse("VER:infi"))
        self.assertIsNone(VerbTag.parse("NOUN:a:b:c"))
        self.assertIsNone(VerbTag.parse("VER:ind:pres:S3:x"))

    def test_unknown_person(self):
        self.assertIsNone(VerbTag.parse("VER:ind:pres:S4").slot)


class TestMorphologyTables(unittest.TestCase):

    def setUp(self):
        self.tables = MorphologyTables(
            {
                "Porta": [
                    {"lemma": "portare", "tag": "VER:ind:pres:S3"},
                    {"lemma": "porta", "tag": "NOUN-F:s"},
                    {"tag": "broken"},
                ],
            },
            {
                "Porta": {" NOUN-F:p ": "PORTE", "NOUN-F:s": ""},
            },
        )

    def test_analyses_keep_order_and_drop_broken(self):
        analyses = self.tables.analyses("porta")

        self.assertEqual([a.lemma for a in analyses], ["portare", "porta"])

    def test_unknown_form(self):
        self.assertEqual(self.tables.analyses("nulla"), ())

    def test_form_for(self):
        self.assertEqual(self.tables.form_for("porta", "NOUN-F:p"), "porte")
        self.assertIsNone(self.tables.form_for("porta", "NOUN-F:s"))
        self.assertIsNone(self.tables.form_for("uscio", "NOUN-M:s"))

    def test_verb_lemmas_and_lemmas(self):
        self.assertEqual(self.tables.verb_lemmas(), ["portare"])
        self.assertEqual(list(self.tables.lemmas()), ["porta"])
        self.assertTrue(self.tables.has_lemma("porta"))

    def test_empty_tables(self):
        tables = MorphologyTables()

        self.assertEqual(list(tables.iter_analyses()), [])
        self.assertIsNone(tables.form_for("a", "b"))


if __name__ == "__main__":
    unittest.main()
