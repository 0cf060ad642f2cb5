#!/usr/bin/env python
"""Tests for the SpacySegmenter that creates token and sentence tiers."""
import unittest
from annoadapters.annotator import AnnoDoc
from annoadapters.spacy_annotator import SpacySegmenter


class SpacySegmenterTest(unittest.TestCase):

    def setUp(self):
        self.annotator = SpacySegmenter()

    def test_simple_sentence(self):

        self.doc = AnnoDoc("Hi Joe.")
        self.doc.add_tiers(self.annotator)

        self.assertEqual(len(self.doc.tiers['tokens'].spans), 3)

        self.assertEqual(self.doc.tiers['tokens'].spans[0].label, 'Hi')
        self.assertEqual(self.doc.tiers['tokens'].spans[0].start, 0)
        self.assertEqual(self.doc.tiers['tokens'].spans[0].end, 2)

        self.assertEqual(self.doc.tiers['tokens'].spans[1].label, 'Joe')
        self.assertEqual(self.doc.tiers['tokens'].spans[1].start, 3)
        self.assertEqual(self.doc.tiers['tokens'].spans[1].end, 6)

        self.assertEqual(self.doc.tiers['tokens'].spans[2].label, '.')
        self.assertEqual(self.doc.tiers['tokens'].spans[2].start, 6)
        self.assertEqual(self.doc.tiers['tokens'].spans[2].end, 7)

    def test_sentences(self):

        self.doc = AnnoDoc("Hi Joe. See you there.")
        self.doc.add_tiers(self.annotator)

        sentences = self.doc.tiers['sentences'].spans
        self.assertEqual(len(sentences), 2)
        self.assertEqual(sentences[0].text, "Hi Joe.")
        self.assertEqual(sentences[1].text, "See you there.")
        self.assertEqual(sentences[1].start, 8)

    def test_blank_document(self):

        self.doc = AnnoDoc("   ")
        self.doc.add_tiers(self.annotator)

        self.assertEqual(len(self.doc.tiers['tokens']), 0)
        self.assertEqual(len(self.doc.tiers['sentences']), 0)


if __name__ == '__main__':
    unittest.main()
