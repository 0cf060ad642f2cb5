#!/usr/bin/env python
"""Tests for reading brat standoff text annotations."""
import io
import os
import shutil
import tempfile
import unittest
from annoadapters.annodoc import AnnoDoc
from annoadapters.annospan import SpanGroup
from annoadapters.brat import BratReader, TextAnnotationParam
from annoadapters.errors import AlignmentError, FormatError

TEXT = u"Wolff played with Del Bosque in Real Madrid.\n"
ANN = (
    u"T1\tPER 0 5\tWolff\n"
    u"T2\tPER 18 28\tDel Bosque\n"
    u"T3\tORG:club 32 36;37 43\tReal Madrid\n"
    u"R1\tplays-for Arg1:T2 Arg2:T3\n"
    u"#1\tAnnotatorNotes T1\tcaptain\n"
)


class TextAnnotationParamTest(unittest.TestCase):

    def test_type_and_subcat(self):
        param = TextAnnotationParam.parse('Named_Entity:person2')
        self.assertEqual(param.type, 'Named_Entity')
        self.assertEqual(param.subcat, 'person2')

    def test_invalid(self):
        for value in ['1PER', 'P', 'PER:', 'PER:2x', 'PER OTHER']:
            self.assertRaises(ValueError, TextAnnotationParam.parse, value)


class BratReaderTest(unittest.TestCase):

    def setUp(self):
        self.directory = tempfile.mkdtemp()
        self.reader = BratReader(language='en')

    def tearDown(self):
        shutil.rmtree(self.directory)

    def write(self, name, text):
        path = os.path.join(self.directory, name)
        with io.open(path, 'w', encoding='utf8', newline='') as f:
            f.write(text)
        return path

    def test_load(self):
        txt = self.write('doc.txt', TEXT)
        self.write('doc.ann', ANN)
        doc = self.reader.load(txt)
        self.assertEqual(doc.text, TEXT)
        self.assertEqual(doc.language, 'en')
        entities = doc.tiers['nes'].spans
        self.assertEqual([(span.label, span.text) for span in entities],
                         [('PER', 'Wolff'), ('PER', 'Del Bosque'), ('ORG', 'Real Madrid')])
        self.assertEqual(entities[0].metadata, {'id': 'T1', 'subcat': None})
        self.assertIsInstance(entities[2], SpanGroup)
        self.assertEqual(entities[2].metadata['subcat'], 'club')
        self.assertEqual(entities[2].to_dict()['textOffsets'], [[32, 36], [37, 43]])

    def test_text_mismatch(self):
        doc = AnnoDoc(TEXT)
        with self.assertRaises(AlignmentError):
            self.reader.parse(doc, [u"T1\tPER 0 5\tWolf\n"])

    def test_malformed_lines(self):
        doc = AnnoDoc(TEXT)
        for line in [u"T1\tPER\tWolff", u"T1\tPER 0 x\tWolff",
                     u"T1\tPER 0 500\tWolff", u"T1\t1PER 0 5\tWolff", u"T1 PER 0 5 Wolff"]:
            self.assertRaises(FormatError, self.reader.parse, doc, [line])


if __name__ == '__main__':
    unittest.main()
