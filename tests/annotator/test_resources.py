#!/usr/bin/env python
"""Tests for model resolution, model metadata and the model cache."""
import io
import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock
from annoadapters.errors import ResourceError
from annoadapters.pos_mapping import PosMapping
from annoadapters.resources import (ModelConfig, ModelCache, resolve_model,
                                    load_default_variants, read_model_metadata,
                                    find_executable)

TEMPLATE = '${model_path}/tagger-${language}-${variant}.model'


class ResolveModelTest(unittest.TestCase):

    def test_document_language(self):
        resolved = resolve_model(ModelConfig(TEMPLATE), 'en', model_path='/models')
        self.assertEqual(resolved.location, '/models/tagger-en-default.model')
        self.assertEqual(resolved.language, 'en')
        self.assertEqual(resolved.variant, 'default')

    def test_overrides(self):
        config = ModelConfig(TEMPLATE, language='de', variant='tiger',
                             default_variants={'de': 'stts'})
        resolved = resolve_model(config, 'en', model_path='/models')
        self.assertEqual(resolved.location, '/models/tagger-de-tiger.model')

    def test_location_override(self):
        config = ModelConfig(TEMPLATE, location='/opt/my-model.bin')
        self.assertEqual(resolve_model(config, 'en').location, '/opt/my-model.bin')

    def test_environment_model_path(self):
        with mock.patch('annoadapters.resources.MODEL_PATH', '/srv/models'):
            self.assertEqual(resolve_model(ModelConfig(TEMPLATE), 'en').location,
                             '/srv/models/tagger-en-default.model')

    def test_no_language(self):
        self.assertRaises(ResourceError, resolve_model, ModelConfig(TEMPLATE), None)

    def test_bad_template(self):
        self.assertRaises(ResourceError, resolve_model,
                          ModelConfig('${model_path}/${tagset}.model'), 'en')

    def test_config_is_immutable(self):
        config = ModelConfig(TEMPLATE)
        with self.assertRaises(AttributeError):
            config.language = 'en'
        self.assertEqual(config._replace(language='en').language, 'en')
        self.assertIsNone(config.language)

    def test_default_variants_not_shared(self):
        config = ModelConfig(TEMPLATE)
        self.assertIsNone(config.default_variants)
        self.assertIsNone(ModelConfig(TEMPLATE).default_variants)
        self.assertEqual(resolve_model(config, 'de', model_path='/models').variant, 'default')


class ModelFilesTest(unittest.TestCase):

    def setUp(self):
        self.directory = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.directory)

    def write(self, name, text):
        path = os.path.join(self.directory, name)
        with io.open(path, 'w', encoding='utf8') as f:
            f.write(text)
        return path

    def test_default_variants(self):
        path = self.write('tagger-default-variants.map', u'# variants\nde=stts\n\nen = ptb\n')
        self.assertEqual(load_default_variants(path), {'de': 'stts', 'en': 'ptb'})

    def test_malformed_properties(self):
        path = self.write('broken.map', u'de stts\n')
        self.assertRaises(ResourceError, load_default_variants, path)

    def test_model_metadata(self):
        model = self.write('tagger.model', u'')
        self.assertEqual(read_model_metadata(model), {})
        self.write('tagger.model.properties', u'model.encoding=ISO-8859-1\n')
        self.assertEqual(read_model_metadata(model)['model.encoding'], 'ISO-8859-1')

    def test_pos_mapping_file(self):
        path = self.write('pos.map', u'NN=NOUN\nVB=VERB\n*=OTHER\n')
        mapping = PosMapping.from_file(path)
        self.assertEqual(mapping.coarse_value('VB'), 'VERB')
        self.assertEqual(mapping.coarse_value('JJ'), 'OTHER')
        self.assertIsNone(mapping.coarse_value(None))

    def test_unknown_language_mapping(self):
        self.assertEqual(PosMapping.for_language('xx').coarse_value('NN'), 'X')

    def test_model_cache(self):
        model = self.write('segmenter.udpipe', u'')
        loads = []

        def load(location):
            loads.append(location)
            return object()

        cache = ModelCache()
        first = cache.get(model, load)
        self.assertIs(cache.get(model, load), first)
        self.assertEqual(loads, [model])
        cache.clear()
        self.assertIsNot(cache.get(model, load), first)

    def test_model_cache_errors(self):
        cache = ModelCache()
        self.assertRaises(ResourceError, cache.get,
                          os.path.join(self.directory, 'missing.udpipe'), lambda location: object())
        model = self.write('broken.udpipe', u'')
        self.assertRaises(ResourceError, cache.get, model, lambda location: None)

    def test_find_executable(self):
        with mock.patch.dict(os.environ, {'TEST_TAGGER_BIN': sys.executable}):
            self.assertEqual(find_executable('no-such-tagger', 'TEST_TAGGER_BIN'), sys.executable)
        with mock.patch.dict(os.environ, {'PATH': self.directory}):
            self.assertRaises(ResourceError, find_executable, 'no-such-tagger')


if __name__ == '__main__':
    unittest.main()
