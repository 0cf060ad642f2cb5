#!/usr/bin/env python
"""
Locate and cache the models and executables used by the annotators.

Model locations are templates such as
"${model_path}/hunpos/tagger-${language}-${variant}.model". They are filled
in once per document language by resolve_model, which has no side effects.
"""
import io
import os
import shutil
import threading
import logging
from collections import namedtuple
from string import Template
from .errors import ResourceError

logger = logging.getLogger(__name__)

if os.environ.get('ANNOADAPTERS_MODEL_PATH'):
    MODEL_PATH = os.environ.get('ANNOADAPTERS_MODEL_PATH')
else:
    MODEL_PATH = os.path.join(os.path.expanduser("~"), '.annoadapters', 'models')

ModelConfig = namedtuple('ModelConfig', [
    # Template used when no location override is given.
    'location_template',
    # Overrides. When None the document language and the default variant are used.
    'language',
    'variant',
    'location',
    # Variant used for languages missing from default_variants.
    'default_variant',
    # language -> variant, or None
    'default_variants',
])
ModelConfig.__new__.__defaults__ = (None, None, None, 'default', None)

ResolvedModel = namedtuple('ResolvedModel', ['location', 'language', 'variant'])


def resolve_model(config, doc_language=None, model_path=None):
    """
    Fill in the location template of a model configuration.

    >>> config = ModelConfig('${model_path}/tagger-${language}-${variant}.model',
    ...                      default_variants={'de': 'stts'})
    >>> resolve_model(config, 'de', model_path='/models')
    ResolvedModel(location='/models/tagger-de-stts.model', language='de', variant='stts')
    >>> resolve_model(config._replace(variant='ud'), 'en', model_path='/models').location
    '/models/tagger-en-ud.model'
    """
    language = config.language or doc_language
    if not language:
        raise ResourceError(
            "No language set and the document does not declare one")
    variant = (config.variant or
               (config.default_variants or {}).get(language) or
               config.default_variant)
    template = config.location or config.location_template
    try:
        location = Template(template).substitute(
            model_path=model_path or MODEL_PATH,
            language=language,
            variant=variant)
    except (KeyError, ValueError) as e:
        raise ResourceError("Invalid model location template [{0}]: {1}".format(template, e))
    return ResolvedModel(location, language, variant)


def read_properties(path, encoding='utf8'):
    """
    Read a key=value file. Blank lines and lines starting with # are skipped.
    """
    properties = {}
    with io.open(path, encoding=encoding) as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            if '=' not in line:
                raise ResourceError("Line {0} of {1} is not a key=value pair: [{2}]".format(
                    line_number, path, line))
            key, value = line.split('=', 1)
            properties[key.strip()] = value.strip()
    return properties


def load_default_variants(path):
    """Read a language=variant map file."""
    return read_properties(path)


def read_model_metadata(location):
    """
    Return the metadata stored next to a model in a "<model>.properties" file,
    or an empty dict if there is none.
    """
    metadata_path = location + '.properties'
    if os.path.exists(metadata_path):
        return read_properties(metadata_path)
    return {}


def find_executable(name, env_var=None):
    """
    Return the path of an executable set through env_var or found on the PATH.
    """
    if env_var and os.environ.get(env_var):
        path = os.environ.get(env_var)
    else:
        path = shutil.which(name)
    if not path or not os.path.exists(path):
        raise ResourceError(
            "Could not find the {0} executable. Add it to the PATH or set {1}.".format(
                name, env_var or "its location"))
    return path


class ModelCache(object):
    """
    Loaded models shared between annotator instances, keyed by their resolved
    location.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self._models = {}

    def get(self, location, load):
        with self._lock:
            if location not in self._models:
                if not os.path.exists(location):
                    raise ResourceError("There is no model at: " + location)
                logger.info('loading model %s' % location)
                model = load(location)
                if model is None:
                    raise ResourceError("Unable to load the model at: " + location)
                self._models[location] = model
            return self._models[location]

    def clear(self):
        with self._lock:
            self._models = {}


model_cache = ModelCache()
