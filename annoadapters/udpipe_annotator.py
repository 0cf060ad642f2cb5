#!/usr/bin/env python
"""
Tokenizer and sentence splitter using UDPipe.

UDPipe reports token forms but not their offsets, so the forms are aligned
with the document text to recover them.
"""
import logging
from .annotator import Annotator, AnnoTier
from .annospan import TokenSpan, SentSpan
from .errors import ResourceError
from .offset_aligner import OffsetAligner
from .resources import ModelConfig, resolve_model, model_cache

logger = logging.getLogger(__name__)


def load_udpipe_model(location):
    from ufal.udpipe import Model
    return Model.load(location)


class UDPipeSegmenter(Annotator):
    location_template = '${model_path}/udpipe/segmenter-${language}-${variant}.udpipe'

    def __init__(self, language=None, variant=None, model_location=None,
                 model=None, zone_start=0, zone_end=None):
        """
        model can be an already loaded ufal.udpipe Model, otherwise one is
        loaded from the resolved location and shared through the model cache.
        zone_start and zone_end restrict segmentation to a part of the text.
        """
        self.model_config = ModelConfig(
            self.location_template,
            language=language,
            variant=variant,
            location=model_location,
            default_variant='ud')
        self.model = model
        self.zone_start = zone_start
        self.zone_end = zone_end

    def get_model(self, doc):
        if self.model is not None:
            return self.model
        resolved = resolve_model(self.model_config, doc.language)
        return model_cache.get(resolved.location, load_udpipe_model)

    def tokenize(self, model, text):
        """
        Yield the list of word forms of each sentence UDPipe finds in the text.
        """
        from ufal.udpipe import Model, Sentence, ProcessingError
        tokenizer = model.newTokenizer(Model.DEFAULT)
        if tokenizer is None:
            raise ResourceError("The UDPipe model does not contain a tokenizer")
        tokenizer.setText(text)
        error = ProcessingError()
        sentence = Sentence()
        while tokenizer.nextSentence(sentence, error):
            words = sentence.words
            # Word 0 is the technical root of the sentence.
            yield [words[i].form for i in range(1, len(words))]
            sentence = Sentence()
        if error.occurred():
            raise ResourceError("UDPipe tokenizer failed: " + error.message)

    def annotate(self, doc):
        model = self.get_model(doc)
        zone_end = len(doc.text) if self.zone_end is None else self.zone_end
        offset = self.zone_start
        text = doc.text[offset:zone_end]
        aligner = OffsetAligner(text)
        token_spans = []
        sent_spans = []
        for forms in self.tokenize(model, text):
            if len(forms) == 0:
                continue
            sent_start = aligner.locate(forms[0])
            for start, end in aligner.align_all(forms):
                token_spans.append(TokenSpan(start + offset, end + offset, doc))
            sent_spans.append(SentSpan(sent_start + offset, aligner.pos + offset, doc))
        logger.info('%s sentences and %s tokens segmented' % (
            len(sent_spans), len(token_spans)))
        return {
            'tokens': AnnoTier(token_spans, presorted=True),
            'sentences': AnnoTier(sent_spans, presorted=True),
        }
