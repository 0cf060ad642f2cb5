#!/usr/bin/env python
"""
Part of speech annotator using HunPos.

HunPos runs as a subprocess that reads one token per line with a blank line
after each sentence and answers with a token<TAB>tag line per token.

Halácsy, Kornai and Oravecz. HunPos: an open source trigram tagger.
ACL 2007 demo session, pages 209-212.
"""
import os
import sys
import logging
from .annotator import Annotator, AnnoTier
from .annospan import PosSpan
from .errors import ResourceError
from .pos_mapping import PosMapping
from .resources import (ModelConfig, resolve_model, read_model_metadata,
                        load_default_variants, find_executable)
from .spacy_annotator import SpacySegmenter
from .tool_channel import ToolProcess

logging.basicConfig(level=logging.ERROR, format='%(asctime)s %(message)s')
logger = logging.getLogger(__name__)


class HunPosAnnotator(Annotator):
    """
    Requires tokens and sentences tiers. They are created with the
    SpacySegmenter when the document does not have them.
    """
    location_template = '${model_path}/hunpos/tagger-${language}-${variant}.model'

    def __init__(self, language=None, variant=None, model_location=None,
                 default_variants_location=None, executable=None, command=None,
                 encoding=None, mapping_enabled=True, pos_mapping_location=None,
                 print_tagset=False):
        """
        command can replace the executable with a full argument list, the
        model location is appended to it. encoding overrides the model's
        model.encoding metadata.
        """
        default_variants = {}
        if default_variants_location:
            default_variants = load_default_variants(default_variants_location)
        self.model_config = ModelConfig(
            self.location_template,
            language=language,
            variant=variant,
            location=model_location,
            default_variant='default',
            default_variants=default_variants)
        self.executable = executable
        self.command = command
        self.encoding = encoding
        self.mapping_enabled = mapping_enabled
        self.pos_mapping = None
        if pos_mapping_location:
            self.pos_mapping = PosMapping.from_file(pos_mapping_location)
        self.print_tagset = print_tagset

    def tool_command(self, model_location):
        if self.command:
            command = list(self.command)
        else:
            command = [self.executable or find_executable('hunpos-tag', 'HUNPOS_TAG_BIN')]
        return command + [model_location]

    def annotate(self, doc):
        tokens, sentences = doc.require_tiers('tokens', 'sentences', via=SpacySegmenter)
        model = resolve_model(self.model_config, doc.language)
        if not os.path.exists(model.location):
            raise ResourceError("There is no HunPos model at: " + model.location)
        encoding = self.encoding or read_model_metadata(model.location).get('model.encoding')
        if not encoding:
            raise ResourceError("Model should contain encoding metadata")
        pos_mapping = None
        if self.mapping_enabled:
            pos_mapping = self.pos_mapping or PosMapping.for_language(model.language)
        command = self.tool_command(model.location)

        pos_spans = []
        tool = None
        success = False
        try:
            tool = ToolProcess(command, encoding=encoding)
            for sentence, sent_tokens in sentences.group_spans_by_containing_span(tokens):
                # Skip empty sentences
                if len(sent_tokens) == 0:
                    continue
                tags = tool.request([token.text for token in sent_tokens])
                for token, tag in zip(sent_tokens, tags):
                    tag = sys.intern(tag)
                    pos_spans.append(PosSpan(
                        token, tag,
                        pos_mapping.coarse_value(tag) if pos_mapping else None))
            success = True
        finally:
            if not success:
                logger.error("Sent before error: [%s]" % (
                    tool.writer.last_sent if tool is not None else None))
                logger.error("Last response before error: [%s]" % (
                    tool.reader.last_received if tool is not None else None))
            if tool is not None:
                tool.close()

        if self.print_tagset:
            logger.info('%s tags used: %s' % (
                model.location, ' '.join(sorted(set(span.label for span in pos_spans)))))
        return {'pos': AnnoTier(pos_spans, presorted=True)}
