#!/usr/bin/env python
"""
Reader for text-bound annotations in the brat standoff format.

A document is a .txt file with an .ann file next to it. Text-bound
annotation lines look like

    T1<TAB>PER 0 5<TAB>Wolff
    T2<TAB>LOC:city 10 14;20 26<TAB>Real Madrid

where the second form is a discontinuous annotation. Other annotation kinds
(relations, events, attributes, notes) are ignored.
"""
import io
import os
import re
import logging
from collections import namedtuple
from .annotator import Loader, AnnoDoc, AnnoTier
from .annospan import AnnoSpan, SpanGroup, EntitySpan
from .errors import AlignmentError, FormatError

logger = logging.getLogger(__name__)

TEXT_ANNOTATION_PARAM_RE = re.compile(
    r"(?P<type>[a-zA-Z_][a-zA-Z0-9_\-.]+)"
    r"(?::(?P<subcat>[a-zA-Z][a-zA-Z0-9]+))?")
OFFSETS_RE = re.compile(r"^\d+ \d+(;\d+ \d+)*$")


class TextAnnotationParam(namedtuple('TextAnnotationParam', ['type', 'subcat'])):
    """
    >>> TextAnnotationParam.parse('LOC:city')
    TextAnnotationParam(type='LOC', subcat='city')
    >>> TextAnnotationParam.parse('PER')
    TextAnnotationParam(type='PER', subcat=None)
    """
    __slots__ = ()

    @classmethod
    def parse(cls, value):
        match = TEXT_ANNOTATION_PARAM_RE.fullmatch(value)
        if not match:
            raise ValueError(
                "Illegal text annotation parameter format [" + value + "]")
        return cls(match.group('type'), match.group('subcat'))


class BratReader(Loader):
    def __init__(self, encoding='utf8', language=None):
        self.encoding = encoding
        self.language = language

    def load(self, filename, ann_filename=None):
        if ann_filename is None:
            ann_filename = os.path.splitext(filename)[0] + '.ann'
        with io.open(filename, encoding=self.encoding, newline='') as f:
            doc = AnnoDoc(f.read(), language=self.language)
        with io.open(ann_filename, encoding=self.encoding) as f:
            doc.tiers['nes'] = AnnoTier(self.parse(doc, f, source=ann_filename))
        return doc

    def parse(self, doc, lines, source='<string>'):
        """
        Return the spans of the text-bound annotations in lines.
        """
        spans = []
        for line_number, line in enumerate(lines, 1):
            line = line.rstrip('\r\n')
            if not line.startswith('T'):
                continue
            fields = line.split('\t')
            if len(fields) != 3 or ' ' not in fields[1]:
                raise FormatError(
                    "Invalid text annotation on line {0} of {1}: [{2}]".format(
                        line_number, source, line))
            ann_id, info, ann_text = fields
            type_value, offsets = info.split(' ', 1)
            if not OFFSETS_RE.match(offsets):
                raise FormatError(
                    "Invalid offsets on line {0} of {1}: [{2}]".format(
                        line_number, source, offsets))
            try:
                param = TextAnnotationParam.parse(type_value)
            except ValueError as e:
                raise FormatError("Line {0} of {1}: {2}".format(line_number, source, e))
            ranges = [tuple(int(offset) for offset in fragment.split(' '))
                      for fragment in offsets.split(';')]
            metadata = {'id': ann_id, 'subcat': param.subcat}
            try:
                if len(ranges) == 1:
                    span = EntitySpan(ranges[0][0], ranges[0][1], doc, param.type)
                    span.metadata = metadata
                else:
                    span = SpanGroup(
                        [AnnoSpan(start, end, doc) for start, end in ranges],
                        label=param.type, metadata=metadata)
            except ValueError as e:
                raise FormatError("Line {0} of {1}: {2}".format(line_number, source, e))
            fragment_text = ' '.join(doc.text[start:end] for start, end in ranges)
            if fragment_text != ann_text:
                raise AlignmentError(ann_text, ranges[0][0], doc.text)
            spans.append(span)
        logger.info('%s: %s text annotations read' % (source, len(spans)))
        return spans
