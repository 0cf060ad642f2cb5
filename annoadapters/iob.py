#!/usr/bin/env python
"""
Decode per-token BIO tags into entity spans and encode entity spans back
into BIO tags.
"""
import re
import sys
from collections import namedtuple
from .annospan import EntitySpan
from .errors import DecodeError

OUTSIDE_TAG = 'O'
IOB_TAG_RE = re.compile(r'^([BI])-(.+)$')

# A run of tokens [first, end) that decodes to one entity.
TagGroup = namedtuple('TagGroup', ['first', 'end', 'type', 'implicit_begin'])


class IobDecoder(object):
    """
    A left to right state machine over one tag column. The state is the type
    of the currently open entity, or None outside of an entity.

    An I- tag that does not continue an open entity of the same type opens a
    new entity instead of failing, since real corpora often contain such tags.

    >>> IobDecoder().decode(['B-PER', 'I-PER', 'O', 'B-LOC'])
    [TagGroup(first=0, end=2, type='PER', implicit_begin=False), TagGroup(first=3, end=4, type='LOC', implicit_begin=False)]
    >>> IobDecoder().decode(['O', 'I-LOC', 'I-LOC', 'O'])
    [TagGroup(first=1, end=3, type='LOC', implicit_begin=True)]
    """
    def __init__(self, intern_tags=True):
        self.intern_tags = intern_tags

    def parse_tag(self, tag, index):
        """
        Split a tag into its prefix and entity type. Returns (None, None) for
        the outside tag.
        """
        if tag == OUTSIDE_TAG:
            return None, None
        match = IOB_TAG_RE.match(tag or '')
        if not match:
            raise DecodeError(tag, index)
        prefix, entity_type = match.groups()
        if self.intern_tags:
            entity_type = sys.intern(entity_type)
        return prefix, entity_type

    def decode(self, tags):
        groups = []
        open_type = None
        open_first = None
        implicit_begin = False
        for idx, tag in enumerate(tags):
            prefix, entity_type = self.parse_tag(tag, idx)
            if prefix == 'I' and entity_type == open_type:
                continue
            if open_type is not None:
                groups.append(TagGroup(open_first, idx, open_type, implicit_begin))
            open_type = entity_type
            open_first = idx
            implicit_begin = prefix == 'I'
        if open_type is not None:
            groups.append(TagGroup(open_first, len(tags), open_type, implicit_begin))
        return groups

    def decode_tokens(self, token_spans, tags, doc):
        """
        Create EntitySpans over the given tokens. There must be one tag per
        token and the tokens must belong to a single sentence.
        """
        if len(token_spans) != len(tags):
            raise ValueError(
                "Got {0} tags for {1} tokens".format(len(tags), len(token_spans)))
        entities = []
        for group in self.decode(tags):
            entities.append(EntitySpan(
                token_spans[group.first].start,
                token_spans[group.end - 1].end,
                doc,
                label=group.type,
                source=(EntitySpan.SINGLE if group.end - group.first == 1
                        else EntitySpan.COMPLEX),
                implicit_begin=group.implicit_begin,
                token_range=(group.first, group.end)))
        return entities


def encode(token_spans, entity_spans):
    """
    Produce one BIO tag per token from entity spans. Every entity must start
    and end on token boundaries and entities must not overlap.

    >>> from .annodoc import AnnoDoc
    >>> from .annospan import TokenSpan
    >>> doc = AnnoDoc('Del Bosque in Real Madrid')
    >>> tokens = [TokenSpan(0, 3, doc), TokenSpan(4, 10, doc), TokenSpan(11, 13, doc),
    ...           TokenSpan(14, 18, doc), TokenSpan(19, 25, doc)]
    >>> entities = [EntitySpan(0, 10, doc, 'PER'), EntitySpan(14, 25, doc, 'ORG')]
    >>> encode(tokens, entities)
    ['B-PER', 'I-PER', 'O', 'B-ORG', 'I-ORG']
    """
    tags = [OUTSIDE_TAG] * len(token_spans)
    for entity in entity_spans:
        covered = [idx for idx, token in enumerate(token_spans)
                   if entity.contains(token)]
        if (not covered or
                token_spans[covered[0]].start != entity.start or
                token_spans[covered[-1]].end != entity.end):
            raise ValueError(
                "Entity {0} does not fall on token boundaries".format(entity))
        for position, idx in enumerate(covered):
            if tags[idx] != OUTSIDE_TAG:
                raise ValueError("Entity {0} overlaps another entity".format(entity))
            tags[idx] = ('B-' if position == 0 else 'I-') + entity.label
    return tags
