#!/usr/bin/env python


EMPTY_LIST = []


class AnnoSpan(object):
    """
    A span of document text with an annotation applied to it.
    Offsets are zero-based and the end offset is exclusive.
    """
    __slots__ = ["start", "end", "doc", "metadata", "label", "base_spans"]

    def __init__(self, start, end, doc, label=None, metadata=None):
        if not 0 <= start <= end <= len(doc.text):
            raise ValueError(
                "Invalid span offsets {0}-{1} for a document of length {2}".format(
                    start, end, len(doc.text)))
        self.start = start
        self.end = end
        self.doc = doc
        self.metadata = metadata
        # Base spans is only non-empty on span groups.
        self.base_spans = EMPTY_LIST
        self.label = label

    def __repr__(self):
        return u'AnnoSpan({0}-{1}, {2})'.format(self.start, self.end, self.label or self.text)

    def __lt__(self, other):
        if self.start < other.start:
            return True
        elif self.start == other.start:
            return self.end < other.end
        else:
            return False

    def __len__(self):
        return self.end - self.start

    def contains(self, other_span):
        """
        Return true if the span completely contains other_span.
        """
        return self.start <= other_span.start and self.end >= other_span.end

    @property
    def text(self):
        return self.doc.text[self.start:self.end]

    def to_dict(self):
        """
        Return a json serializable dictionary.
        """
        return dict(
            label=self.label,
            textOffsets=[[self.start, self.end]]
        )


class SpanGroup(AnnoSpan):
    """
    A AnnoSpan that extends through a group of AnnoSpans.
    brat uses these for discontinuous annotations.
    """
    def __init__(self, base_spans, label=None, metadata=None):
        assert isinstance(base_spans, list)
        assert len(base_spans) > 0
        super(SpanGroup, self).__init__(
            min(s.start for s in base_spans),
            max(s.end for s in base_spans),
            base_spans[0].doc,
            label,
            metadata)
        self.base_spans = base_spans

    def __repr__(self):
        return ("SpanGroup("
                "text=" + self.text + ", "
                "label=" + str(self.label) + ", " +
                ", ".join(map(str, self.base_spans)) + ")")

    def to_dict(self):
        return dict(
            label=self.label,
            textOffsets=[[span.start, span.end] for span in self.base_spans]
        )


class TokenSpan(AnnoSpan):
    """
    A token. The label holds the token form as it appears in the text.
    """
    __slots__ = []

    def __init__(self, start, end, doc):
        super(TokenSpan, self).__init__(start, end, doc)
        self.label = self.text


class PosSpan(AnnoSpan):
    """
    The part of speech tag of a token. The label holds the tag and coarse
    holds its mapped category.
    """
    __slots__ = ['token', 'coarse']

    def __init__(self, token, tag, coarse=None):
        super(PosSpan, self).__init__(token.start, token.end, token.doc, label=tag)
        self.token = token
        self.coarse = coarse

    def to_dict(self):
        result = super(PosSpan, self).to_dict()
        result['coarse'] = self.coarse
        return result


class SentSpan(AnnoSpan):
    __slots__ = []

    @classmethod
    def from_tokens(cls, token_spans, doc):
        """
        Create a sentence that runs from the first token's start to the last
        token's end.

        >>> from .annodoc import AnnoDoc
        >>> doc = AnnoDoc('Hi Joe.')
        >>> tokens = [TokenSpan(0, 2, doc), TokenSpan(3, 6, doc), TokenSpan(6, 7, doc)]
        >>> SentSpan.from_tokens(tokens, doc)
        AnnoSpan(0-7, Hi Joe.)
        """
        return cls(token_spans[0].start, token_spans[-1].end, doc)


class EntitySpan(AnnoSpan):
    """
    A named entity covering one or more contiguous tokens of one sentence.

    source is "single" for one-token entities and "complex" for longer ones,
    so two adjacent entities of the same type can be told apart from a
    single long one. implicit_begin is set when the entity was opened by an
    I- tag that did not continue an entity of the same type.
    """
    __slots__ = ['source', 'implicit_begin', 'token_range']

    SINGLE = 'single'
    COMPLEX = 'complex'

    def __init__(self, start, end, doc, label, source=SINGLE,
                 implicit_begin=False, token_range=None):
        super(EntitySpan, self).__init__(start, end, doc, label=label)
        self.source = source
        self.implicit_begin = implicit_begin
        self.token_range = token_range

    def __repr__(self):
        return u'EntitySpan({0}-{1}, {2}, {3})'.format(
            self.start, self.end, self.label, self.text)

    def to_dict(self):
        result = super(EntitySpan, self).to_dict()
        result['source'] = self.source
        return result
