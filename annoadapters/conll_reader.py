#!/usr/bin/env python
"""
Reader for the CoNLL 2002 named entity format.

One token per line with the form and a BIO encoded named entity tag
separated by a single space. Sentences are separated by a blank line.

    Wolff B-PER
    , O
    currently O
    ...
    Del B-PER
    Bosque I-PER

With tab separated columns and read_embedded_named_entity enabled the reader
handles the GermEval 2014 layout, where a third column holds the embedded
named entities. GermEval files start each sentence with a "#" line citing
its source. How these lines are handled is set by comment_lines:
"token" reads them like any other line, "skip" ignores them and "error"
raises a FormatError.

http://www.clips.ua.ac.be/conll2002/ner/
https://sites.google.com/site/germeval2014ner/data
"""
import io
import logging
from .annotator import Loader, AnnoDoc, AnnoTier
from .annospan import TokenSpan, SentSpan
from .errors import FormatError, DecodeError
from .iob import IobDecoder

logger = logging.getLogger(__name__)

FORM = 0
IOB = 1
IOB_EMBEDDED = 2

SEPARATORS = {
    'space': ' ',
    'tab': '\t',
}
COMMENT_LINE_MODES = ('token', 'skip', 'error')


class Conll2002Reader(Loader):
    def __init__(self, column_separator='space', encoding='utf8', language=None,
                 intern_tags=True, read_named_entity=True,
                 read_embedded_named_entity=False, comment_lines='token'):
        if column_separator not in SEPARATORS:
            raise ValueError("column_separator must be one of: " + ', '.join(SEPARATORS))
        if comment_lines not in COMMENT_LINE_MODES:
            raise ValueError("comment_lines must be one of: " + ', '.join(COMMENT_LINE_MODES))
        self.column_separator = column_separator
        self.separator = SEPARATORS[column_separator]
        self.encoding = encoding
        self.language = language
        self.read_named_entity = read_named_entity
        self.read_embedded_named_entity = read_embedded_named_entity
        self.comment_lines = comment_lines
        self.field_count = 3 if read_embedded_named_entity else 2
        self.decoder = IobDecoder(intern_tags=intern_tags)

    def load(self, filename):
        with io.open(filename, encoding=self.encoding) as f:
            return self.load_lines(f, source=filename)

    def load_all(self, filenames):
        for filename in filenames:
            yield self.load(filename)

    def load_text(self, text):
        return self.load_lines(io.StringIO(text))

    def read_sentences(self, lines, source='<string>'):
        """
        Yield the list of field lists of each sentence.
        """
        words = []
        for line_number, line in enumerate(lines, 1):
            line = line.rstrip('\r\n')
            if not line.strip():
                # End of sentence
                if words:
                    yield words
                    words = []
                continue
            if line.startswith('#') and self.comment_lines != 'token':
                if self.comment_lines == 'skip':
                    continue
                raise FormatError(
                    "Unexpected comment line {0} in {1}: [{2}]".format(
                        line_number, source, line))
            fields = line.split(self.separator)
            # Trailing separators do not start another field.
            while fields and fields[-1] == '':
                fields.pop()
            if len(fields) != self.field_count:
                raise FormatError(
                    "Invalid file format. Line {0} of {1} needs to have {2} "
                    "{3}-separated fields: [{4}]".format(
                        line_number, source, self.field_count,
                        self.column_separator, line))
            words.append(fields)
        if words:
            yield words

    def load_lines(self, lines, source='<string>'):
        """
        Build a document with the tokens separated by spaces and one sentence
        per line.
        """
        sentences = list(self.read_sentences(lines, source))
        parts = []
        position = 0
        sentence_offsets = []
        for words in sentences:
            token_offsets = []
            for word in words:
                form = word[FORM]
                token_offsets.append((position, position + len(form)))
                parts.append(form)
                parts.append(' ')
                position += len(form) + 1
            parts.append('\n')
            position += 1
            sentence_offsets.append(token_offsets)
        doc = AnnoDoc(''.join(parts), language=self.language)

        token_spans = []
        sent_spans = []
        ne_spans = []
        embedded_ne_spans = []
        for sentence_idx, (words, token_offsets) in enumerate(zip(sentences, sentence_offsets)):
            sent_tokens = [TokenSpan(start, end, doc) for start, end in token_offsets]
            token_spans.extend(sent_tokens)
            sent_spans.append(SentSpan.from_tokens(sent_tokens, doc))
            if self.read_named_entity:
                ne_spans.extend(self.decode_column(
                    sent_tokens, [word[IOB] for word in words], doc, sentence_idx, source))
            if self.read_embedded_named_entity:
                embedded_ne_spans.extend(self.decode_column(
                    sent_tokens, [word[IOB_EMBEDDED] for word in words], doc, sentence_idx, source))

        doc.tiers['tokens'] = AnnoTier(token_spans, presorted=True)
        doc.tiers['sentences'] = AnnoTier(sent_spans, presorted=True)
        if self.read_named_entity:
            doc.tiers['nes'] = AnnoTier(ne_spans, presorted=True)
        if self.read_embedded_named_entity:
            doc.tiers['nes.embedded'] = AnnoTier(embedded_ne_spans, presorted=True)
        logger.info('%s: %s sentences, %s tokens read' % (
            source, len(sent_spans), len(token_spans)))
        return doc

    def decode_column(self, sent_tokens, tags, doc, sentence_idx, source):
        """
        Named entities are best effort: a sentence with an invalid tag keeps
        its tokens but gets no entities for that column.
        """
        try:
            return self.decoder.decode_tokens(sent_tokens, tags, doc)
        except DecodeError as e:
            logger.warning('%s: skipping named entities of sentence %s: %s' % (
                source, sentence_idx, e))
            return []
