#!/usr/bin/env python
"""Errors raised by the annotators and readers"""


class AnnotatorError(Exception):
    pass


class FormatError(AnnotatorError):
    """An input file line does not have the expected layout."""
    pass


class AlignmentError(AnnotatorError):
    """
    A token form reported by an external tool can not be found in the
    document text at or after the current cursor position.
    """
    context_size = 40

    def __init__(self, form, pos, text):
        self.form = form
        self.pos = pos
        self.context = text[pos:pos + self.context_size]
        super(AlignmentError, self).__init__(
            "Token [{0}] not found at or after offset {1} in text [{2}]".format(
                form, pos, self.context))


class DecodeError(AnnotatorError):
    """A tag that does not follow the BIO convention."""
    def __init__(self, tag, index):
        self.tag = tag
        self.index = index
        super(DecodeError, self).__init__(
            "Unrecognized IOB tag [{0}] at token {1}".format(tag, index))


class ProtocolError(AnnotatorError):
    """The external tool's response does not match the request."""
    pass


class ResourceError(AnnotatorError):
    """A model, mapping or executable is unavailable."""
    pass
