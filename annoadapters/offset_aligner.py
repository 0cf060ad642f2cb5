#!/usr/bin/env python
"""
Recover the offsets of token forms reported by an external tool in the
original document text.
"""
from .errors import AlignmentError


class OffsetAligner(object):
    """
    Scans the text left to right with a cursor that never moves backwards,
    so repeated forms are matched to successive occurrences.

    >>> aligner = OffsetAligner('the cat saw the dog')
    >>> aligner.align_all(['the', 'cat', 'saw', 'the'])
    [(0, 3), (4, 7), (8, 11), (12, 15)]
    >>> aligner.pos
    15
    """
    def __init__(self, text, pos=0):
        self.text = text
        self.pos = pos

    def locate(self, form):
        """
        Return the offset of the first occurrence of form at or after the
        cursor without moving the cursor.
        """
        if not form:
            raise AlignmentError(form, self.pos, self.text)
        idx = self.text.find(form, self.pos)
        if idx == -1:
            raise AlignmentError(form, self.pos, self.text)
        return idx

    def align(self, form):
        """
        Return the (start, end) span of the next occurrence of form and move
        the cursor past it.

        >>> aligner = OffsetAligner('Hello world')
        >>> aligner.align('Hello')
        (0, 5)
        >>> aligner.align('mars')  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        annoadapters.errors.AlignmentError: Token [mars] not found at or after offset 5 in text [ world]
        """
        start = self.locate(form)
        end = start + len(form)
        self.pos = end
        return start, end

    def align_all(self, forms):
        return [self.align(form) for form in forms]
