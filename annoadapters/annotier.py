#!/usr/bin/env python
from .annospan import AnnoSpan  # noqa: F401


class AnnoTier(object):
    """
    A group of AnnoSpans stored sorted by start offset.
    """
    def __init__(self, spans=None, presorted=False):
        if spans is None:
            self.spans = []
        elif isinstance(spans, AnnoTier):
            self.spans = list(spans.spans)
        else:
            if presorted:
                self.spans = list(spans)
            else:
                self.spans = sorted(spans)

    def __repr__(self):
        return ('AnnoTier([' +
                ', '.join([str(span) for span in self.spans]) +
                '])')

    def __len__(self):
        return len(self.spans)

    def __iter__(self):
        return iter(self.spans)

    def __getitem__(self, idx):
        return self.spans[idx]

    @property
    def labels(self):
        return [span.label for span in self.spans]

    def group_spans_by_containing_span(self, other_tier):
        """
        Group spans in the other tier by the spans in this tier that contain them.

        >>> from .annodoc import AnnoDoc
        >>> doc = AnnoDoc('one two three')
        >>> tier_a = AnnoTier([AnnoSpan(0, 3, doc), AnnoSpan(4, 7, doc)])
        >>> tier_b = AnnoTier([AnnoSpan(0, 1, doc)])
        >>> list(tier_a.group_spans_by_containing_span(tier_b))
        [(AnnoSpan(0-3, one), [AnnoSpan(0-1, o)]), (AnnoSpan(4-7, two), [])]
        """
        if isinstance(other_tier, AnnoTier):
            other_spans = other_tier.spans
        else:
            other_spans = sorted(other_tier)
        other_spans_idx = 0
        for span in self.spans:
            span_group = []
            # skip the other spans that start before this span.
            while other_spans_idx < len(other_spans):
                if other_spans[other_spans_idx].start >= span.start:
                    break
                other_spans_idx += 1
            other_span_idx_2 = other_spans_idx
            while other_span_idx_2 < len(other_spans):
                if other_spans[other_span_idx_2].start >= span.end:
                    break
                # Skip the other span if it is not contained by this span.
                # It is possible there is another shorter span that starts
                # after it and is fully contained by this span.
                if other_spans[other_span_idx_2].end > span.end:
                    other_span_idx_2 += 1
                    continue
                span_group.append(other_spans[other_span_idx_2])
                other_span_idx_2 += 1
            yield span, span_group

    def spans_contained_by_span(self, selector_span):
        """
        Return a tier of the spans that are contained by a "selector span".

        >>> from .annodoc import AnnoDoc
        >>> doc = AnnoDoc('one two three')
        >>> tier1 = AnnoTier([AnnoSpan(0, 3, doc), AnnoSpan(4, 7, doc)])
        >>> tier1.spans_contained_by_span(AnnoSpan(3, 9, doc))
        AnnoTier([AnnoSpan(4-7, two)])
        """
        return AnnoTier(
            [span for span in self if selector_span.contains(span)],
            presorted=True)

    def has_overlaps(self):
        """
        Return True if any two spans in the tier overlap.

        >>> from .annodoc import AnnoDoc
        >>> doc = AnnoDoc('one two three')
        >>> AnnoTier([AnnoSpan(0, 3, doc), AnnoSpan(4, 7, doc)]).has_overlaps()
        False
        >>> AnnoTier([AnnoSpan(0, 5, doc), AnnoSpan(4, 7, doc)]).has_overlaps()
        True
        """
        for prev_span, span in zip(self.spans, self.spans[1:]):
            if span.start < prev_span.end:
                return True
        return False
