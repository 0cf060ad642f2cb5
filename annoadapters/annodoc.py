#!/usr/bin/env python
from .annotier import AnnoTier


class AnnoDoc(object):
    """
    A document to be annotated.
    The text is read-only once the document exists. The tiers property links
    to the annotations applied to it.
    """
    def __init__(self, text=None, date=None, language=None):
        if isinstance(text, bytes):
            text = text.decode('utf8')
        elif not isinstance(text, str):
            raise TypeError("text must be string or bytes")
        self._text = text
        self.tiers = {}
        self.date = date
        self.language = language

    @property
    def text(self):
        return self._text

    def __len__(self):
        return len(self._text)

    def add_tiers(self, annotator, **kwargs):
        result = annotator.annotate(self, **kwargs)
        if isinstance(result, dict):
            self.tiers.update(result)
        return self

    def require_tiers(self, *tier_names, **kwargs):
        """
        Return the specified tiers or add them using the via annotator.

        >>> from .annospan import AnnoSpan
        >>> doc = AnnoDoc('one two')
        >>> doc.tiers['tokens'] = AnnoTier([AnnoSpan(0, 3, doc)])
        >>> doc.require_tiers('tokens')
        AnnoTier([AnnoSpan(0-3, one)])
        """
        assert len(set(kwargs.keys()) | set(['via'])) == 1
        assert len(tier_names) > 0
        via_annotator = kwargs.get('via')
        tiers = [self.tiers.get(tier_name) for tier_name in tier_names]
        if all(t is not None for t in tiers):
            if len(tiers) == 1:
                return tiers[0]
            return tiers
        else:
            if via_annotator:
                self.add_tiers(via_annotator())
                return self.require_tiers(*tier_names)
            else:
                raise KeyError("Tier could not be found. Available tiers: " + str(list(self.tiers.keys())))

    def to_dict(self):
        """
        Convert the document into a json serializable dictionary.

        >>> from .annospan import AnnoSpan
        >>> import datetime
        >>> doc = AnnoDoc('one two three', date=datetime.datetime(2011, 11, 11))
        >>> doc.tiers = {
        ...     'test': AnnoTier([AnnoSpan(0, 3, doc), AnnoSpan(4, 7, doc)])}
        >>> d = doc.to_dict()
        >>> str(d['text'])
        'one two three'
        >>> str(d['date'])
        '2011-11-11T00:00:00Z'
        >>> sorted(d['tiers']['test'][0].items())
        [('label', None), ('textOffsets', [[0, 3]])]
        """
        json_obj = {
            'text': self.text
        }
        if self.date:
            json_obj['date'] = self.date.strftime("%Y-%m-%dT%H:%M:%S") + 'Z'
        if self.language:
            json_obj['language'] = self.language
        json_obj['tiers'] = {}
        for name, tier in self.tiers.items():
            json_obj['tiers'][name] = [
                span.to_dict() for span in tier]
        return json_obj
