#!/usr/bin/env python
"""Create token and sentence tiers using spacy"""
import re
import threading
import spacy
from .annotator import Annotator, AnnoTier
from .annospan import TokenSpan, SentSpan

_nlp_lock = threading.Lock()
_sent_nlps = {}


def sent_nlp(language):
    """
    Return a shared blank spacy pipeline for the language with a rule based
    sentencizer. Blank pipelines need no model download.
    """
    with _nlp_lock:
        if language not in _sent_nlps:
            nlp = spacy.blank(language)
            nlp.add_pipe('sentencizer')
            _sent_nlps[language] = nlp
        return _sent_nlps[language]


class SpacySegmenter(Annotator):
    def __init__(self, language=None, default_language='en'):
        self.language = language
        self.default_language = default_language

    def annotate(self, doc):
        language = self.language or doc.language or self.default_language
        token_spans = []
        sent_spans = []
        for sent in sent_nlp(language)(doc.text).sents:
            # White-space tokens are skipped.
            sent_tokens = [
                TokenSpan(token.idx, token.idx + len(token), doc)
                for token in sent if not re.match(r"^\s", token.text)]
            if not sent_tokens:
                continue
            token_spans.extend(sent_tokens)
            sent_spans.append(SentSpan.from_tokens(sent_tokens, doc))
        return {
            'tokens': AnnoTier(token_spans, presorted=True),
            'sentences': AnnoTier(sent_spans, presorted=True),
        }
