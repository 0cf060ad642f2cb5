#!/usr/bin/env python
"""
Map fine grained part of speech tags onto coarse categories.

Mappings are plain tables. A mapping file has one tag=CATEGORY pair per line
and may set the category for unknown tags with *=CATEGORY.
"""
from .resources import read_properties

NOUN = 'NOUN'
PROPN = 'PROPN'
VERB = 'VERB'
ADJ = 'ADJ'
ADV = 'ADV'
PRON = 'PRON'
DET = 'DET'
ADP = 'ADP'
CONJ = 'CONJ'
NUM = 'NUM'
PRT = 'PRT'
PUNCT = 'PUNCT'
X = 'X'

PTB_TAGS = {
    'CC': CONJ, 'CD': NUM, 'DT': DET, 'EX': PRON, 'FW': X, 'IN': ADP,
    'JJ': ADJ, 'JJR': ADJ, 'JJS': ADJ, 'LS': X, 'MD': VERB,
    'NN': NOUN, 'NNS': NOUN, 'NNP': PROPN, 'NNPS': PROPN,
    'PDT': DET, 'POS': PRT, 'PRP': PRON, 'PRP$': PRON,
    'RB': ADV, 'RBR': ADV, 'RBS': ADV, 'RP': PRT, 'SYM': X, 'TO': PRT,
    'UH': X, 'VB': VERB, 'VBD': VERB, 'VBG': VERB, 'VBN': VERB,
    'VBP': VERB, 'VBZ': VERB, 'WDT': DET, 'WP': PRON, 'WP$': PRON,
    'WRB': ADV, '.': PUNCT, ',': PUNCT, ':': PUNCT, '``': PUNCT,
    "''": PUNCT, '-LRB-': PUNCT, '-RRB-': PUNCT, '#': X, '$': X,
}

STTS_TAGS = {
    'ADJA': ADJ, 'ADJD': ADJ, 'ADV': ADV, 'APPR': ADP, 'APPRART': ADP,
    'APPO': ADP, 'APZR': ADP, 'ART': DET, 'CARD': NUM, 'FM': X, 'ITJ': X,
    'KOUI': CONJ, 'KOUS': CONJ, 'KON': CONJ, 'KOKOM': CONJ,
    'NN': NOUN, 'NE': PROPN, 'PDS': PRON, 'PDAT': PRON, 'PIS': PRON,
    'PIAT': PRON, 'PIDAT': PRON, 'PPER': PRON, 'PPOSS': PRON,
    'PPOSAT': PRON, 'PRELS': PRON, 'PRELAT': PRON, 'PRF': PRON,
    'PWS': PRON, 'PWAT': PRON, 'PWAV': PRON, 'PAV': PRON, 'PROAV': PRON,
    'PTKZU': PRT, 'PTKNEG': PRT, 'PTKVZ': PRT, 'PTKANT': PRT, 'PTKA': PRT,
    'TRUNC': X, 'VVFIN': VERB, 'VVIMP': VERB, 'VVINF': VERB, 'VVIZU': VERB,
    'VVPP': VERB, 'VAFIN': VERB, 'VAIMP': VERB, 'VAINF': VERB, 'VAPP': VERB,
    'VMFIN': VERB, 'VMINF': VERB, 'VMPP': VERB, 'XY': X,
    '$,': PUNCT, '$.': PUNCT, '$(': PUNCT,
}

TAGSETS = {
    'ptb': PTB_TAGS,
    'stts': STTS_TAGS,
}

# The tagset used by the default model of each language.
LANGUAGE_TAGSETS = {
    'en': 'ptb',
    'de': 'stts',
}


class PosMapping(object):
    """
    >>> mapping = PosMapping.for_language('en')
    >>> mapping.coarse_value('NNS')
    'NOUN'
    >>> mapping.coarse_value('NOT-A-TAG')
    'X'
    """
    def __init__(self, table, default=X):
        self.table = table
        self.default = default

    @classmethod
    def from_file(cls, path):
        table = read_properties(path)
        default = table.pop('*', X)
        return cls(table, default)

    @classmethod
    def for_language(cls, language):
        """
        Return the built-in mapping for the language's default tagset, or a
        mapping that assigns every tag to X.
        """
        tagset = LANGUAGE_TAGSETS.get(language)
        return cls(TAGSETS.get(tagset, {}))

    def coarse_value(self, tag):
        if tag is None:
            return None
        return self.table.get(tag, self.default)
