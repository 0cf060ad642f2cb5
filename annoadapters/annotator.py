#!/usr/bin/env python
"""Annotator"""
from .annodoc import AnnoDoc  # noqa: F401
from .annospan import AnnoSpan  # noqa: F401
from .annotier import AnnoTier  # noqa: F401


class Annotator(object):

    def annotate(self, doc):
        """Take an AnnoDoc and produce a dict of new annotation tiers"""
        raise NotImplementedError(
            "annotate method must be implemented in child")


class Loader(object):

    def load(self, filename):
        """Create an AnnoDoc from a data source"""
        raise NotImplementedError("load method must be implemented in child")
