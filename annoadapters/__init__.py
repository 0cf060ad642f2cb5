#!/usr/bin/env python
"""Annotators that wrap external NLP tools and corpus file formats."""
from .version import __version__  # noqa: F401
