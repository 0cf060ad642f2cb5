import os
import io
from setuptools import setup

root = os.path.dirname(__file__)
with open(os.path.join(root, 'annoadapters', 'version.py')) as f:
    exec(f.read())

with io.open(os.path.join(root, 'README.rst'), encoding='utf8') as f:
    readme = f.read()

setup(
    name='AnnoAdapters',
    version=__version__,
    packages=['annoadapters'],
    description='Annotators that wrap external taggers, segmenters and corpus readers.',
    long_description=readme,
    keywords='nlp annotation pos tagging segmentation named entities '
        'hunpos udpipe conll brat iob offset alignment',
    install_requires=[
        'spacy>=3.0.0'],
    extras_require={
        'udpipe': ['ufal.udpipe>=1.2.0'],
    },
    python_requires='>=3.6',
    classifiers=[
        'Topic :: Text Processing',
        'Topic :: Text Processing :: Linguistic',
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: Apache Software License']
)
