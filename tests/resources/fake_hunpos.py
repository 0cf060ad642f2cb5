#!/usr/bin/env python
"""
Stand-in for hunpos-tag used by the tests. It speaks the hunpos protocol:
capitalized tokens are tagged NNP, punctuation ".", anything else NN.

--drop-last leaves the last tag of the second sentence out of the response.
"""
import sys


def tag(form):
    if form in ('.', ',', '!', '?'):
        return '.'
    elif form[:1].isupper():
        return 'NNP'
    return 'NN'


def main(argv):
    drop_last = '--drop-last' in argv
    sentence = []
    sentence_count = 0
    while True:
        line = sys.stdin.readline()
        if line == '':
            break
        form = line.rstrip('\n')
        if form:
            sentence.append(form)
            continue
        sentence_count += 1
        tagged = [(form, tag(form)) for form in sentence]
        if drop_last and sentence_count == 2:
            tagged = tagged[:-1]
        for form, pos in tagged:
            sys.stdout.write(form + '\t' + pos + '\n')
        sys.stdout.write('\n')
        sys.stdout.flush()
        sentence = []


if __name__ == '__main__':
    main(sys.argv[1:])
