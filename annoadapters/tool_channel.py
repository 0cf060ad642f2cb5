#!/usr/bin/env python
"""
Line oriented request/response channel to an external tagger.

A request is one token per line followed by a blank line. The response is
one line per token holding the tag in a separator delimited field, followed
by a blank line.
"""
import subprocess
import logging
from .errors import ProtocolError, ResourceError

logger = logging.getLogger(__name__)


class RequestWriter(object):
    """
    >>> import io
    >>> stream = io.StringIO()
    >>> RequestWriter(stream).send(['Hi', 'Joe', '.'])
    >>> stream.getvalue()
    'Hi\\nJoe\\n.\\n\\n'
    """
    def __init__(self, stream):
        self.stream = stream
        self.last_sent = None

    def send(self, forms):
        for form in forms:
            if not form or '\n' in form or '\r' in form:
                raise ProtocolError(
                    "Token [{0}] can not be sent on a single line".format(form))
        self.last_sent = ' '.join(forms)
        try:
            self.stream.write(''.join(form + '\n' for form in forms) + '\n')
            # The tool has to see the whole sentence before it answers.
            self.stream.flush()
        except (OSError, UnicodeError) as e:
            raise ProtocolError("Unable to write to the tool: {0}".format(e))


class ResponseReader(object):
    """
    >>> import io
    >>> reader = ResponseReader(io.StringIO('Hi\\tUH\\nJoe\\tNNP\\n\\n'))
    >>> reader.receive(2)
    ['UH', 'NNP']
    """
    def __init__(self, stream, separator='\t', field=1):
        self.stream = stream
        self.separator = separator
        self.field = field
        self.last_received = None

    def _readline(self):
        try:
            line = self.stream.readline()
        except (OSError, UnicodeError) as e:
            raise ProtocolError("Unable to read from the tool: {0}".format(e))
        if line == '':
            return None
        line = line.rstrip('\r\n')
        if line.strip():
            self.last_received = line
        return line

    def receive(self, count):
        """
        Read the tags for a sentence of count tokens and the blank line that
        ends it.
        """
        tags = []
        while len(tags) < count:
            line = self._readline()
            if line is None:
                raise ProtocolError(
                    "Output ended after {0} of {1} tags".format(len(tags), count))
            if not line.strip():
                raise ProtocolError(
                    "Got {0} tag lines for {1} tokens".format(len(tags), count))
            fields = line.split(self.separator)
            if len(fields) <= self.field or not fields[self.field].strip():
                raise ProtocolError("Missing tag field in line [{0}]".format(line))
            tags.append(fields[self.field].strip())
        terminator = self._readline()
        if terminator is None:
            raise ProtocolError("Output ended before the end of the sentence")
        if terminator.strip():
            raise ProtocolError(
                "Got more than {0} tag lines, next line is [{1}]".format(count, terminator))
        return tags


class ToolProcess(object):
    """
    Owns an external tool process and the pipes to it. The process is
    terminated by close(), which is safe to call more than once.
    """
    def __init__(self, argv, encoding='utf8', separator='\t', field=1,
                 grace_period=5):
        self.argv = list(argv)
        self.grace_period = grace_period
        try:
            self.process = subprocess.Popen(
                self.argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                encoding=encoding)
        except OSError as e:
            raise ResourceError(
                "Unable to start [{0}]: {1}".format(' '.join(self.argv), e))
        logger.info('started %s (pid %s)' % (self.argv[0], self.process.pid))
        self.writer = RequestWriter(self.process.stdin)
        self.reader = ResponseReader(self.process.stdout, separator, field)

    def request(self, forms):
        self.writer.send(forms)
        return self.reader.receive(len(forms))

    @property
    def running(self):
        return self.process is not None and self.process.poll() is None

    def close(self):
        if self.process is None:
            return
        process = self.process
        self.process = None
        for stream in (process.stdin, process.stdout):
            try:
                stream.close()
            except OSError as e:
                logger.debug('error closing pipe to %s: %s' % (self.argv[0], e))
        if process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=self.grace_period)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
        logger.info('stopped %s (pid %s)' % (self.argv[0], process.pid))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
