"""
Split a template into the raw spans of its directives.

The scanner only delimits spans, the legality of letters and modifiers is
checked by the resolver.
"""
import logging
from enum import Enum, auto


logger = logging.getLogger(__name__)


WHITESPACE = frozenset(b' \t\n\v\f\r')
MODIFIERS = frozenset(b'!_<>')
DIGITS = frozenset(b'0123456789')
COMMENT = ord('#')
NEWLINE = ord('\n')
STAR = ord('*')


class SpanKind(Enum):
    SPACE     = auto()
    COMMENT   = auto()
    DIRECTIVE = auto()


class Span(object):
    '''A raw span of the template: [start, end) byte offsets.'''

    __slots__ = ('kind', 'start', 'end')

    def __init__(self, kind, start, end):
        self.kind = kind
        self.start = start
        self.end = end

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.kind.name}, {self.start}, {self.end})>'

    def __eq__(self, other):
        if not isinstance(other, Span):
            return NotImplemented
        return (self.kind, self.start, self.end) == (other.kind, other.start, other.end)

    def __len__(self):
        return self.end - self.start


class Scanner(object):
    """Walk the template from left to right, one span at a time.

    For a directive the span is made of the letter, then any run of modifiers
    ('!', '_', '<', '>') and at last an optional count, that is either a single
    '*' or a run of decimal digits.
    """

    def __init__(self, source: bytes):
        self.source = source
        self.position = 0

    def __iter__(self):
        span = self.next_span()
        while span is not None:
            yield span
            span = self.next_span()

    def _skip(self, accepted):
        end = len(self.source)
        while self.position < end and self.source[self.position] in accepted:
            self.position += 1

    def _skip_until(self, terminator):
        end = len(self.source)
        while self.position < end and self.source[self.position] != terminator:
            self.position += 1

    def next_span(self):
        '''Return the next Span and advance past it, None at the end of the template.'''
        start = self.position
        if start >= len(self.source):
            return None

        head = self.source[start]
        self.position += 1

        if head in WHITESPACE:
            kind = SpanKind.SPACE
            self._skip(WHITESPACE)
        elif head == COMMENT:
            kind = SpanKind.COMMENT
            self._skip_until(NEWLINE)
        else:
            kind = SpanKind.DIRECTIVE
            self._skip(MODIFIERS)
            if self.position < len(self.source) and self.source[self.position] == STAR:
                self.position += 1
            else:
                self._skip(DIGITS)

        span = Span(kind, start, self.position)
        logger.debug('scanned %r', span)

        return span
