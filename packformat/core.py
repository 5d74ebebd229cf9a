"""
Core module: the decoding of a whole template.

The Decoder drives the scanner and the resolver over the template and collects
the directives; the first error aborts the decoding, so the caller receives
either a complete Format or exactly one exception carrying the location of the
offending span.
"""
import logging
import os
from typing import List

from .directives import Directive
from .encoding import thread_encoding
from .enum import Version, Variant, Encoding, DecodePhase, Type
from .exceptions import PackFormatException
from .resolver import Resolver
from .scanner import Scanner
from .streams import Stream


logger = logging.getLogger(__name__)


class Format(object):
    '''The ordered directives of a template and the encoding of its output.'''

    def __init__(self, directives: List[Directive], encoding: Encoding):
        self.directives = directives
        self.encoding = encoding

    def __repr__(self):
        return '<%s(%s, %s)>' % (
            self.__class__.__name__,
            ','.join(repr(_) for _ in self.directives),
            self.encoding.name,
        )

    def __eq__(self, other):
        if not isinstance(other, Format):
            return NotImplemented
        return (self.directives, self.encoding) == (other.directives, other.encoding)

    def __iter__(self):
        return iter(self.directives)

    def __len__(self):
        return len(self.directives)

    def __getitem__(self, item):
        return self.directives[item]

    def describe(self) -> str:
        sources = []
        for directive in self.directives:
            source = directive.source
            if directive.type == Type.SPACE:
                source = repr(source)
            sources.append(source)

        width = max((len(_) for _ in sources), default=0)

        lines = ['Directives:']
        for source, directive in zip(sources, self.directives):
            lines.append(f'  {source.ljust(width)}  {directive.describe()}')
        lines.append('Encoding:')
        lines.append(f'  {self.encoding}')

        return '\n'.join(lines)


def _coerce(enum_cls, value):
    '''Accept both the enum members and their values, anything else is a usage error.'''
    if isinstance(value, enum_cls):
        return value

    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f'invalid {enum_cls.__name__.lower()} {value!r}') from None


def _as_bytes(format) -> bytes:
    if isinstance(format, str):
        return format.encode('utf-8')
    if isinstance(format, (bytes, bytearray, memoryview)):
        return bytes(format)

    raise TypeError('\'%s\' is the wrong kind of template' % format.__class__.__name__)


class Decoder(object):
    """Decode a single template.

    The instance starts in the SCANNING phase and ends either in SUCCESS or in
    FAILED: it's not reusable.
    """

    def __init__(self, version, variant, format, table=None):
        self.version = _coerce(Version, version)
        self.variant = _coerce(Variant, variant)
        self.source = _as_bytes(format)
        self.resolver = Resolver(self.version, self.variant, table=table)
        self.directives: List[Directive] = []
        self.encoding = Encoding.UNSPECIFIED
        self.error = None
        self._phase = DecodePhase.SCANNING

    @property
    def phase(self):
        return self._phase

    def decode(self) -> Format:
        if self._phase != DecodePhase.SCANNING:
            raise RuntimeError(f'decoder already in phase {self._phase.name}')

        logger.debug('decoding %r (%s, %s)', self.source, self.version.value, self.variant.value)

        for span in Scanner(self.source):
            try:
                directive = self.resolver.resolve(self.source, span)
            except PackFormatException as e:
                self._phase = DecodePhase.FAILED
                self.error = e
                logger.debug('failed at %r: %s', span, e)
                raise

            encoding = thread_encoding(self.encoding, directive.type)
            if encoding != self.encoding:
                logger.debug('encoding changed from %s to %s', self.encoding, encoding)
                self.encoding = encoding

            self.directives.append(directive)

        self._phase = DecodePhase.SUCCESS

        return Format(self.directives, self.encoding)


def parse(version, variant, format, table=None) -> Format:
    '''Decode the template passed as format.

    version and variant can be the enum members or their values (like 'v3_2_0'
    and 'unpack'): a wrong one raises ValueError before the scanning begins.'''
    return Decoder(version, variant, format, table=table).decode()


def parse_file(version, variant, path, table=None) -> Format:
    '''Like parse() but the template is read from the file at path.'''
    # validate the arguments before touching the filesystem
    version = _coerce(Version, version)
    variant = _coerce(Variant, variant)
    # bytes paths must not be taken for the template itself
    path = os.fsdecode(os.fspath(path))

    with Stream(path) as buffer:
        return parse(version, variant, buffer, table=table)
