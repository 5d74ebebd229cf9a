"""
Turn the raw spans produced by the scanner into Directive instances.
"""
import logging

from .directives import Directive, Location
from .enum import Type, Endian, LengthType
from .exceptions import (
    UnknownDirectiveException,
    UnsupportedDirectiveException,
    LengthTooBigException,
    BangNotAllowedException,
    DoubleEndianException,
)
from .scanner import SpanKind, DIGITS, STAR
from .table import TABLES


logger = logging.getLogger(__name__)


LENGTH_MAX = 2 ** 64 - 1

BANGS = frozenset(b'!_')
ENDIAN_MODIFIERS = {
    ord('<'): Endian.LITTLE,
    ord('>'): Endian.BIG,
}

PSEUDO_TYPES = {
    SpanKind.SPACE: Type.SPACE,
    SpanKind.COMMENT: Type.COMMENT,
}


class Resolver(object):
    """Resolve spans with respect to a given version and variant.

    The table can be overridden by passing a mapping between letters (as
    integers) and DirectiveSpec instances; by default the one of the version is
    used.
    """

    def __init__(self, version, variant, table=None):
        self.version = version
        self.variant = variant
        self.table = TABLES[version] if table is None else table

    def resolve(self, source: bytes, span) -> Directive:
        raw = bytes(source[span.start:span.end])
        location = Location(span.start, span.end)

        if span.kind in PSEUDO_TYPES:
            return Directive(self.version, self.variant, raw, location, PSEUDO_TYPES[span.kind])

        letter = raw[0]
        spec = self.table.get(letter)

        if spec is None:
            raise UnknownDirectiveException(f'unknown directive {chr(letter)!r}', location)

        if self.variant not in spec.variants:
            raise UnsupportedDirectiveException(
                f'directive {chr(letter)!r} is not supported by {self.variant.value}', location)

        size = spec.size
        endian = spec.endian
        explicit_endian = False

        position = 1
        while position < len(raw):
            modifier = raw[position]
            if modifier in BANGS:
                if spec.bang_size is None:
                    raise BangNotAllowedException(
                        f'{chr(modifier)!r} not allowed after {chr(letter)!r}', location)
                size = spec.bang_size
            elif modifier in ENDIAN_MODIFIERS:
                if not spec.endian_modifiers:
                    raise DoubleEndianException(
                        f'{chr(modifier)!r} not allowed, {chr(letter)!r} has a fixed endianness', location)
                if explicit_endian:
                    raise DoubleEndianException('only one endianness modifier is allowed', location)
                endian = ENDIAN_MODIFIERS[modifier]
                explicit_endian = True
            else:
                break
            position += 1

        length_type, length = self._resolve_count(spec, raw[position:], location)

        directive = Directive(
            self.version,
            self.variant,
            raw,
            location,
            spec.type,
            signed=spec.signed,
            endian=endian,
            size=size,
            length_type=length_type,
            length=length,
        )
        logger.debug('resolved %r', directive)

        return directive

    def _resolve_count(self, spec, count: bytes, location):
        if not count:
            return spec.get_default_length(self.variant)

        if count[0] == STAR:
            return LengthType.MAX, 0

        if not all(_ in DIGITS for _ in count):
            # the scanner never leaves anything else after the modifiers
            raise ValueError(f'malformed count {count!r}')

        # int() refuses very long digit strings, they are too big anyway
        significant = count.lstrip(b'0') or b'0'
        if len(significant) > len(str(LENGTH_MAX)):
            raise LengthTooBigException('pack length too big', location)

        length = int(significant)
        if length > LENGTH_MAX:
            raise LengthTooBigException('pack length too big', location)

        return LengthType.FIXED, length
