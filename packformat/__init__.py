"""
# packformat: decoder for pack/unpack templates.

A template is the short string describing a binary layout that is passed to
pack() and unpack(), like "NnC2a*". Decoding it means obtaining the ordered
list of its directives, each one resolved into

 1. type: integer, float, one of the string kinds, positioning, etc...
 2. signedness
 3. endianness
 4. size
 5. length type and length, i.e. how many times the directive is repeated

together with the text encoding that the packed string would have.

Whitespace and comments (from '#' to the end of the line) are directives on
their own, so that the spans of the directives cover exactly the whole template.

    >>> from packformat import parse
    >>> fmt = parse('v3_2_0', 'pack', 'S<2')
    >>> fmt.directives[0].length
    2

A decoding is in one of the following states

 1. SCANNING
 2. SUCCESS
 3. FAILED

and it fails at the first error found, raising one of the exceptions defined
in packformat.exceptions.
"""
from .core import Format, Decoder, parse, parse_file
from .directives import Directive, Location
from .enum import (
    Version,
    Variant,
    Type,
    Signed,
    Endian,
    Size,
    LengthType,
    Encoding,
    DecodePhase,
)
from .exceptions import (
    PackFormatException,
    UnknownDirectiveException,
    UnsupportedDirectiveException,
    LengthTooBigException,
    BangNotAllowedException,
    DoubleEndianException,
    StreamException,
)
