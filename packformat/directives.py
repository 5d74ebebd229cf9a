"""
A Directive is the resolved unit of a template: it describes how a single field of
binary data is packed or unpacked.
"""
from .enum import Type, Signed, Endian, Size, LengthType


class Location(object):
    '''Half-open range of byte offsets into the template.'''

    __slots__ = ('start', 'end')

    def __init__(self, start, end):
        self.start = start
        self.end = end

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.start}, {self.end})>'

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __hash__(self):
        return hash((self.start, self.end))

    def __len__(self):
        return self.end - self.start


SIGNED_DESCRIPTIONS = {
    Signed.UNSIGNED: 'unsigned',
    Signed.SIGNED:   'signed',
    Signed.NA:       'n/a',
}

ENDIAN_DESCRIPTIONS = {
    Endian.AGNOSTIC: 'agnostic',
    Endian.LITTLE:   'little-endian (VAX)',
    Endian.BIG:      'big-endian (network)',
    Endian.NATIVE:   'native-endian',
    Endian.NA:       'n/a',
}

SIZE_DESCRIPTIONS = {
    Size.SHORT:     'short',
    Size.INT:       'int-width',
    Size.LONG:      'long',
    Size.LONG_LONG: 'long long',
    Size.SIZE_8:    '8-bit',
    Size.SIZE_16:   '16-bit',
    Size.SIZE_32:   '32-bit',
    Size.SIZE_64:   '64-bit',
    Size.POINTER:   'pointer-width',
    Size.NA:        'n/a',
}

TYPE_DESCRIPTIONS = {
    Type.SPACE:                  'whitespace',
    Type.COMMENT:                'comment',
    Type.UTF8:                   'UTF-8 character',
    Type.BER:                    'BER-compressed integer',
    Type.STRING_SPACE_PADDED:    'arbitrary binary string (space padded)',
    Type.STRING_NULL_PADDED:     'arbitrary binary string (null padded, count is width)',
    Type.STRING_NULL_TERMINATED: 'arbitrary binary string (null padded, count is width), except that null is added with *',
    Type.STRING_MSB:             'bit string (MSB first)',
    Type.STRING_LSB:             'bit string (LSB first)',
    Type.STRING_HEX_HIGH:        'hex string (high nibble first)',
    Type.STRING_HEX_LOW:         'hex string (low nibble first)',
    Type.STRING_UU:              'UU-encoded string',
    Type.STRING_MIME:            'quoted printable, MIME encoding',
    Type.STRING_BASE64:          'base64 encoded string',
    Type.STRING_FIXED:           'pointer to a structure (fixed-length string)',
    Type.STRING_POINTER:         'pointer to a null-terminated string',
    Type.MOVE:                   'move to absolute position',
    Type.BACK:                   'back up a byte',
    Type.NULL:                   'null byte',
}


class Directive(object):
    """One resolved directive of a template.

    Besides the five-tuple (type, signed, endian, size, length_type) it keeps the
    raw bytes and the location of the span it was read from, so that a caller
    can point back at the template. The length is meaningful only when
    length_type is LengthType.FIXED.
    """

    __slots__ = (
        'version', 'variant', 'raw', 'location',
        'type', 'signed', 'endian', 'size', 'length_type', 'length',
    )

    def __init__(self, version, variant, raw, location, type,
                 signed=Signed.NA, endian=Endian.NA, size=Size.NA,
                 length_type=LengthType.NA, length=0):
        self.version = version
        self.variant = variant
        self.raw = raw
        self.location = location
        self.type = type
        self.signed = signed
        self.endian = endian
        self.size = size
        self.length_type = length_type
        self.length = length

    def _astuple(self):
        return tuple(getattr(self, _) for _ in self.__slots__)

    def __eq__(self, other):
        if not isinstance(other, Directive):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __hash__(self):
        return hash(self._astuple())

    def __repr__(self):
        return '<%s(%r, %s, %s, %s, %s, %s, %d)>' % (
            self.__class__.__name__,
            self.raw,
            self.type.name,
            self.signed.name,
            self.endian.name,
            self.size.name,
            self.length_type.name,
            self.length,
        )

    @property
    def source(self) -> str:
        return self.raw.decode('ascii', errors='backslashreplace')

    def _describe_count(self, base):
        if self.length_type == LengthType.FIXED and self.length > 1:
            return f'{base}, x{self.length}'
        if self.length_type == LengthType.MAX:
            return f'{base}, as many as possible'
        return base

    def describe(self) -> str:
        '''Human readable explanation of what the directive does.'''
        if self.type == Type.INTEGER:
            signed = SIGNED_DESCRIPTIONS[self.signed]
            size = SIZE_DESCRIPTIONS[self.size]
            if self.size == Size.SIZE_8:
                base = f'{signed} {size} integer'
            else:
                base = f'{signed} {size} {ENDIAN_DESCRIPTIONS[self.endian]} integer'
            return self._describe_count(base)

        if self.type == Type.FLOAT:
            return f'{SIZE_DESCRIPTIONS[self.size]} {ENDIAN_DESCRIPTIONS[self.endian]} float'

        return TYPE_DESCRIPTIONS[self.type]
