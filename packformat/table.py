'''
Grammar of the directive language, one table per supported version.

Each table maps the letter (as a byte value) of a directive to a DirectiveSpec that
describes its defaults and which modifiers it accepts. The tables are built at
import time and never modified afterwards.
'''
from .enum import (
    Version,
    Variant,
    Type,
    Signed,
    Endian,
    Size,
    LengthType,
)


BOTH_VARIANTS = frozenset(Variant)


class DirectiveSpec(object):
    """Description of a single directive letter.

    bang_size is the size selected by the '!' (or '_') modifier: None means that
    the modifier is not accepted. The endianness modifiers '<' and '>' are
    accepted only when endian_modifiers is True, otherwise the endianness of the
    directive is already fixed.
    """

    __slots__ = (
        'type', 'signed', 'endian', 'size', 'bang_size',
        'endian_modifiers', 'variants', 'default_length',
    )

    def __init__(self, type, signed=Signed.NA, endian=Endian.NA, size=Size.NA, bang_size=None,
                 endian_modifiers=False, variants=BOTH_VARIANTS, default_length=None):
        self.type = type
        self.signed = signed
        self.endian = endian
        self.size = size
        self.bang_size = bang_size
        self.endian_modifiers = endian_modifiers
        self.variants = frozenset(variants)
        self.default_length = default_length or {}

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.type.name})>'

    def get_default_length(self, variant):
        '''Length type and length used when the directive has no count.'''
        return self.default_length.get(variant, (LengthType.FIXED, 1))


def _integer(signed, size, bang_size=None, endian=Endian.NATIVE):
    return DirectiveSpec(
        Type.INTEGER,
        signed=signed,
        endian=endian,
        size=size,
        bang_size=bang_size,
        endian_modifiers=endian == Endian.NATIVE,
    )


def _float(endian, size):
    return DirectiveSpec(Type.FLOAT, endian=endian, size=size)


def _build(entries):
    return {ord(letter): spec for letter, spec in entries.items()}


V3_2_0 = _build({
    # integers
    'C': _integer(Signed.UNSIGNED, Size.SIZE_8, endian=Endian.AGNOSTIC),
    'c': _integer(Signed.SIGNED, Size.SIZE_8, endian=Endian.AGNOSTIC),
    'S': _integer(Signed.UNSIGNED, Size.SIZE_16, bang_size=Size.SHORT),
    's': _integer(Signed.SIGNED, Size.SIZE_16, bang_size=Size.SHORT),
    'L': _integer(Signed.UNSIGNED, Size.SIZE_32, bang_size=Size.LONG),
    'l': _integer(Signed.SIGNED, Size.SIZE_32, bang_size=Size.LONG),
    'Q': _integer(Signed.UNSIGNED, Size.SIZE_64, bang_size=Size.LONG_LONG),
    'q': _integer(Signed.SIGNED, Size.SIZE_64, bang_size=Size.LONG_LONG),
    'J': _integer(Signed.UNSIGNED, Size.POINTER, bang_size=Size.POINTER),
    'j': _integer(Signed.SIGNED, Size.POINTER, bang_size=Size.POINTER),
    'I': _integer(Signed.UNSIGNED, Size.INT, bang_size=Size.INT),
    'i': _integer(Signed.SIGNED, Size.INT, bang_size=Size.INT),
    'n': _integer(Signed.UNSIGNED, Size.SIZE_16, endian=Endian.BIG),
    'N': _integer(Signed.UNSIGNED, Size.SIZE_32, endian=Endian.BIG),
    'v': _integer(Signed.UNSIGNED, Size.SIZE_16, endian=Endian.LITTLE),
    'V': _integer(Signed.UNSIGNED, Size.SIZE_32, endian=Endian.LITTLE),
    'U': DirectiveSpec(Type.UTF8),
    'w': DirectiveSpec(Type.BER),

    # floats
    'D': _float(Endian.NATIVE, Size.SIZE_64),
    'd': _float(Endian.NATIVE, Size.SIZE_64),
    'F': _float(Endian.NATIVE, Size.SIZE_32),
    'f': _float(Endian.NATIVE, Size.SIZE_32),
    'E': _float(Endian.LITTLE, Size.SIZE_64),
    'e': _float(Endian.LITTLE, Size.SIZE_32),
    'G': _float(Endian.BIG, Size.SIZE_64),
    'g': _float(Endian.BIG, Size.SIZE_32),

    # strings
    'A': DirectiveSpec(Type.STRING_SPACE_PADDED),
    'a': DirectiveSpec(Type.STRING_NULL_PADDED),
    'Z': DirectiveSpec(Type.STRING_NULL_TERMINATED),
    'B': DirectiveSpec(Type.STRING_MSB),
    'b': DirectiveSpec(Type.STRING_LSB),
    'H': DirectiveSpec(Type.STRING_HEX_HIGH),
    'h': DirectiveSpec(Type.STRING_HEX_LOW),
    'u': DirectiveSpec(Type.STRING_UU),
    'M': DirectiveSpec(Type.STRING_MIME),
    'm': DirectiveSpec(Type.STRING_BASE64),
    'P': DirectiveSpec(Type.STRING_FIXED),
    'p': DirectiveSpec(Type.STRING_POINTER),

    # positioning
    '@': DirectiveSpec(Type.MOVE, default_length={Variant.UNPACK: (LengthType.FIXED, 0)}),
    'X': DirectiveSpec(Type.BACK),
    'x': DirectiveSpec(Type.NULL),

    # reserved letter that no variant implements
    '%': DirectiveSpec(Type.NULL, variants=()),
})


TABLES = {
    Version.V3_2_0: V3_2_0,
}
