from enum import Enum, auto


class Version(Enum):
    '''Grammar revision of the directive language'''
    V3_2_0 = 'v3_2_0'


class Variant(Enum):
    '''Whether the template is read for packing or for unpacking'''
    PACK   = 'pack'
    UNPACK = 'unpack'


class Type(Enum):
    SPACE                  = auto()
    COMMENT                = auto()
    INTEGER                = auto()
    UTF8                   = auto()
    BER                    = auto()
    FLOAT                  = auto()
    STRING_SPACE_PADDED    = auto()
    STRING_NULL_PADDED     = auto()
    STRING_NULL_TERMINATED = auto()
    STRING_MSB             = auto()
    STRING_LSB             = auto()
    STRING_HEX_HIGH        = auto()
    STRING_HEX_LOW         = auto()
    STRING_UU              = auto()
    STRING_MIME            = auto()
    STRING_BASE64          = auto()
    STRING_FIXED           = auto()
    STRING_POINTER         = auto()
    MOVE                   = auto()
    BACK                   = auto()
    NULL                   = auto()


class Signed(Enum):
    UNSIGNED = auto()
    SIGNED   = auto()
    NA       = auto()


class Endian(Enum):
    AGNOSTIC = auto()
    LITTLE   = auto()
    BIG      = auto()
    NATIVE   = auto()
    NA       = auto()


class Size(Enum):
    SHORT     = auto()
    INT       = auto()
    LONG      = auto()
    LONG_LONG = auto()
    SIZE_8    = auto()
    SIZE_16   = auto()
    SIZE_32   = auto()
    SIZE_64   = auto()
    POINTER   = auto()
    NA        = auto()


class LengthType(Enum):
    FIXED    = auto()
    MAX      = auto()
    RELATIVE = auto()  # counted from the current position to the end
    NA       = auto()


class Encoding(Enum):
    '''Text encoding of the string produced by a template'''
    UNSPECIFIED = None
    ASCII_8BIT  = 'ASCII-8BIT'
    US_ASCII    = 'US-ASCII'
    UTF_8       = 'UTF-8'

    def __str__(self):
        return self.value or 'unspecified'


class DecodePhase(Enum):
    '''State of a decoding: it starts SCANNING and ends in one of the other two'''
    SCANNING = 0
    SUCCESS  = auto()
    FAILED   = auto()
