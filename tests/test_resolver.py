import pytest

from packformat.directives import Location
from packformat.enum import (
    Version,
    Variant,
    Type,
    Signed,
    Endian,
    Size,
    LengthType,
)
from packformat.exceptions import (
    UnknownDirectiveException,
    UnsupportedDirectiveException,
    LengthTooBigException,
    BangNotAllowedException,
    DoubleEndianException,
)
from packformat.resolver import Resolver, LENGTH_MAX
from packformat.scanner import Span, SpanKind
from packformat.table import TABLES, DirectiveSpec


def resolve(raw, variant=Variant.PACK):
    resolver = Resolver(Version.V3_2_0, variant)
    return resolver.resolve(raw, Span(SpanKind.DIRECTIVE, 0, len(raw)))


def test_defaults():
    directive = resolve(b'C')

    assert directive.raw == b'C'
    assert directive.location == Location(0, 1)
    assert directive.type == Type.INTEGER
    assert directive.signed == Signed.UNSIGNED
    assert directive.endian == Endian.AGNOSTIC
    assert directive.size == Size.SIZE_8
    assert directive.length_type == LengthType.FIXED
    assert directive.length == 1


@pytest.mark.parametrize('raw,signed,endian,size', [
    (b'n', Signed.UNSIGNED, Endian.BIG, Size.SIZE_16),
    (b'V', Signed.UNSIGNED, Endian.LITTLE, Size.SIZE_32),
    (b'q', Signed.SIGNED, Endian.NATIVE, Size.SIZE_64),
    (b'J', Signed.UNSIGNED, Endian.NATIVE, Size.POINTER),
    (b'i', Signed.SIGNED, Endian.NATIVE, Size.INT),
])
def test_integers(raw, signed, endian, size):
    directive = resolve(raw)

    assert directive.type == Type.INTEGER
    assert (directive.signed, directive.endian, directive.size) == (signed, endian, size)


def test_floats_and_strings():
    directive = resolve(b'e')
    assert (directive.type, directive.endian, directive.size) == (Type.FLOAT, Endian.LITTLE, Size.SIZE_32)

    directive = resolve(b'G')
    assert (directive.type, directive.endian, directive.size) == (Type.FLOAT, Endian.BIG, Size.SIZE_64)

    directive = resolve(b'm')
    assert directive.type == Type.STRING_BASE64
    assert directive.signed == Signed.NA
    assert directive.endian == Endian.NA
    assert directive.size == Size.NA


def test_pseudo_directives():
    resolver = Resolver(Version.V3_2_0, Variant.UNPACK)

    space = resolver.resolve(b'C  ', Span(SpanKind.SPACE, 1, 3))
    assert space.type == Type.SPACE
    assert space.raw == b'  '
    assert space.location == Location(1, 3)
    assert space.length_type == LengthType.NA

    comment = resolver.resolve(b'#x', Span(SpanKind.COMMENT, 0, 2))
    assert comment.type == Type.COMMENT
    assert comment.size == Size.NA


@pytest.mark.parametrize('raw,size', [
    (b's!', Size.SHORT),
    (b'S_', Size.SHORT),
    (b'l!', Size.LONG),
    (b'L_', Size.LONG),
    (b'q!', Size.LONG_LONG),
    (b'J!', Size.POINTER),
    (b'i_', Size.INT),
])
def test_bang_selects_native_size(raw, size):
    assert resolve(raw).size == size


@pytest.mark.parametrize('raw', [b'C!', b'n_', b'V!', b'd!', b'a!', b'U_'])
def test_bang_not_allowed(raw):
    with pytest.raises(BangNotAllowedException) as e:
        resolve(raw)

    assert e.value.location == Location(0, len(raw))


def test_endian_modifiers():
    assert resolve(b'S<').endian == Endian.LITTLE
    assert resolve(b'l>').endian == Endian.BIG

    directive = resolve(b'S!>4')
    assert directive.endian == Endian.BIG
    assert directive.size == Size.SHORT
    assert directive.length == 4

    directive = resolve(b'q<_')
    assert directive.endian == Endian.LITTLE
    assert directive.size == Size.LONG_LONG


@pytest.mark.parametrize('raw', [b'S<>', b'S><', b'L<<', b's<!>'])
def test_double_endian(raw):
    with pytest.raises(DoubleEndianException):
        resolve(raw)


@pytest.mark.parametrize('raw', [b'n<', b'V>', b'C<', b'e>', b'a<'])
def test_endian_on_fixed_endianness(raw):
    with pytest.raises(DoubleEndianException):
        resolve(raw)


def test_first_offending_modifier_wins():
    with pytest.raises(BangNotAllowedException):
        resolve(b'n!<')

    with pytest.raises(DoubleEndianException):
        resolve(b'n<!')


def test_counts():
    directive = resolve(b'a12')
    assert directive.length_type == LengthType.FIXED
    assert directive.length == 12

    directive = resolve(b'a*')
    assert directive.length_type == LengthType.MAX
    assert directive.length == 0

    directive = resolve(b'x0')
    assert directive.length_type == LengthType.FIXED
    assert directive.length == 0

    directive = resolve(b'a0000000000000000000000001')
    assert directive.length == 1


def test_length_limit():
    directive = resolve(b'a%d' % LENGTH_MAX)
    assert directive.length == 2 ** 64 - 1

    with pytest.raises(LengthTooBigException) as e:
        resolve(b'a18446744073709551616')

    assert e.value.location == Location(0, 21)

    with pytest.raises(LengthTooBigException):
        resolve(b'a' + b'9' * 5000)


def test_move_default_length_depends_on_variant():
    directive = resolve(b'@', variant=Variant.UNPACK)
    assert (directive.length_type, directive.length) == (LengthType.FIXED, 0)

    directive = resolve(b'@', variant=Variant.PACK)
    assert (directive.length_type, directive.length) == (LengthType.FIXED, 1)

    for variant in Variant:
        directive = resolve(b'@*', variant=variant)
        assert directive.length_type == LengthType.MAX


def test_unknown_directive():
    with pytest.raises(UnknownDirectiveException) as e:
        resolve(b'y3')

    assert e.value.location == Location(0, 2)
    assert 'y' in e.value.message


@pytest.mark.parametrize('variant', list(Variant))
def test_unsupported_directive(variant):
    with pytest.raises(UnsupportedDirectiveException):
        resolve(b'%', variant=variant)


def test_variant_restricted_entry():
    table = dict(TABLES[Version.V3_2_0])
    table[ord('k')] = DirectiveSpec(Type.STRING_FIXED, variants=(Variant.UNPACK,))

    resolver = Resolver(Version.V3_2_0, Variant.UNPACK, table=table)
    assert resolver.resolve(b'k', Span(SpanKind.DIRECTIVE, 0, 1)).type == Type.STRING_FIXED

    resolver = Resolver(Version.V3_2_0, Variant.PACK, table=table)
    with pytest.raises(UnsupportedDirectiveException):
        resolver.resolve(b'k', Span(SpanKind.DIRECTIVE, 0, 1))


def test_relative_default_length():
    table = {
        ord('r'): DirectiveSpec(
            Type.STRING_NULL_PADDED,
            default_length={Variant.UNPACK: (LengthType.RELATIVE, 0)}),
    }
    resolver = Resolver(Version.V3_2_0, Variant.UNPACK, table=table)

    directive = resolver.resolve(b'r', Span(SpanKind.DIRECTIVE, 0, 1))
    assert directive.length_type == LengthType.RELATIVE

    directive = resolver.resolve(b'r7', Span(SpanKind.DIRECTIVE, 0, 2))
    assert (directive.length_type, directive.length) == (LengthType.FIXED, 7)

    with pytest.raises(UnknownDirectiveException):
        resolver.resolve(b'C', Span(SpanKind.DIRECTIVE, 0, 1))
