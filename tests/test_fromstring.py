from decimal import Decimal

import pytest

from termcli.fromstring import (
    BadConversion,
    IntType,
    from_string,
    parse_bool,
    parse_char,
    parse_float,
    parse_integer,
)

HUGE = "99999999999999999999999999999999999999999"

SIGNED = [IntType.SIGNED_CHAR, IntType.SHORT, IntType.INT, IntType.LONG, IntType.LONG_LONG]
UNSIGNED = [
    IntType.UNSIGNED_CHAR,
    IntType.UNSIGNED_SHORT,
    IntType.UNSIGNED_INT,
    IntType.UNSIGNED_LONG,
    IntType.UNSIGNED_LONG_LONG,
]


def test_char_cases():
    assert parse_char("a") == "a"
    assert parse_char(" ") == " "
    with pytest.raises(BadConversion):
        parse_char("aa")
    with pytest.raises(BadConversion):
        parse_char("")


@pytest.mark.parametrize("int_type", SIGNED)
def test_signed_cases(int_type):
    assert parse_integer("42", int_type) == 42
    assert parse_integer("-42", int_type) == -42
    assert parse_integer("+42", int_type) == 42
    with pytest.raises(BadConversion):
        parse_integer("a", int_type)
    with pytest.raises(BadConversion):
        parse_integer(HUGE, int_type)


@pytest.mark.parametrize("int_type", UNSIGNED)
def test_unsigned_cases(int_type):
    assert parse_integer("42", int_type) == 42
    assert parse_integer("+42", int_type) == 42
    for bad in ("-42", "a", HUGE):
        with pytest.raises(BadConversion):
            parse_integer(bad, int_type)


@pytest.mark.parametrize("int_type", SIGNED + UNSIGNED)
def test_limits_round_trip(int_type):
    assert parse_integer(str(int_type.max), int_type) == int_type.max
    assert parse_integer(str(int_type.min), int_type) == int_type.min
    with pytest.raises(BadConversion):
        parse_integer(str(int_type.max + 1), int_type)
    with pytest.raises(BadConversion):
        parse_integer(str(int_type.min - 1), int_type)


@pytest.mark.parametrize("bad", ["", "+", "-", " 42", "42 ", "4 2", "+-42", "0x10"])
def test_malformed_integers(bad):
    with pytest.raises(BadConversion):
        parse_integer(bad, IntType.INT)


def test_bool():
    assert parse_bool("true") is True
    assert parse_bool("false") is False
    assert parse_bool("1") is True
    assert parse_bool("0") is False
    for bad in ("2", "-1", "yes", "", "True"):
        with pytest.raises(BadConversion):
            parse_bool(bad)


@pytest.mark.parametrize("bad", ["", " 0.1", "0.1 ", "0. 1", "1_0", "0.1x", "1e999"])
def test_float_rejects(bad):
    with pytest.raises(BadConversion):
        parse_float(bad)


def test_float_exponent_round_trip():
    value = 12345.678e-3
    assert parse_float(repr(value)) == value


def test_from_string_dispatch():
    assert from_string("foo", str) == "foo"
    assert from_string("anything", type(None)) is None
    assert from_string("true", bool) is True
    assert from_string("-42", int) == -42
    assert from_string("0.1", float) == 0.1
    assert from_string("42", IntType.UNSIGNED_CHAR) == 42
    with pytest.raises(BadConversion):
        from_string("-42", IntType.UNSIGNED_CHAR)


def test_from_string_fallback_callable():
    assert from_string("0.1", Decimal) == Decimal("0.1")
    with pytest.raises(BadConversion):
        from_string("a", Decimal)


def test_bad_conversion_is_value_error_with_message():
    with pytest.raises(ValueError, match="bad from_string conversion"):
        parse_integer("a")