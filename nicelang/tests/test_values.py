"""Tests for value coercions and the environment."""

import math

import pytest

from nicelang.environment import Environment
from nicelang.exceptions import UndefinedVariableException
from nicelang.tokens import Token, TokenType
from nicelang.values import format_number, is_equal, is_truthy, stringify, type_name

SAMPLE_VALUES = [None, True, False, 0.0, -0.0, 1.0, 2.5, math.nan, math.inf, "", "a", "1"]


@pytest.mark.parametrize("value, expected", [
    (None, False),
    (False, False),
    (True, True),
    (0.0, True),
    ("", True),
    (math.nan, True),
    ("false", True),
])
def test_truthiness(value, expected):
    assert is_truthy(value) is expected


@pytest.mark.parametrize("value, expected", [
    (None, "nil"),
    (True, "true"),
    (False, "false"),
    (3.0, "3"),
    (-7.0, "-7"),
    (2.5, "2.5"),
    (1e21, "1.0E21"),
    (1e-5, "1.0E-5"),
    (-1.5e-4, "-1.5E-4"),
    (12345678.0, "1.2345678E7"),
    (1234567.0, "1234567"),
    (math.inf, "Infinity"),
    (-math.inf, "-Infinity"),
    (math.nan, "NaN"),
    ("text", "text"),
])
def test_stringify(value, expected):
    assert stringify(value) == expected


@pytest.mark.parametrize("value, expected", [
    (7.0, "7.0"),
    (-0.0, "-0.0"),
    (0.001, "0.001"),
    (9999999.0, "9999999.0"),
    (1e7, "1.0E7"),
    (0.000999, "9.99E-4"),
    (2.5e300, "2.5E300"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("value", [v for v in SAMPLE_VALUES if v != ""])
def test_stringify_is_never_empty_for_non_empty_values(value):
    assert stringify(value)


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_equality_is_reflexive(value):
    assert is_equal(value, value)


def test_equality_is_symmetric():
    for a in SAMPLE_VALUES:
        for b in SAMPLE_VALUES:
            assert is_equal(a, b) == is_equal(b, a)


def test_equal_values_print_the_same():
    for a in SAMPLE_VALUES:
        for b in SAMPLE_VALUES:
            if is_equal(a, b) and type_name(a) != 'number':
                assert stringify(a) == stringify(b)


@pytest.mark.parametrize("a, b", [
    (True, 1.0),
    (False, 0.0),
    ("1", 1.0),
    (None, False),
    (None, 0.0),
    ("", None),
])
def test_different_kinds_are_unequal(a, b):
    assert not is_equal(a, b)


def test_numbers_compare_by_value():
    assert is_equal(0.1 + 0.2, 0.1 + 0.2)
    assert not is_equal(0.1 + 0.2, 0.3)
    assert is_equal(0.0, -0.0)


def test_type_names():
    assert [type_name(v) for v in (None, True, 1.0, "s")] == ["nil", "boolean", "number", "string"]


def ident(name: str, line: int = 1) -> Token:
    return Token(TokenType.IDENT, name, None, line)


def test_environment_define_and_get():
    env = Environment()
    env.define("a", 1.0)
    assert env.get(ident("a")) == 1.0
    assert "a" in env


def test_environment_define_overwrites():
    env = Environment()
    env.define("a", 1.0)
    env.define("a", "x")
    assert env.get(ident("a")) == "x"


def test_environment_get_undefined():
    with pytest.raises(UndefinedVariableException) as exc:
        Environment().get(ident("missing", line=4))
    assert exc.value.message == "Undefined variable 'missing'."
    assert exc.value.line == 4


def test_environment_assign_requires_existing_binding():
    env = Environment()
    with pytest.raises(UndefinedVariableException) as exc:
        env.assign(ident("b"), 2.0)
    assert exc.value.message == "Undefined variable 'b'."
    assert "b" not in env

    env.define("b", None)
    env.assign(ident("b"), 2.0)
    assert env.get(ident("b")) == 2.0
