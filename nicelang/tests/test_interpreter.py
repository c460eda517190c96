"""Tests for expression and statement evaluation."""

import pytest

from nicelang.exceptions import NiceRuntimeError, UndefinedVariableException
from nicelang.interpreter import Interpreter
from nicelang.tests.utils import execute_source, parse_source
from nicelang.values import stringify


def output_of(source: str, capsys) -> list[str]:
    execute_source(source)
    return capsys.readouterr().out.splitlines()


@pytest.mark.parametrize("source, expected", [
    ("print 1 + 2 * 3;", "7"),
    ("print (1 + 2) * 3;", "9"),
    ("print 10 - 4 - 3;", "3"),
    ("print 7 / 2;", "3.5"),
    ("print -3;", "-3"),
    ("print --3;", "3"),
    ("print 0.1 + 0.2;", "0.30000000000000004"),
    ("print 2.5 * 4;", "10"),
])
def test_arithmetic(source, expected, capsys):
    assert output_of(source, capsys) == [expected]


@pytest.mark.parametrize("source, expected", [
    ("print 1 / 0;", "Infinity"),
    ("print -1 / 0;", "-Infinity"),
    ("print 0 / 0;", "NaN"),
    ("print 1 / -0;", "-Infinity"),
])
def test_division_by_zero_follows_ieee(source, expected, capsys):
    assert output_of(source, capsys) == [expected]


@pytest.mark.parametrize("source, expected", [
    ("print 1 < 2;", "true"),
    ("print 2 <= 2;", "true"),
    ("print 1 > 2;", "false"),
    ("print 3 >= 4;", "false"),
    ("print 0 / 0 < 1;", "false"),
])
def test_comparison(source, expected, capsys):
    assert output_of(source, capsys) == [expected]


@pytest.mark.parametrize("source, expected", [
    ("print 1 == 1;", "true"),
    ("print 1 != 2;", "true"),
    ('print "a" == "a";', "true"),
    ('print "a" == "b";', "false"),
    ("print nil == nil;", "true"),
    ("print nil == false;", "false"),
    ("print true == 1;", "false"),
    ('print "1" == 1;', "false"),
    ("print 0 / 0 == 0 / 0;", "true"),
    ("print true != false;", "true"),
])
def test_equality_never_raises(source, expected, capsys):
    assert output_of(source, capsys) == [expected]


@pytest.mark.parametrize("source, expected", [
    ("print !nil;", "true"),
    ("print !false;", "true"),
    ("print !true;", "false"),
    ("print !0;", "false"),
    ('print !"";', "false"),
    ("print !(0 / 0);", "false"),
])
def test_logical_not_uses_truthiness(source, expected, capsys):
    assert output_of(source, capsys) == [expected]


def test_string_concatenation(capsys):
    assert output_of('print "hi" + " " + "there";', capsys) == ["hi there"]


def test_print_values(capsys):
    assert output_of('print nil; print true; print "x"; print 1.25;', capsys) == [
        "nil", "true", "x", "1.25",
    ]


def test_variables_and_reassignment(capsys):
    assert output_of("var x = 10; x = x - 4; print x;", capsys) == ["6"]


def test_uninitialised_variable_is_nil(capsys):
    assert output_of("var a; print a;", capsys) == ["nil"]


def test_redeclaration_overwrites(capsys):
    assert output_of('var a = 1; var a = "two"; print a;', capsys) == ["two"]


def test_chained_assignment_binds_both():
    interpreter = execute_source("var a; var b; a = b = 3;")
    assert interpreter.environment.values == {"a": 3.0, "b": 3.0}


def test_assignment_yields_value(capsys):
    assert output_of("var a; print a = 5;", capsys) == ["5"]


def test_undefined_variable_read():
    with pytest.raises(UndefinedVariableException) as exc:
        execute_source("print y;")
    assert exc.value.message == "Undefined variable 'y'."
    assert exc.value.line == 1


def test_assignment_to_undefined_variable_uses_lexeme():
    with pytest.raises(UndefinedVariableException) as exc:
        execute_source("\nz = 1;")
    assert str(exc.value) == "Undefined variable 'z'."
    assert exc.value.line == 2


@pytest.mark.parametrize("source, message", [
    ('print 1 + "a";', "Operands must be two numbers or two strings."),
    ('print nil + nil;', "Operands must be two numbers or two strings."),
    ('print -"a";', "Operand must be a number."),
    ('print -nil;', "Operand must be a number."),
    ('print "a" - "b";', "Operands must be a number."),
    ('print 1 * true;', "Operands must be a number."),
    ('print nil / 2;', "Operands must be a number."),
    ('print "a" < "b";', "Operands must be a number."),
    ('print 1 >= nil;', "Operands must be a number."),
])
def test_type_errors(source, message):
    with pytest.raises(NiceRuntimeError) as exc:
        execute_source(source)
    assert exc.value.message == message


def test_error_line_is_the_operator_line():
    with pytest.raises(NiceRuntimeError) as exc:
        execute_source('print 1\n+\n"a";')
    assert exc.value.line == 2


def test_left_operand_is_evaluated_first():
    with pytest.raises(UndefinedVariableException) as exc:
        execute_source("print first + second;")
    assert exc.value.varname == "first"


def test_runtime_error_stops_remaining_statements(capsys):
    statements, _ = parse_source('print 1; print -"x"; print 2;')
    errors = []
    interpreter = Interpreter(on_runtime_error=errors.append)
    assert interpreter.interpret(statements) is False
    assert capsys.readouterr().out.splitlines() == ["1"]
    assert [e.message for e in errors] == ["Operand must be a number."]


def test_environment_persists_between_interpret_calls(capsys):
    interpreter = Interpreter()
    first, _ = parse_source("var count = 1;")
    second, _ = parse_source("count = count + 1; print count;")
    assert interpreter.interpret(first)
    assert interpreter.interpret(second)
    assert capsys.readouterr().out.splitlines() == ["2"]


def test_only_values_are_stored():
    interpreter = execute_source('var n = 1; var s = "s"; var b = true; var z;')
    for value in interpreter.environment.values.values():
        assert value is None or isinstance(value, (bool, float, str))


@pytest.mark.parametrize("a, b, c", [(1, 2, 3), (2.5, -4, 0.5), (1e10, 3, 7)])
def test_precedence_law(a, b, c, capsys):
    execute_source(f"print {a} + {b} * {c}; print ({a} + {b}) * {c};")
    assert capsys.readouterr().out.splitlines() == [
        stringify(float(a) + float(b) * float(c)),
        stringify((float(a) + float(b)) * float(c)),
    ]


def test_negative_zero_prints_with_sign(capsys):
    assert output_of("print -0;", capsys) == ["-0"]


def test_deeply_nested_groups_evaluate(capsys):
    depth = 100
    assert output_of("print " + "(" * depth + "1 + 2" + ")" * depth + ";", capsys) == ["3"]


def test_long_addition_chain_evaluates(capsys):
    assert output_of("print " + " + ".join(["1"] * 2000) + ";", capsys) == ["2000"]


def test_long_chain_evaluates_operands_left_to_right(capsys):
    source = 'var s = ""; print ' + " + ".join(['(s = s + "x")'] * 500) + ";"
    (line,) = output_of(source, capsys)
    assert line == "".join("x" * n for n in range(1, 501))


@pytest.mark.parametrize("source, expected", [
    ("print 10000000;", "1.0E7"),
    ("print 9999999;", "9999999"),
    ("print 1000000 * 1000000 * 1000000 * 1000;", "1.0E21"),
    ("print 1 / 100000;", "1.0E-5"),
    ("print 0.001;", "0.001"),
    ("print 123456789.5;", "1.234567895E8"),
])
def test_large_and_small_numbers_use_exponent_form(source, expected, capsys):
    assert output_of(source, capsys) == [expected]
