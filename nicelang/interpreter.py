"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, comparison and equality operators, string concatenation, global variables and
print statements.

1. Execution Model
Statements are executed in order via `interpret()`. Expressions are evaluated recursively by
`evaluate()`, which pattern-matches on the node class. The left operand of a binary operator is
always evaluated before the right. Chains of binary operators are folded in a loop rather than
by recursion.

2. Environment
A single `Environment` holds every variable. It lives as long as the interpreter, so an
interactive session keeps its bindings from one line to the next.

3. Dynamic Typing
Operands are checked at each operator site. Arithmetic and comparison require numbers, `+`
also accepts two strings, and equality accepts any pair of values. Number arithmetic follows
IEEE-754, so division by zero yields an infinity or NaN rather than an error.

4. Error Handling
Type mismatches and undefined variables raise `NiceRuntimeError`. It is caught only in
`interpret()`, which abandons the remaining statements and hands the error to the
`on_runtime_error` callback.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from typing import Callable, Iterable, Optional

from nicelang.ast_nodes import (
    Assign,
    Binary,
    Expr,
    ExpressionStmt,
    Grouping,
    Literal,
    PrintStmt,
    Stmt,
    Unary,
    Variable,
    VarStmt,
)
from nicelang.environment import Environment
from nicelang.exceptions import NiceRuntimeError
from nicelang.tokens import Token, TokenType
from nicelang.values import Value, is_equal, is_number, is_truthy, stringify


def _divide(lhs: float, rhs: float) -> float:
    """IEEE-754 division; Python raises on a zero divisor instead."""
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


class Interpreter:
    """Tree-walk interpreter for Nice."""

    def __init__(self, on_runtime_error: Optional[Callable[[NiceRuntimeError], None]] = None):
        """
        Initialize the interpreter.

        Parameters:
            on_runtime_error: Called with the error when a runtime error aborts
                `interpret()`. When omitted the error propagates to the caller.
        """
        self.environment = Environment()
        self.on_runtime_error = on_runtime_error

    def interpret(self, statements: Iterable[Stmt]) -> bool:
        """
        Execute a sequence of statements.

        Returns:
            bool: ``True`` if every statement ran, ``False`` if a runtime
            error stopped execution.
        """
        try:
            for stmt in statements:
                self.execute(stmt)
        except NiceRuntimeError as e:
            if self.on_runtime_error is None:
                raise
            self.on_runtime_error(e)
            return False
        return True

    def execute(self, stmt: Stmt) -> None:
        """
        Execute a single statement.
        """
        match stmt:
            case ExpressionStmt(expression):
                self.evaluate(expression)
            case PrintStmt(expression):
                print(stringify(self.evaluate(expression)))
            case VarStmt(name, initializer):
                value = None if initializer is None else self.evaluate(initializer)
                self.environment.define(name.lexeme, value)
            case _:
                raise TypeError(f"Invalid statement node: {stmt!r}")

    def evaluate(self, expr: Expr) -> Value:
        """
        Recursively evaluate an expression node and return its computed value.

        Raises:
            NiceRuntimeError: On an operand type mismatch or an undefined variable.
        """
        match expr:
            case Literal(value):
                return value
            case Grouping(inner):
                return self.evaluate(inner)
            case Variable(name):
                return self.environment.get(name)
            case Assign(name, value_expr):
                value = self.evaluate(value_expr)
                self.environment.assign(name, value)
                return value
            case Unary(operator, right):
                return self._eval_unary(operator, self.evaluate(right))
            case Binary():
                return self._eval_binary_chain(expr)
            case _:
                raise TypeError(f"Invalid expression node: {expr!r}")

    def _eval_binary_chain(self, expr: Binary) -> Value:
        """
        Evaluate a left-nested run of binary nodes with a loop.

        ``a + b + c`` parses as ``(a + b) + c``. The left spine is walked down
        to its first operand, then the right operands are evaluated in source
        order, so long chains do not recurse.
        """
        pending: list[tuple[Token, Expr]] = []
        node: Expr = expr
        while isinstance(node, Binary):
            pending.append((node.operator, node.right))
            node = node.left

        value = self.evaluate(node)
        for operator, right in reversed(pending):
            value = self._eval_binary(operator, value, self.evaluate(right))
        return value

    def _eval_unary(self, operator: Token, operand: Value) -> Value:
        match operator.type:
            case TokenType.NOT:
                return not is_truthy(operand)
            case TokenType.MINUS:
                self._check_number_operand(operator, operand)
                return -operand
        raise NiceRuntimeError(operator, f"Unknown unary operator '{operator.lexeme}'.")

    def _eval_binary(self, operator: Token, lhs: Value, rhs: Value) -> Value:
        match operator.type:
            case TokenType.PLUS:
                if is_number(lhs) and is_number(rhs):
                    return lhs + rhs
                if isinstance(lhs, str) and isinstance(rhs, str):
                    return lhs + rhs
                raise NiceRuntimeError(operator, "Operands must be two numbers or two strings.")
            case TokenType.MINUS:
                self._check_number_operands(operator, lhs, rhs)
                return lhs - rhs
            case TokenType.STAR:
                self._check_number_operands(operator, lhs, rhs)
                return lhs * rhs
            case TokenType.SLASH:
                self._check_number_operands(operator, lhs, rhs)
                return _divide(lhs, rhs)
            # Comparison
            case TokenType.GREATER:
                self._check_number_operands(operator, lhs, rhs)
                return lhs > rhs
            case TokenType.GEQ:
                self._check_number_operands(operator, lhs, rhs)
                return lhs >= rhs
            case TokenType.LESS:
                self._check_number_operands(operator, lhs, rhs)
                return lhs < rhs
            case TokenType.LEQ:
                self._check_number_operands(operator, lhs, rhs)
                return lhs <= rhs
            # Equality
            case TokenType.EQ:
                return is_equal(lhs, rhs)
            case TokenType.NOTEQ:
                return not is_equal(lhs, rhs)
        raise NiceRuntimeError(operator, f"Unknown binary operator '{operator.lexeme}'.")

    @staticmethod
    def _check_number_operand(operator: Token, operand: Value) -> None:
        if not is_number(operand):
            raise NiceRuntimeError(operator, "Operand must be a number.")

    @staticmethod
    def _check_number_operands(operator: Token, lhs: Value, rhs: Value) -> None:
        if not (is_number(lhs) and is_number(rhs)):
            raise NiceRuntimeError(operator, "Operands must be a number.")
