"""AST node definitions for Nice.

Expressions and statements are small immutable dataclasses. The interpreter
and the AST printer dispatch on them with ``match`` class patterns, so each
node lists its fields in ``__match_args__`` order.


File: ast_nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from nicelang.tokens import Token
from nicelang.values import Value


# ---- Expressions ----

@dataclass(frozen=True)
class Literal:
    """A literal value: nil, boolean, number or string."""
    value: Value


@dataclass(frozen=True)
class Grouping:
    """A parenthesised expression."""
    expression: Expr


@dataclass(frozen=True)
class Unary:
    """A prefix operator (``!`` or ``-``) applied to an operand."""
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary:
    """An infix operator applied to two operands."""
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable:
    """A read of a global variable."""
    name: Token


@dataclass(frozen=True)
class Assign:
    """An assignment to an existing variable; yields the assigned value."""
    name: Token
    value: Expr


Expr = Union[Literal, Grouping, Unary, Binary, Variable, Assign]


# ---- Statements ----

@dataclass(frozen=True)
class ExpressionStmt:
    """An expression evaluated for its side effects."""
    expression: Expr


@dataclass(frozen=True)
class PrintStmt:
    """``print <expression>;``"""
    expression: Expr


@dataclass(frozen=True)
class VarStmt:
    """``var <name> (= <initializer>)?;``"""
    name: Token
    initializer: Optional[Expr]


Stmt = Union[ExpressionStmt, PrintStmt, VarStmt]
