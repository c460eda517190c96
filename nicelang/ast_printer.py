"""Readable rendering of Nice ASTs.

Nodes are printed in parenthesised prefix form, e.g. ``1 + 2 * 3`` becomes
``(+ 1 (* 2 3))``. Used for ``NICEDEBUG`` output and language-server hovers.


File: ast_printer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

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
from nicelang.values import stringify


def _parenthesize(name: str, *parts: str) -> str:
    return f"({' '.join((name,) + parts)})"


def format_expr(expr: Expr) -> str:
    """
    Convert an expression back to a readable string.

    Args:
        expr: An expression node.

    Returns:
        str: The expression in prefix form.
    """
    match expr:
        case Literal(value):
            if isinstance(value, str):
                return f'"{value}"'
            return stringify(value)
        case Grouping(inner):
            return _parenthesize('group', format_expr(inner))
        case Unary(operator, right):
            return _parenthesize(operator.lexeme, format_expr(right))
        case Binary():
            return _format_binary_chain(expr)
        case Variable(name):
            return name.lexeme
        case Assign(name, value):
            return _parenthesize('=', name.lexeme, format_expr(value))
        case _:
            return f"<expr {type(expr).__name__}>"


def _format_binary_chain(expr: Binary) -> str:
    # Left-nested chains are folded in a loop, mirroring the interpreter.
    pending = []
    node = expr
    while isinstance(node, Binary):
        pending.append((node.operator, node.right))
        node = node.left

    text = format_expr(node)
    for operator, right in reversed(pending):
        text = _parenthesize(operator.lexeme, text, format_expr(right))
    return text


def format_stmt(stmt: Optional[Stmt]) -> str:
    """
    Convert a statement back to a readable string.

    A ``None`` entry, left by a declaration that failed to parse, prints as
    ``<error>``.
    """
    match stmt:
        case None:
            return '<error>'
        case ExpressionStmt(expression):
            return _parenthesize('expr', format_expr(expression))
        case PrintStmt(expression):
            return _parenthesize('print', format_expr(expression))
        case VarStmt(name, None):
            return _parenthesize('var', name.lexeme)
        case VarStmt(name, initializer):
            return _parenthesize('var', name.lexeme, format_expr(initializer))
        case _:
            return f"<stmt {type(stmt).__name__}>"
