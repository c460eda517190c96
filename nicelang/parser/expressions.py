"""
Expression parsing utilities for Nice.

These functions operate on a `nicelang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. Every binary level is
left-associative and built with a loop; assignment is the only
right-associative form.

Each level calls the next one directly, so a parenthesised group costs one
Python frame per precedence level.
"""

from typing import TYPE_CHECKING

from nicelang.ast_nodes import (
    Assign,
    Binary,
    Expr,
    Grouping,
    Literal,
    Unary,
    Variable,
)
from nicelang.tokens import TokenType

if TYPE_CHECKING:
    from nicelang.parser import Parser


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Expr:
    """Parse a literal, variable, or parenthesized expression."""
    if parser.match(TokenType.FALSE):
        return Literal(False)
    if parser.match(TokenType.TRUE):
        return Literal(True)
    if parser.match(TokenType.NIL):
        return Literal(None)

    if parser.match(TokenType.NUMBER, TokenType.STRING):
        return Literal(parser.previous().literal)

    if parser.match(TokenType.IDENT):
        return Variable(parser.previous())

    if parser.match(TokenType.LPAREN):
        expr = parse_assignment(parser)
        parser.consume(TokenType.RPAREN, "Expect ')' after expression.")
        return Grouping(expr)

    raise parser.error(parser.peek(), "Expected expression.")


def parse_unary(parser: 'Parser') -> Expr:
    """Parse prefix negation and logical not."""
    if parser.match(TokenType.NOT, TokenType.MINUS):
        operator = parser.previous()
        return Unary(operator, parse_unary(parser))
    return parse_primary(parser)


def parse_factor(parser: 'Parser') -> Expr:
    """Parse multiplication and division expressions."""
    expr = parse_unary(parser)
    while parser.match(TokenType.SLASH, TokenType.STAR):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_unary(parser))
    return expr


def parse_term(parser: 'Parser') -> Expr:
    """Parse addition and subtraction expressions."""
    expr = parse_factor(parser)
    while parser.match(TokenType.MINUS, TokenType.PLUS):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_factor(parser))
    return expr


def parse_comparison(parser: 'Parser') -> Expr:
    """Parse comparison expressions (<, >, <=, >=)."""
    expr = parse_term(parser)
    while parser.match(TokenType.GREATER, TokenType.GEQ, TokenType.LESS, TokenType.LEQ):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_term(parser))
    return expr


def parse_equality(parser: 'Parser') -> Expr:
    """Parse equality expressions (==, !=)."""
    expr = parse_comparison(parser)
    while parser.match(TokenType.NOTEQ, TokenType.EQ):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_comparison(parser))
    return expr


def parse_assignment(parser: 'Parser') -> Expr:
    """
    Parse an assignment.

    The left-hand side is parsed as an ordinary expression first; only a
    bare variable is a valid target. Anything else is reported at the ``=``
    token and returned unchanged, without unwinding the parser.
    """
    expr = parse_equality(parser)

    if parser.match(TokenType.ASSIGN):
        equals = parser.previous()
        value = parse_assignment(parser)

        if isinstance(expr, Variable):
            return Assign(expr.name, value)

        parser.error(equals, "Invalid assignment target.")

    return expr


# ---- Entry point ----

def parse_expression(parser: 'Parser') -> Expr:
    """Parse an expression starting from the lowest-precedence operator."""
    return parse_assignment(parser)
