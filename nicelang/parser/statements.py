"""
Statement parsing utilities for Nice.

These functions operate on a `nicelang.parser.parser.Parser` instance and
handle the statement forms of the language: variable declarations,
``print`` statements and expression statements.
"""

from typing import TYPE_CHECKING, Optional

from nicelang.ast_nodes import ExpressionStmt, PrintStmt, Stmt, VarStmt
from nicelang.exceptions import ParseError
from nicelang.tokens import TokenType

if TYPE_CHECKING:
    from nicelang.parser import Parser


def parse_declaration(parser: 'Parser') -> Optional[Stmt]:
    """
    Parse a declaration.

    This is the only place syntax errors are caught. The failed declaration
    yields ``None`` and the parser skips to the next statement boundary.
    Running out of Python stack on a deeply nested expression is reported
    as a syntax error at the token reached and recovered from the same way.

    Args:
        parser: The parser instance.

    Returns:
        The statement node, or ``None`` if it could not be parsed.
    """
    try:
        if parser.match(TokenType.VAR):
            return parser.parse_var()
        return parser.statement()
    except ParseError:
        parser.synchronize()
        return None
    except RecursionError:
        parser.error(parser.peek(), "Expression nesting too deep.")
        parser.synchronize()
        return None


def parse_statement(parser: 'Parser') -> Stmt:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    if parser.match(TokenType.PRINT):
        return parser.parse_print()
    return parser.parse_expression_statement()


def parse_print(parser: 'Parser') -> Stmt:
    """
    Parse a print statement. The ``print`` keyword is already consumed.

    Syntax:
        print <expression> ;
    """
    value = parser.expression()
    parser.consume(TokenType.SEMICOLON, "Expect ';' after value.")
    return PrintStmt(value)


def parse_var(parser: 'Parser') -> Stmt:
    """
    Parse a variable declaration. The ``var`` keyword is already consumed.

    Syntax:
        var <identifier> ( = <expression> )? ;
    """
    name = parser.consume(TokenType.IDENT, "Expect variable name.")

    initializer = None
    if parser.match(TokenType.ASSIGN):
        initializer = parser.expression()

    parser.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
    return VarStmt(name, initializer)


def parse_expression_statement(parser: 'Parser') -> Stmt:
    """Parse an expression followed by ``;``."""
    expr = parser.expression()
    parser.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
    return ExpressionStmt(expr)
