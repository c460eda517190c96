"""Main parser entry point for Nice.

This module defines the `Parser` class, which owns the token cursor and
coordinates the recursive descent parsing process. The actual parsing
routines are split across `nicelang.parser.expressions` and
`nicelang.parser.statements`.

Error recovery is panic mode: a failed :meth:`Parser.consume` reports the
error and raises :class:`ParseError`, which unwinds to the enclosing
declaration. That declaration is dropped (``None`` in the result list) and
:meth:`Parser.synchronize` skips ahead to the next statement boundary.
Expressions nested deeper than the Python stack allows are reported the same
way, with "Expression nesting too deep.".


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

from nicelang.ast_nodes import Expr, Stmt
from nicelang.exceptions import ParseError
from nicelang.reporter import ErrorReporter
from nicelang.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt


# Token types that start a statement; synchronisation stops before them.
STATEMENT_STARTS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


class Parser:
    """Nice parser."""

    def __init__(self, tokens: list[Token], reporter: ErrorReporter):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
            reporter (ErrorReporter): Receives syntax errors.
        """
        self.tokens = tokens
        self.reporter = reporter
        self.position = 0

    # Token cursor
    def peek(self) -> Token:
        """
        Return the current token without consuming it.
        """
        return self.tokens[self.position]

    def previous(self) -> Token:
        """
        Return the most recently consumed token.
        """
        return self.tokens[self.position - 1]

    def at_end(self) -> bool:
        """
        Return ``True`` once the cursor reaches EOF.
        """
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        """
        Consume the current token and return it. EOF is never consumed.
        """
        if not self.at_end():
            self.position += 1
        return self.previous()

    def check(self, token_type: TokenType) -> bool:
        """
        Return ``True`` if the current token has the given type.
        """
        if self.at_end():
            return False
        return self.peek().type == token_type

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it has any of the given types.
        """
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            message (str): Error message reported on mismatch.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        """
        Report a syntax error at ``token`` and return the signal to raise.
        """
        self.reporter.token_error(token, message)
        return ParseError(message)

    def synchronize(self) -> None:
        """
        Discard tokens until a likely statement boundary.
        """
        self.advance()
        while not self.at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return
            self.advance()


    # Expression wrappers
    def expression(self) -> Expr:
        """
        Parse a full expression.
        """
        return _expr.parse_expression(self)


    # Statement wrappers
    def declaration(self) -> Optional[Stmt]:
        """
        Parse a declaration, recovering from syntax errors.
        """
        return _stmt.parse_declaration(self)

    def statement(self) -> Stmt:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_var(self) -> Stmt:
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_var(self)

    def parse_print(self) -> Stmt:
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_expression_statement(self) -> Stmt:
        """
        Parse an expression statement.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> list[Optional[Stmt]]:
        """
        Parse the full input into a list of statements.

        Declarations that failed to parse appear as ``None``.
        """
        statements = []
        while not self.at_end():
            statements.append(self.declaration())
        return statements
