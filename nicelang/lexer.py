"""Lexer for Nice.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match is either skipped
(whitespace, newlines, ``//`` comments) or turned into a :class:`Token`
carrying its type, exact lexeme, literal value and source line number.

Lexical errors do not stop the scan. Unexpected characters and unterminated
strings are handed to the error reporter and lexing carries on, so the
caller always receives a token list ending in ``EOF``.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from nicelang.reporter import ErrorReporter
from nicelang.tokens import KEYWORDS, Token, TokenType


# Order matters: two-character operators must be tried before their
# one-character prefixes, and comments before SLASH.
TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('STRING',        r'"[^"]*"'),
    ('UNTERMINATED',  r'"[^"]*\Z'),
    ('NUMBER',        r'[0-9]+(?:\.[0-9]+)?'),
    ('IDENT',         r'[A-Za-z_][A-Za-z0-9_]*'),

    # Comments
    ('COMMENT',       r'//[^\n]*'),

    # Two-character operators
    ('NOTEQ',         r'!='),
    ('EQ',            r'=='),
    ('GEQ',           r'>='),
    ('LEQ',           r'<='),

    # One-character operators
    ('NOT',           r'!'),
    ('ASSIGN',        r'='),
    ('GREATER',       r'>'),
    ('LESS',          r'<'),

    # Punctuation
    ('LPAREN',        r'\('),
    ('RPAREN',        r'\)'),
    ('LBRACE',        r'\{'),
    ('RBRACE',        r'\}'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('MINUS',         r'-'),
    ('PLUS',          r'\+'),
    ('SEMICOLON',     r';'),
    ('SLASH',         r'/'),
    ('STAR',          r'\*'),

    # Miscellaneous
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \r\t]+'),
    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


class Lexer:
    """
    Converts Nice source text into tokens.
    """

    def __init__(self, source: str, reporter: ErrorReporter):
        """
        Initialize the lexer.

        Parameters:
            source (str): The source code to tokenize.
            reporter (ErrorReporter): Receives lexical errors.
        """
        self.source = source
        self.reporter = reporter
        self.tokens: list[Token] = []
        self.line = 1
        self.line_start = 0
        self.column = 0

    def scan_tokens(self) -> list[Token]:
        """
        Tokenize the whole source.

        Returns:
            list[Token]: The tokens read, always terminated by an EOF token.
        """
        for match_obj in TOKEN_REGEX.finditer(self.source):
            kind = match_obj.lastgroup
            lexeme = match_obj.group()
            self.column = match_obj.start() - self.line_start

            if kind == 'NEWLINE':
                self.line += 1
                self.line_start = match_obj.end()
            elif kind in ('SKIP', 'COMMENT'):
                continue
            elif kind == 'MISMATCH':
                self.reporter.error(self.line, "Unexpected character.")
            elif kind == 'STRING':
                self._skip_lines(match_obj)
                self._add_token(TokenType.STRING, lexeme, lexeme[1:-1])
            elif kind == 'UNTERMINATED':
                self._skip_lines(match_obj)
                self.reporter.error(self.line, "Unterminated string.")
            elif kind == 'NUMBER':
                self._add_token(TokenType.NUMBER, lexeme, float(lexeme))
            elif kind == 'IDENT':
                self._add_token(KEYWORDS.get(lexeme, TokenType.IDENT), lexeme)
            else:
                self._add_token(TokenType[kind], lexeme)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _add_token(self, type_: TokenType, lexeme: str, literal=None) -> None:
        self.tokens.append(Token(type_, lexeme, literal, self.line, self.column))

    def _skip_lines(self, match_obj: re.Match) -> None:
        # Newlines inside a string literal still advance the line counter.
        newlines = match_obj.group().count('\n')
        if newlines:
            self.line += newlines
            self.line_start = match_obj.start() + match_obj.group().rfind('\n') + 1


def tokenize(source: str, reporter: ErrorReporter) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.
        reporter (ErrorReporter): Receives lexical errors.

    Returns:
        list[Token]: A list of Token instances ending with EOF.
    """
    return Lexer(source, reporter).scan_tokens()
