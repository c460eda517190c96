"""Token model for Nice.

Defines the closed set of token types produced by the lexer, the immutable
:class:`Token` record and the reserved word table. Reserved words for
features the parser does not implement (``class``, ``fun``, ``if`` …) are
still recognised here so they can never be used as identifiers.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from nicelang.values import format_number


class TokenType(Enum):
    """
    Enumeration of token types.
    """

    # Single-character punctuation
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # One or two character operators
    NOT = auto()            # !
    NOTEQ = auto()          # !=
    ASSIGN = auto()         # =
    EQ = auto()             # ==
    GREATER = auto()        # >
    GEQ = auto()            # >=
    LESS = auto()           # <
    LEQ = auto()            # <=

    # Literals
    IDENT = auto()
    STRING = auto()
    NUMBER = auto()

    # Reserved words
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    ELIF = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


KEYWORDS: dict[str, TokenType] = {
    'and': TokenType.AND,
    'class': TokenType.CLASS,
    'else': TokenType.ELSE,
    'elif': TokenType.ELIF,
    'false': TokenType.FALSE,
    'for': TokenType.FOR,
    'fun': TokenType.FUN,
    'if': TokenType.IF,
    'nil': TokenType.NIL,
    'or': TokenType.OR,
    'print': TokenType.PRINT,
    'return': TokenType.RETURN,
    'super': TokenType.SUPER,
    'this': TokenType.THIS,
    'true': TokenType.TRUE,
    'var': TokenType.VAR,
    'while': TokenType.WHILE,
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Attributes:
        type (TokenType): The kind of token.
        lexeme (str): The exact slice of source the token was read from.
        literal (float | str | None): Parsed value for NUMBER and STRING tokens.
        line (int): 1-based source line.
        column (int): 0-based offset of the lexeme within its first line.
    """
    type: TokenType
    lexeme: str
    literal: float | str | None
    line: int
    column: int = field(default=0, compare=False)

    def __str__(self) -> str:
        """
        Render the token as ``KIND LEXEME LITERAL`` for the token listing.
        """
        literal = self.literal
        if literal is None:
            literal = 'null'
        elif isinstance(literal, float):
            literal = format_number(literal)
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
