"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from nicelang.tokens import Token


class ParseError(Exception):
    """
    Control flow handling for syntax errors.

    Raised by the parser once an error has been reported and caught at the
    declaration boundary, where the parser resynchronises.
    """
    pass


class NiceRuntimeError(Exception):
    """
    Error raised while evaluating a program.
    """
    def __init__(self, token: Token, message: str):
        self.token = token
        self.message = message
        super().__init__(message)

    @property
    def line(self) -> int:
        """
        Line of the token the error is attributed to.
        """
        return self.token.line


class UndefinedVariableException(NiceRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, name: Token):
        self.varname = name.lexeme
        super().__init__(name, f"Undefined variable '{name.lexeme}'.")
