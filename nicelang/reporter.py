"""Error reporting for the Nice front end.

The lexer and parser never print. They hand every diagnostic to a reporter,
which decides what to do with it: the command line session writes it to
stderr, the language server turns it into an editor diagnostic.


File: reporter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from nicelang.tokens import Token, TokenType


class ErrorReporter:
    """
    Base reporter for lexical and syntax errors.

    Subclasses implement :meth:`report`; the location formatting is shared.
    """

    def __init__(self):
        self.had_error = False

    def error(self, line: int, message: str) -> None:
        """
        Report an error with no token context.
        """
        self.report(line, "", message)

    def token_error(self, token: Token, message: str) -> None:
        """
        Report an error located at ``token``.
        """
        if token.type == TokenType.EOF:
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str) -> None:
        """
        Record a formatted diagnostic. Must set :attr:`had_error`.
        """
        raise NotImplementedError


def format_diagnostic(line: int, where: str, message: str) -> str:
    """
    Build the ``[line L] Error<where>: MSG`` diagnostic text.
    """
    return f"[line {line}] Error{where}: {message}"


class CollectingReporter(ErrorReporter):
    """
    Reporter that keeps diagnostics in memory instead of printing them.

    Each entry is a ``(line, message)`` pair where ``message`` is the full
    formatted diagnostic.
    """

    def __init__(self):
        super().__init__()
        self.diagnostics: list[tuple[int, str]] = []

    def report(self, line: int, where: str, message: str) -> None:
        self.diagnostics.append((line, format_diagnostic(line, where, message)))
        self.had_error = True
