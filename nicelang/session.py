"""Interpreter session.

A :class:`Session` ties the pipeline together for the command line driver:

1. The lexer turns the source into tokens.
2. Every token is listed on stdout.
3. The parser builds the statement list.
4. Unless a lexical or syntax error was reported, the interpreter runs it.

The session is also the error reporter for all three stages. Lexical and
syntax errors set :attr:`had_error`; runtime errors set
:attr:`had_runtime_error`. Both are written to stderr, as is running out of
Python stack while evaluating, which counts as a runtime error. The interpreter, and
with it the variable environment, lives as long as the session so that a
REPL keeps its bindings between lines.


File: session.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys

from nicelang.ast_printer import format_stmt
from nicelang.exceptions import NiceRuntimeError
from nicelang.interpreter import Interpreter
from nicelang.lexer import tokenize
from nicelang.parser import Parser
from nicelang.reporter import ErrorReporter, format_diagnostic


class Session(ErrorReporter):
    """Driver state for one interpreter lifetime."""

    def __init__(self, debug: bool = False):
        """
        Initialize the session.

        Parameters:
            debug (bool): Print the parsed AST after the token listing.
        """
        super().__init__()
        self.had_runtime_error = False
        self.debug = debug
        self.interpreter = Interpreter(on_runtime_error=self.runtime_error)

    def run(self, source: str) -> None:
        """
        Lex, parse and, if no errors were reported, interpret ``source``.
        """
        tokens = tokenize(source, self)
        statements = Parser(tokens, self).parse()

        for token in tokens:
            print(token)

        if self.debug:
            debug_print_ast(statements)

        if self.had_error:
            return

        try:
            self.interpreter.interpret(statements)
        except RecursionError:
            print("Expression nesting too deep.", file=sys.stderr)
            self.had_runtime_error = True

    def report(self, line: int, where: str, message: str) -> None:
        print(format_diagnostic(line, where, message), file=sys.stderr)
        self.had_error = True

    def runtime_error(self, error: NiceRuntimeError) -> None:
        """
        Report a runtime error raised by the interpreter.
        """
        print(f"{error.message}\n[line {error.line}]", file=sys.stderr)
        self.had_runtime_error = True


def debug_print_ast(statements) -> None:
    """
    Print the parsed AST
    """
    print("\nAST:\n")
    for stmt in statements:
        print(format_stmt(stmt))
    print(" ")
