"""
Utility functions shared across Nice Language tests.
"""
from nicelang.interpreter import Interpreter
from nicelang.lexer import tokenize
from nicelang.parser import Parser
from nicelang.reporter import CollectingReporter
from nicelang.session import Session


def lex_source(source: str):
    """
    Tokenize source code and return the tokens and the reporter.
    """
    reporter = CollectingReporter()
    return tokenize(source, reporter), reporter


def parse_source(source: str):
    """
    Parse source code and return the statements and the reporter.
    """
    tokens, reporter = lex_source(source)
    return Parser(tokens, reporter).parse(), reporter


def execute_source(source: str) -> Interpreter:
    """
    Parse and run source code, letting runtime errors propagate.
    """
    statements, reporter = parse_source(source)
    assert not reporter.diagnostics, reporter.diagnostics
    interpreter = Interpreter()
    interpreter.interpret(statements)
    return interpreter


def run_source(source: str) -> Session:
    """
    Run source code through a fresh session and return it.
    """
    session = Session()
    session.run(source)
    return session


def program_output(out: str) -> list[str]:
    """
    Strip the token listing from captured stdout, leaving program output.

    The listing always ends with the EOF token line (``EOF  null``).
    """
    lines = out.splitlines()
    last_eof = max(i for i, line in enumerate(lines) if line.startswith("EOF "))
    return lines[last_eof + 1:]
