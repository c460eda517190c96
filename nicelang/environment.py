"""Global variable environment for Nice.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from nicelang.exceptions import UndefinedVariableException
from nicelang.tokens import Token
from nicelang.values import Value


class Environment:
    """Maps variable names to values."""

    def __init__(self):
        self.values: dict[str, Value] = {}

    def define(self, name: str, value: Value) -> None:
        """
        Bind ``name`` to ``value``, replacing any previous binding.
        """
        self.values[name] = value

    def get(self, name: Token) -> Value:
        """
        Look up the variable named by ``name``.

        Raises:
            UndefinedVariableException: If the variable was never defined.
        """
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        raise UndefinedVariableException(name)

    def assign(self, name: Token, value: Value) -> None:
        """
        Update an existing binding.

        Raises:
            UndefinedVariableException: If the variable was never defined.
        """
        if name.lexeme not in self.values:
            raise UndefinedVariableException(name)
        self.values[name.lexeme] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values
