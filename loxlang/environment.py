"""Variable environment.

A single flat mapping from variable names to runtime values. Declarations
define names (redefinition overwrites the previous value) and identifier
expressions look them up. Looking up a name that was never defined is an
error, never a default value.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.exceptions import UndefinedVariableError
from loxlang.tokens import Token


class Environment:
    """Mapping of variable names to values."""

    def __init__(self):
        self.values: dict[str, object] = {}

    def define(self, name: str, value) -> None:
        """
        Bind ``name`` to ``value``.
        """
        self.values[name] = value

    def get(self, name: Token):
        """
        Return the value bound to the identifier token ``name``.

        Raises:
            UndefinedVariableError: If the name has not been defined.
        """
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        raise UndefinedVariableError(name)

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)
