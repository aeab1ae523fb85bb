"""AST node definitions for Lox.

Expressions and declarations are small immutable dataclasses. The parser
builds them and the interpreter and AST printer dispatch over them with
``match`` statements. Operators and names are kept as the tokens they were
parsed from so runtime errors can point back into the source.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from loxlang.tokens import Token


# ---- Expressions ----

@dataclass(frozen=True)
class Literal:
    """A number, string, boolean or nil literal."""

    value: float | str | bool | None


@dataclass(frozen=True)
class Grouping:
    """A parenthesized expression."""

    expression: Expr


@dataclass(frozen=True)
class Unary:
    """A prefix ``!`` or ``-`` applied to an operand."""

    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary:
    """An infix operator applied to two operands."""

    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable:
    """A reference to a named variable."""

    name: Token


Expr = Union[Literal, Grouping, Unary, Binary, Variable]


# ---- Declarations and statements ----

@dataclass(frozen=True)
class Var:
    """``var name = initializer;``"""

    name: Token
    initializer: Expr


@dataclass(frozen=True)
class Expression:
    """An expression evaluated for its effects."""

    expression: Expr


@dataclass(frozen=True)
class Print:
    """``print expression;``"""

    expression: Expr


Decl = Union[Var, Expression, Print]
