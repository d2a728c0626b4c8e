"""AST node definitions for the Clue language."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


# Base node for location info
@dataclass(kw_only=True)
class Node:
    offset: Optional[int] = None
    line: Optional[int] = None
    col: Optional[int] = None


# Expressions
@dataclass
class Expr(Node):
    pass


@dataclass
class Number(Expr):
    value: str  # raw digits, emitted verbatim


@dataclass
class Var(Expr):
    name: str
    # Filled in by the resolver.
    declaration: Optional["Declaration"] = field(
        default=None, kw_only=True, compare=False, repr=False
    )


# Statements
@dataclass
class Stmt(Node):
    pass


@dataclass
class Declaration(Stmt):
    name: str
    initializer: Expr


@dataclass
class Assign(Stmt):
    name: str
    value: Expr
    declaration: Optional[Declaration] = field(
        default=None, kw_only=True, compare=False, repr=False
    )


@dataclass
class Print(Stmt):
    argument: Expr


@dataclass
class Program(Node):
    statements: List[Stmt]


__all__ = [
    "Node",
    "Expr",
    "Stmt",
    "Program",
    "Number",
    "Var",
    "Declaration",
    "Assign",
    "Print",
]
