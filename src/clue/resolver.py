"""Declaration resolution for Clue.

Checks, in one forward pass over the program:
- every assignment target and variable reference names an earlier
  ``global`` declaration
- no name is declared twice

Programs have a single flat scope. Resolution annotates ``Var`` and
``Assign`` nodes with the declaration they refer to and otherwise leaves
the tree untouched.
"""

from __future__ import annotations

from typing import Dict, Optional

from . import ast
from .errors import CompileError


class ResolveError(CompileError):
    kind = "resolve"

    def __init__(
        self,
        reason: str,
        name: str,
        node: ast.Node,
        previous: Optional[ast.Declaration] = None,
    ):
        self.reason = reason
        self.name = name
        self.previous = previous
        if reason == "DuplicateDeclaration":
            message = f"variable '{name}' already declared"
            hint = None
            if previous is not None and previous.line is not None:
                hint = f"'{name}' was first declared at {previous.line}:{previous.col}"
        else:
            message = f"undeclared variable '{name}'"
            hint = f"declare it first with 'global {name} = ...;'"
        super().__init__(
            message, offset=node.offset, line=node.line, col=node.col, help=hint
        )


class SymbolTable:
    def __init__(self):
        self.symbols: Dict[str, ast.Declaration] = {}

    def declare(self, decl: ast.Declaration) -> None:
        previous = self.symbols.get(decl.name)
        if previous is not None:
            raise ResolveError("DuplicateDeclaration", decl.name, decl, previous)
        self.symbols[decl.name] = decl

    def lookup(self, name: str) -> Optional[ast.Declaration]:
        return self.symbols.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)


class Resolver:
    def __init__(self):
        self.table = SymbolTable()

    def resolve(self, program: ast.Program) -> ast.Program:
        for stmt in program.statements:
            self._stmt(stmt)
        return program

    # --- statements ---
    def _stmt(self, node: ast.Stmt):
        if isinstance(node, ast.Declaration):
            self._expr(node.initializer)
            self.table.declare(node)
            return
        if isinstance(node, ast.Assign):
            self._expr(node.value)
            node.declaration = self._require(node.name, node)
            return
        if isinstance(node, ast.Print):
            self._expr(node.argument)
            return
        raise TypeError(f"Unhandled statement {node}")

    # --- expressions ---
    def _expr(self, node: ast.Expr):
        if isinstance(node, ast.Number):
            return
        if isinstance(node, ast.Var):
            node.declaration = self._require(node.name, node)
            return
        raise TypeError(f"Unhandled expr {node}")

    def _require(self, name: str, node: ast.Node) -> ast.Declaration:
        decl = self.table.lookup(name)
        if decl is None:
            raise ResolveError("UndeclaredIdentifier", name, node)
        return decl


def resolve(program: ast.Program) -> ast.Program:
    return Resolver().resolve(program)


__all__ = ["Resolver", "ResolveError", "SymbolTable", "resolve"]
