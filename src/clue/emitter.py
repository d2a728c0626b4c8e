"""Canonical Clue output.

Renders a resolved program one statement per line. Declarations lose their
``global`` qualifier; assumes the program already passed the resolver.
"""

from __future__ import annotations

from typing import List

from . import ast


class Emitter:
    def __init__(self):
        self.lines: List[str] = []

    def generate(self, program: ast.Program) -> str:
        self.lines = []
        for stmt in program.statements:
            self._stmt(stmt)
        return "".join(line + "\n" for line in self.lines)

    # --- statements ---
    def _stmt(self, node: ast.Stmt):
        if isinstance(node, ast.Declaration):
            self._emit(f"{node.name} = {self._expr(node.initializer)};")
            return
        if isinstance(node, ast.Assign):
            self._emit(f"{node.name} = {self._expr(node.value)};")
            return
        if isinstance(node, ast.Print):
            self._emit(f"print({self._expr(node.argument)});")
            return
        raise TypeError(f"Unhandled statement: {node}")

    # --- expressions ---
    def _expr(self, node: ast.Expr) -> str:
        if isinstance(node, ast.Number):
            return node.value
        if isinstance(node, ast.Var):
            return node.name
        raise TypeError(f"Unhandled expr: {node}")

    # --- helpers ---
    def _emit(self, line: str):
        self.lines.append(line)


def emit(program: ast.Program) -> str:
    return Emitter().generate(program)


__all__ = ["Emitter", "emit"]
