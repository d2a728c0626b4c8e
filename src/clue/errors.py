"""Shared error type for every stage of the Clue pipeline.

Each stage raises its own subclass (``LexError``, ``ParseError``,
``ResolveError``); callers that only care about success/failure catch
``CompileError``.
"""

from __future__ import annotations

from typing import List, Optional


class CompileError(Exception):
    kind = "compile"

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        line: Optional[int] = None,
        col: Optional[int] = None,
        help: Optional[str] = None,
    ):
        self.message = message
        self.offset = offset
        self.line = line
        self.col = col
        self.help = help
        super().__init__(self._located(message))

    def _located(self, message: str) -> str:
        if self.line is not None and self.col is not None:
            return f"{message} at {self.line}:{self.col}"
        return message

    def render(self, source: str, filename: str = "<code>") -> str:
        """Format the error with the offending source line and a caret."""
        if self.line is None:
            header = f"Error in {filename}!"
        else:
            header = f"Error in {filename}:{self.line}:{self.col}!"
        out: List[str] = [header, ""]
        source_lines = source.split("\n")
        if self.line and 1 <= self.line <= len(source_lines):
            src_line = source_lines[self.line - 1]
            caret = " " * (self.col - 1 if self.col and self.col > 0 else 0) + "^"
            out.append(f"    {src_line}")
            out.append(f"    {caret}")
            out.append("")
        shown = self.message.replace("\n", "<new line>").replace("\t", "<tab>")
        out.append(f"Error: {shown}")
        if self.help:
            out.append(f"Help: {self.help}")
        return "\n".join(out)


__all__ = ["CompileError"]
