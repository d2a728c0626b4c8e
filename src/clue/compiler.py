"""Compile entry point: lex, parse, resolve and emit in one call."""

from __future__ import annotations

from .emitter import Emitter
from .lexer import Lexer
from .parser import Parser
from .resolver import Resolver


def compile(source: str) -> str:
    """Compile Clue ``source`` to its canonical text.

    Raises ``LexError``, ``ParseError`` or ``ResolveError`` (all subclasses
    of ``CompileError``) on the first failure; nothing is returned in that
    case. Each call builds its own pipeline objects, so concurrent calls do
    not share state.
    """
    tokens = Lexer(source).scan()
    program = Parser(tokens).parse()
    Resolver().resolve(program)
    return Emitter().generate(program)


__all__ = ["compile"]
