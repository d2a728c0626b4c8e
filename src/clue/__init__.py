from .errors import CompileError
from .lexer import Lexer, Token, TokenKind, LexError, tokenize
from .parser import Parser, ParseError, parse
from .resolver import Resolver, ResolveError, SymbolTable, resolve
from .emitter import Emitter, emit
from .compiler import compile
from .bindings import CompiledString, clue_compile, clue_free_string

__all__ = [
    "CompileError",
    "Lexer",
    "Token",
    "TokenKind",
    "LexError",
    "tokenize",
    "Parser",
    "ParseError",
    "parse",
    "Resolver",
    "ResolveError",
    "SymbolTable",
    "resolve",
    "Emitter",
    "emit",
    "compile",
    "CompiledString",
    "clue_compile",
    "clue_free_string",
]
