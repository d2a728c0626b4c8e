"""
Clue lexer.

Turns source text into tokens: the ``global`` and ``print`` keywords,
identifiers, decimal numbers and the ``= ; ( )`` punctuation. Tokens are
produced lazily; ``scan`` collects them into a list.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterator, List

from .errors import CompileError


class TokenKind(Enum):
    # Literals / identifiers
    IDENT = auto()
    NUMBER = auto()

    # Keywords
    KEYWORD_GLOBAL = auto()
    KEYWORD_PRINT = auto()

    # Punctuation
    ASSIGN = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()

    EOF = auto()


KEYWORDS: Dict[str, TokenKind] = {
    "global": TokenKind.KEYWORD_GLOBAL,
    "print": TokenKind.KEYWORD_PRINT,
}

SYMBOLS: Dict[str, TokenKind] = {
    "=": TokenKind.ASSIGN,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# How each kind is spelled in diagnostics.
DISPLAY: Dict[TokenKind, str] = {
    TokenKind.IDENT: "identifier",
    TokenKind.NUMBER: "number",
    TokenKind.KEYWORD_GLOBAL: "'global'",
    TokenKind.KEYWORD_PRINT: "'print'",
    TokenKind.ASSIGN: "'='",
    TokenKind.SEMICOLON: "';'",
    TokenKind.LPAREN: "'('",
    TokenKind.RPAREN: "')'",
    TokenKind.EOF: "<end>",
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    offset: int
    line: int = 1
    col: int = 1

    def describe(self) -> str:
        if self.kind == TokenKind.EOF:
            return "<end>"
        return f"'{self.lexeme}'"


class LexError(CompileError):
    kind = "lex"

    def __init__(self, char: str, offset: int, line: int, col: int):
        self.reason = "UnexpectedCharacter"
        self.char = char
        super().__init__(
            f"Unexpected character {char!r}", offset=offset, line=line, col=col
        )


def _is_ident_start(c: str) -> bool:
    return c.isascii() and (c.isalpha() or c == "_")


def _is_ident_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c == "_")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.line = 1
        self.col = 1
        self.start = 0
        self.start_line = 1
        self.start_col = 1

    def scan(self) -> List[Token]:
        return list(self.tokens())

    def tokens(self) -> Iterator[Token]:
        self.pos = 0
        self.line = 1
        self.col = 1
        while not self._is_at_end():
            self.start = self.pos
            self.start_line = self.line
            self.start_col = self.col
            c = self._advance()

            if c == "\n":
                self.line += 1
                self.col = 1
                continue
            if c.isspace():
                continue

            if _is_digit(c):
                while _is_digit(self._peek()):
                    self._advance()
                yield self._make(TokenKind.NUMBER)
                continue

            if _is_ident_start(c):
                while _is_ident_char(self._peek()):
                    self._advance()
                text = self.source[self.start : self.pos]
                yield self._make(KEYWORDS.get(text, TokenKind.IDENT))
                continue

            kind = SYMBOLS.get(c)
            if kind is not None:
                yield self._make(kind)
                continue

            raise LexError(c, self.start, self.start_line, self.start_col)

        yield Token(TokenKind.EOF, "", self.length, self.line, self.col)

    def _make(self, kind: TokenKind) -> Token:
        return Token(
            kind,
            self.source[self.start : self.pos],
            self.start,
            self.start_line,
            self.start_col,
        )

    def _is_at_end(self) -> bool:
        return self.pos >= self.length

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        self.col += 1
        return ch

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.pos]


def tokenize(source: str) -> Iterator[Token]:
    return Lexer(source).tokens()


__all__ = ["Lexer", "Token", "TokenKind", "LexError", "KEYWORDS", "tokenize"]
