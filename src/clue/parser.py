"""Recursive-descent parser for the Clue language."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from . import lexer
from .ast import Assign, Declaration, Expr, Number, Print, Program, Stmt, Var
from .errors import CompileError


class ParseError(CompileError):
    kind = "parse"

    def __init__(self, expected: Tuple[lexer.TokenKind, ...], found: lexer.Token):
        self.expected = expected
        self.found = found
        wanted = " or ".join(lexer.DISPLAY[k] for k in expected)
        super().__init__(
            f"Expected {wanted}, found {found.describe()}",
            offset=found.offset,
            line=found.line,
            col=found.col,
        )


STATEMENT_START = (
    lexer.TokenKind.KEYWORD_GLOBAL,
    lexer.TokenKind.KEYWORD_PRINT,
    lexer.TokenKind.IDENT,
)
EXPRESSION_START = (lexer.TokenKind.NUMBER, lexer.TokenKind.IDENT)


class Parser:
    def __init__(self, tokens: Iterable[lexer.Token]):
        self.tokens: Iterator[lexer.Token] = iter(tokens)
        self.last: lexer.Token | None = None
        self.current = self._pull()

    def parse(self) -> Program:
        stmts: List[Stmt] = []
        while not self._is_at_end():
            stmts.append(self._statement())
        first = stmts[0] if stmts else None
        return Program(
            statements=stmts,
            offset=first.offset if first else None,
            line=first.line if first else None,
            col=first.col if first else None,
        )

    # --- statements ---
    def _statement(self) -> Stmt:
        if self._match(lexer.TokenKind.KEYWORD_GLOBAL):
            kw = self.last
            name_tok = self._consume(lexer.TokenKind.IDENT)
            self._consume(lexer.TokenKind.ASSIGN)
            init = self._expression()
            self._consume(lexer.TokenKind.SEMICOLON)
            return Declaration(
                name=name_tok.lexeme,
                initializer=init,
                offset=kw.offset,
                line=kw.line,
                col=kw.col,
            )
        if self._match(lexer.TokenKind.KEYWORD_PRINT):
            kw = self.last
            self._consume(lexer.TokenKind.LPAREN)
            arg = self._expression()
            self._consume(lexer.TokenKind.RPAREN)
            self._consume(lexer.TokenKind.SEMICOLON)
            return Print(argument=arg, offset=kw.offset, line=kw.line, col=kw.col)
        if self._match(lexer.TokenKind.IDENT):
            name_tok = self.last
            self._consume(lexer.TokenKind.ASSIGN)
            value = self._expression()
            self._consume(lexer.TokenKind.SEMICOLON)
            return Assign(
                name=name_tok.lexeme,
                value=value,
                offset=name_tok.offset,
                line=name_tok.line,
                col=name_tok.col,
            )
        raise ParseError(STATEMENT_START, self.current)

    # --- expressions ---
    def _expression(self) -> Expr:
        tok = self.current
        if self._match(lexer.TokenKind.NUMBER):
            return Number(tok.lexeme, offset=tok.offset, line=tok.line, col=tok.col)
        if self._match(lexer.TokenKind.IDENT):
            return Var(tok.lexeme, offset=tok.offset, line=tok.line, col=tok.col)
        raise ParseError(EXPRESSION_START, tok)

    # --- helpers ---
    def _match(self, kind: lexer.TokenKind) -> bool:
        if self.current.kind == kind:
            self._advance()
            return True
        return False

    def _consume(self, kind: lexer.TokenKind) -> lexer.Token:
        if self.current.kind == kind:
            return self._advance()
        raise ParseError((kind,), self.current)

    def _advance(self) -> lexer.Token:
        self.last = self.current
        if not self._is_at_end():
            self.current = self._pull()
        return self.last

    def _pull(self) -> lexer.Token:
        tok = next(self.tokens, None)
        if tok is None:
            # Stream ran dry without an EOF token.
            end = self.last.offset + len(self.last.lexeme) if self.last else 0
            line = self.last.line if self.last else 1
            col = self.last.col + len(self.last.lexeme) if self.last else 1
            missing = lexer.Token(lexer.TokenKind.EOF, "", end, line, col)
            raise ParseError((lexer.TokenKind.EOF,), missing)
        return tok

    def _is_at_end(self) -> bool:
        return self.current.kind == lexer.TokenKind.EOF


def parse(tokens: Iterable[lexer.Token]) -> Program:
    return Parser(tokens).parse()


__all__ = ["Parser", "ParseError", "parse"]
