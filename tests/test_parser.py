import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from clue.lexer import Lexer, TokenKind, tokenize
from clue.parser import Parser, ParseError
from clue import ast as ast_nodes


def log_feature(name: str):
    # Helps surface which language feature a test is exercising when run with -s
    print(f"[feature] {name}")


def parse(code: str):
    tokens = Lexer(code).scan()
    return Parser(tokens).parse()


def test_parse_declaration_assignment_and_print():
    log_feature("declaration, assignment and print")
    program = parse("global a = 1; print(a); a = 2; print(a);")
    assert len(program.statements) == 4
    assert isinstance(program.statements[0], ast_nodes.Declaration)
    assert isinstance(program.statements[1], ast_nodes.Print)
    assert isinstance(program.statements[2], ast_nodes.Assign)
    assert isinstance(program.statements[3], ast_nodes.Print)


def test_parse_declaration_fields():
    log_feature("declaration fields")
    decl = parse("global total = 12;").statements[0]
    assert decl.name == "total"
    assert isinstance(decl.initializer, ast_nodes.Number)
    assert decl.initializer.value == "12"
    assert decl.offset == 0


def test_parse_reference_initializer():
    log_feature("reference expression")
    decl = parse("global b = a;").statements[0]
    assert isinstance(decl.initializer, ast_nodes.Var)
    assert decl.initializer.name == "a"


def test_parse_accepts_undeclared_names():
    log_feature("no semantic checks in parser")
    program = parse("x = y; print(z);")
    assert isinstance(program.statements[0], ast_nodes.Assign)
    assert program.statements[0].name == "x"


def test_parse_empty_program():
    log_feature("empty program")
    assert parse("").statements == []


def test_parse_from_lazy_token_stream():
    log_feature("lazy token stream")
    program = Parser(tokenize("global a = 1;\nprint(a);")).parse()
    assert len(program.statements) == 2
    assert program.statements[1].line == 2


def test_parse_missing_expression_reports_semicolon():
    log_feature("missing expression")
    with pytest.raises(ParseError) as exc:
        parse("global a = ;")
    err = exc.value
    assert err.offset == 11
    assert err.found.kind == TokenKind.SEMICOLON
    assert err.expected == (TokenKind.NUMBER, TokenKind.IDENT)
    assert err.kind == "parse"


def test_parse_missing_semicolon():
    log_feature("missing semicolon")
    with pytest.raises(ParseError) as exc:
        parse("global a = 1")
    err = exc.value
    assert err.expected == (TokenKind.SEMICOLON,)
    assert err.found.kind == TokenKind.EOF
    assert "found <end>" in err.message


def test_parse_print_requires_parentheses():
    log_feature("print parentheses")
    with pytest.raises(ParseError) as exc:
        parse("print a;")
    assert exc.value.expected == (TokenKind.LPAREN,)
    assert exc.value.offset == 6


def test_parse_global_requires_name():
    log_feature("global name")
    with pytest.raises(ParseError) as exc:
        parse("global 1 = 2;")
    assert exc.value.expected == (TokenKind.IDENT,)


def test_parse_bad_statement_start():
    log_feature("bad statement start")
    with pytest.raises(ParseError) as exc:
        parse("1 = a;")
    err = exc.value
    assert TokenKind.KEYWORD_GLOBAL in err.expected
    assert err.offset == 0


def test_parse_stream_without_eof():
    log_feature("token stream without EOF")
    tokens = Lexer("print(a);").scan()[:-1]
    with pytest.raises(ParseError) as exc:
        Parser(tokens).parse()
    assert exc.value.expected == (TokenKind.EOF,)
