"""cluec: compile Clue source files, directories, or inline code."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from .emitter import Emitter
from .errors import CompileError
from .lexer import Lexer
from .options import OUTPUT_SUFFIX, SOURCE_SUFFIX, Options, build_arg_parser
from .parser import Parser
from .resolver import Resolver


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    options = Options.from_args(args)

    if options.pathiscode:
        out_path = options.outputname if not options.dontsave else None
        return 0 if _compile_source(options.path, "<code>", out_path, options) else 1

    path = Path(options.path)
    if path.is_file():
        out_path = options.outputname or path.with_suffix(OUTPUT_SUFFIX)
        return 0 if _compile_file(path, out_path, options) else 1
    if path.is_dir():
        if options.outputname is not None:
            log_error("an output name can only be given for a single file")
            return 1
        sources = sorted(path.rglob(f"*{SOURCE_SUFFIX}"))
        if not sources:
            log_error(f"no {SOURCE_SUFFIX} files found in {path}")
            return 1
        ok = True
        for src in sources:
            if not _compile_file(src, src.with_suffix(OUTPUT_SUFFIX), options):
                ok = False
        return 0 if ok else 1

    log_error(f"path not found: {path}")
    return 1


def _compile_file(path: Path, out_path: Path, options: Options) -> bool:
    try:
        src = path.read_text(encoding="utf-8")
    except OSError as e:
        log_error(f"cannot read {path}: {e}")
        return False
    target = None if options.dontsave else out_path
    return _compile_source(src, str(path), target, options)


def _compile_source(
    src: str, filename: str, out_path: Optional[Path], options: Options
) -> bool:
    try:
        log_step(options, f"lexing {filename}")
        tokens = Lexer(src).scan()
        if options.tokens:
            for t in tokens:
                print(f"{t.kind.name}\t{t.lexeme!r}\t(line {t.line})")
        log_step(options, "parsing")
        program = Parser(tokens).parse()
        if options.struct:
            for stmt in program.statements:
                print(repr(stmt))
        log_step(options, "resolving declarations")
        Resolver().resolve(program)
        log_step(options, "emitting")
        code = Emitter().generate(program)
    except CompileError as e:
        print(e.render(src, filename), file=sys.stderr)
        return False

    if options.output:
        print(code, end="")
    if out_path is not None:
        try:
            out_path.write_text(code, encoding="utf-8")
        except OSError as e:
            log_error(f"cannot write {out_path}: {e}")
            return False
        log_step(options, f"wrote {out_path}")
    return True


def log_step(options: Options, msg: str) -> None:
    if options.verbose:
        print(f"[cluec] {msg}...")


def log_error(msg: str) -> None:
    print(f"[cluec:error] {msg}", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
