"""Settings for a ``cluec`` run."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

OUTPUT_SUFFIX = ".lua"
SOURCE_SUFFIX = ".clue"


@dataclass
class Options:
    path: str
    outputname: Optional[Path] = None
    tokens: bool = False
    struct: bool = False
    output: bool = False
    dontsave: bool = False
    pathiscode: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Options":
        output = args.output
        if args.pathiscode:
            # Inline code has nowhere to be saved unless a name is given.
            output = args.outputname is None
        return cls(
            path=args.path,
            outputname=args.outputname,
            tokens=args.tokens,
            struct=args.struct,
            output=output,
            dontsave=args.dontsave,
            pathiscode=args.pathiscode,
            verbose=args.verbose,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cluec", description="Compile Clue source to canonical Lua-style code"
    )
    ap.add_argument(
        "path",
        help="A .clue file, a directory searched recursively for .clue files, "
        "or Clue code with --pathiscode",
    )
    ap.add_argument(
        "outputname",
        nargs="?",
        type=Path,
        default=None,
        help="Output file name (default: input with .lua suffix)",
    )
    ap.add_argument(
        "--tokens", action="store_true", help="Print the tokens of each input"
    )
    ap.add_argument(
        "--struct",
        action="store_true",
        help="Print the syntax structure of each input",
    )
    ap.add_argument(
        "-o", "--output", action="store_true", help="Print the compiled code"
    )
    ap.add_argument(
        "-D", "--dontsave", action="store_true", help="Don't save compiled code"
    )
    ap.add_argument(
        "-p",
        "--pathiscode",
        action="store_true",
        help="Treat PATH as Clue code instead of a path",
    )
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="Log each compilation step"
    )
    return ap


__all__ = ["Options", "build_arg_parser", "OUTPUT_SUFFIX", "SOURCE_SUFFIX"]
